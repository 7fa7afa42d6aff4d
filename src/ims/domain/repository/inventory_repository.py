"""Abstract repository for the InventoryItem entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON) live in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from ims.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @property
    @abstractmethod
    def lock(self) -> AbstractContextManager:
        """Re-entrant lock guarding lookup, mutation and commit of this
        repository's items.

        Every service working on the same repository shares it.
        """

    @abstractmethod
    def add(self, item: InventoryItem) -> None:
        """Track a new item. Duplicate ids are not checked."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every tracked item."""

    @abstractmethod
    def save(self) -> None:
        """Commit all pending changes.

        Callers must invoke this after every mutation, whether or not
        the backing store needs it.
        """
