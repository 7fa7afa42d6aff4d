"""Abstract repository for the Product entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Track a new product. Duplicate ids are not checked."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every product, in insertion order."""

    @abstractmethod
    def save(self) -> None:
        """Commit all pending changes."""
