"""Read side: queries and the handler that dispatches them.

A ``Query[T]`` wraps one read behind ``execute() -> T``. Queries never
mutate state and never call ``save()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import structlog

from ims.application.dto import InventoryItemDTO
from ims.domain.exceptions import ItemNotFoundError
from ims.domain.model.product import Product
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Query(ABC, Generic[T]):

    @abstractmethod
    def execute(self) -> T:
        """Run the read and return its result."""


class QueryHandler:
    """Uniform dispatch point for any Query, generic over its result."""

    def handle(self, query: Query[T]) -> T:
        logger.debug("Dispatching query", query=type(query).__name__)
        return query.execute()


# --- Catalog ------------------------------------------------------------------


class GetAllProductsQuery(Query[list[Product]]):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self) -> list[Product]:
        return self._product_repo.list_all()


# --- Inventory ----------------------------------------------------------------


class GetInventoryItemQuery(Query[InventoryItemDTO]):

    def __init__(self, inventory_repo: InventoryRepository, item_id: str) -> None:
        self._inventory_repo = inventory_repo
        self.item_id = item_id

    def execute(self) -> InventoryItemDTO:
        item = self._inventory_repo.get_by_id(self.item_id)
        if item is None:
            raise ItemNotFoundError(self.item_id)
        return InventoryItemDTO.from_entity(item)


class ListInventoryItemsQuery(Query[list[InventoryItemDTO]]):

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def execute(self) -> list[InventoryItemDTO]:
        return [
            InventoryItemDTO.from_entity(item)
            for item in self._inventory_repo.list_all()
        ]
