"""In-memory implementations of the repository interfaces.

Each instance owns its own list; nothing is shared between instances.
Entities are handed out by reference, so mutations are visible to every
holder as soon as they happen and ``save()`` has nothing to commit.
"""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager

import structlog

from ims.domain.model.inventory import InventoryItem
from ims.domain.model.product import Product
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class InMemoryInventoryRepository(InventoryRepository):

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._items: list[InventoryItem] = list(items or [])
        self._lock = threading.RLock()

    @property
    def lock(self) -> AbstractContextManager:
        return self._lock

    def add(self, item: InventoryItem) -> None:
        with self._lock:
            self._items.append(item)

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        return None

    def list_all(self) -> list[InventoryItem]:
        with self._lock:
            return list(self._items)

    def save(self) -> None:
        logger.debug("In-memory inventory commit", items=len(self._items))


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])
        self._lock = threading.Lock()

    def add(self, product: Product) -> None:
        with self._lock:
            self._products.append(product)

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def save(self) -> None:
        logger.debug("In-memory product commit", products=len(self._products))
