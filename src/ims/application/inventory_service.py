"""Application service: inventory stock management.

Orchestrates the InventoryItem entity and its repository. Every
mutating call follows the same shape: look up, delegate to the entity,
commit via ``save()``. A failed entity call skips the commit.

The whole sequence runs under the repository's lock, so services
sharing one repository never interleave on the same item.
"""

from __future__ import annotations

import structlog

from ims.domain.exceptions import ItemNotFoundError
from ims.domain.model.inventory import InventoryItem
from ims.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


class InventoryService:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def create_inventory_item(
        self,
        name: str,
        quantity: int,
        item_id: str | None = None,
    ) -> InventoryItem:
        """Create a new item, track it and commit.

        *item_id* lets a caller choose the identity up front (commands do
        this); otherwise one is generated.
        """
        item = InventoryItem.create(name=name, quantity=quantity, item_id=item_id)
        with self._inventory_repo.lock:
            self._inventory_repo.add(item)
            self._inventory_repo.save()
        logger.info(
            "Inventory item created",
            item_id=item.id,
            name=item.name,
            quantity=item.quantity,
        )
        return item

    def add_stock(self, item_id: str, quantity: int) -> None:
        with self._inventory_repo.lock:
            item = self._get_or_raise(item_id)
            item.add_stock(quantity)
            self._inventory_repo.save()
        if quantity <= 0:
            logger.debug("Non-positive stock addition ignored", item_id=item_id, added=quantity)
            return
        logger.info(
            "Stock added",
            item_id=item_id,
            added=quantity,
            quantity=item.quantity,
        )

    def remove_stock(self, item_id: str, quantity: int) -> None:
        """Remove stock from an item.

        Raises ItemNotFoundError for an unknown id and lets
        InsufficientStockError from the entity propagate unchanged.
        """
        with self._inventory_repo.lock:
            item = self._get_or_raise(item_id)
            item.remove_stock(quantity)
            self._inventory_repo.save()
        logger.info(
            "Stock removed",
            item_id=item_id,
            removed=quantity,
            quantity=item.quantity,
        )

    # --- Internal helpers -----------------------------------------------------

    def _get_or_raise(self, item_id: str) -> InventoryItem:
        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item
