"""InventoryItem entity: a named stock line with a single on-hand quantity.

The item is the only place that decides whether a stock movement is
allowed. Services look items up and delegate; they never touch
``quantity`` directly.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from ims.domain.exceptions import InsufficientStockError, ValidationError


def new_item_id() -> str:
    """Generate an opaque identifier for a new inventory item."""
    return str(uuid.uuid4())


@dataclass
class InventoryItem:
    """Entity for a stocked item.

    Invariants:
    - ``quantity`` is never negative
    - ``id`` and ``name`` do not change after creation

    Use ``InventoryItem.create()`` for new items. The ``__init__`` is
    left plain so repositories can reconstitute stored items as-is.
    """

    id: str
    name: str
    quantity: int

    # --- Factory (used for NEW items only) ------------------------------------

    @staticmethod
    def create(name: str, quantity: int, item_id: str | None = None) -> InventoryItem:
        """Create a new item with a fresh identity."""
        if quantity < 0:
            raise ValidationError(
                f"Initial quantity cannot be negative, got {quantity}"
            )
        return InventoryItem(
            id=item_id if item_id is not None else new_item_id(),
            name=name,
            quantity=quantity,
        )

    # --- Stock movements ------------------------------------------------------

    def add_stock(self, quantity: int) -> None:
        """Increase stock on hand.

        Non-positive amounts are ignored rather than rejected.
        """
        if quantity > 0:
            self.quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """Decrease stock on hand.

        Raises InsufficientStockError if *quantity* is not positive or
        exceeds what is on hand. The item is left untouched in that case.
        """
        if 0 < quantity <= self.quantity:
            self.quantity -= quantity
        else:
            raise InsufficientStockError(
                item_id=self.id,
                requested=quantity,
                available=self.quantity,
            )
