"""Data Transfer Objects — plain containers that cross layer boundaries.

Queries hand these to the CLI so it never holds a live entity it could
mutate behind the service's back.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.inventory import InventoryItem


@dataclass(frozen=True)
class InventoryItemDTO:
    """Output: a single inventory item as displayed to the user."""

    id: str
    name: str
    quantity: int

    @staticmethod
    def from_entity(item: InventoryItem) -> InventoryItemDTO:
        return InventoryItemDTO(id=item.id, name=item.name, quantity=item.quantity)
