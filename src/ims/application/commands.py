"""Write side: commands and the handler that dispatches them.

A command wraps exactly one state change behind ``execute()``, which
returns nothing. Collaborators (repositories, services) are injected
when the command is built; there is no shared global store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from ims.application.inventory_service import InventoryService
from ims.domain.model.inventory import new_item_id
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class Command(ABC):

    @abstractmethod
    def execute(self) -> None:
        """Apply the state change. May raise a DomainException."""


class CommandHandler:
    """Uniform dispatch point for any Command.

    No validation, retries or error translation happen here; whatever
    ``execute()`` raises reaches the caller unchanged.
    """

    def handle(self, command: Command) -> None:
        logger.debug("Dispatching command", command=type(command).__name__)
        command.execute()


# --- Catalog ------------------------------------------------------------------


class AddProductCommand(Command):

    def __init__(self, product_repo: ProductRepository, product: Product) -> None:
        self._product_repo = product_repo
        self.product = product

    def execute(self) -> None:
        self._product_repo.add(self.product)
        self._product_repo.save()
        logger.info(
            "Product added",
            product_id=self.product.id,
            name=self.product.name,
            price=str(self.product.price),
        )


# --- Inventory ----------------------------------------------------------------


class CreateInventoryItemCommand(Command):
    """Create an inventory item.

    The id is assigned when the command is built, so the caller can
    refer to the new item via ``item_id`` without a return value.
    """

    def __init__(self, service: InventoryService, name: str, quantity: int) -> None:
        self._service = service
        self.item_id = new_item_id()
        self.name = name
        self.quantity = quantity

    def execute(self) -> None:
        self._service.create_inventory_item(
            name=self.name,
            quantity=self.quantity,
            item_id=self.item_id,
        )


class AddStockCommand(Command):

    def __init__(self, service: InventoryService, item_id: str, quantity: int) -> None:
        self._service = service
        self.item_id = item_id
        self.quantity = quantity

    def execute(self) -> None:
        self._service.add_stock(self.item_id, self.quantity)


class RemoveStockCommand(Command):

    def __init__(self, service: InventoryService, item_id: str, quantity: int) -> None:
        self._service = service
        self.item_id = item_id
        self.quantity = quantity

    def execute(self) -> None:
        self._service.remove_stock(self.item_id, self.quantity)
