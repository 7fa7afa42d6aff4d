"""CLI commands for inventory items."""

from __future__ import annotations

import click

from ims.application.commands import (
    AddStockCommand,
    Command,
    CommandHandler,
    CreateInventoryItemCommand,
    RemoveStockCommand,
)
from ims.application.queries import (
    GetInventoryItemQuery,
    ListInventoryItemsQuery,
    QueryHandler,
)
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import inventory_repository, inventory_service


def _dispatch(command: Command) -> None:
    try:
        CommandHandler().handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("create")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Initial quantity in stock.")
def inventory_create(name: str, quantity: int) -> None:
    """Create a new inventory item."""
    command = CreateInventoryItemCommand(inventory_service(), name=name, quantity=quantity)
    _dispatch(command)
    click.echo(f"Item '{name}' created with id {command.item_id} (quantity={quantity})")


@click.command("add-stock")
@click.option("--id", "item_id", required=True, help="Inventory item ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
def inventory_add_stock(item_id: str, quantity: int) -> None:
    """Add stock to an existing item."""
    _dispatch(AddStockCommand(inventory_service(), item_id=item_id, quantity=quantity))
    click.echo(f"Added {quantity} to item {item_id}")


@click.command("remove-stock")
@click.option("--id", "item_id", required=True, help="Inventory item ID.")
@click.option("--quantity", required=True, type=int, help="Units to remove.")
def inventory_remove_stock(item_id: str, quantity: int) -> None:
    """Remove stock from an existing item."""
    _dispatch(RemoveStockCommand(inventory_service(), item_id=item_id, quantity=quantity))
    click.echo(f"Removed {quantity} from item {item_id}")


@click.command("show")
@click.option("--id", "item_id", required=True, help="Inventory item ID.")
def inventory_show(item_id: str) -> None:
    """Show a single inventory item."""
    query = GetInventoryItemQuery(inventory_repository(), item_id)
    try:
        item = QueryHandler().handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Item:     {item.name}")
    click.echo(f"ID:       {item.id}")
    click.echo(f"Quantity: {item.quantity}")


@click.command("list")
def inventory_list() -> None:
    """List current inventory levels."""
    items = QueryHandler().handle(ListInventoryItemsQuery(inventory_repository()))
    if not items:
        click.echo("No inventory items found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Quantity':>8}")
    click.echo("-" * 66)
    for item in items:
        click.echo(f"{item.id:<36}  {item.name:<20} {item.quantity:>8}")
