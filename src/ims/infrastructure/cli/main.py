import click

from ims.infrastructure.bootstrap import log_level
from ims.infrastructure.cli.inventory_commands import (
    inventory_add_stock,
    inventory_create,
    inventory_list,
    inventory_remove_stock,
    inventory_show,
)
from ims.infrastructure.cli.product_commands import product_add, product_list
from ims.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """IMS — Inventory Management System"""
    try:
        configure_logging("DEBUG" if verbose else log_level())
    except ValueError as exc:
        raise click.ClickException(f"{exc} (check $IMS_LOG_LEVEL)")


@cli.group()
def inventory() -> None:
    """Manage inventory items."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
inventory.add_command(inventory_add_stock)
inventory.add_command(inventory_create)
inventory.add_command(inventory_list)
inventory.add_command(inventory_remove_stock)
inventory.add_command(inventory_show)

product.add_command(product_add)
product.add_command(product_list)
