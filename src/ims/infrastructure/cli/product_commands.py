"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from ims.application.commands import AddProductCommand, CommandHandler
from ims.application.queries import GetAllProductsQuery, QueryHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 1200.00).")
def product_add(product_id: int, name: str, price: str) -> None:
    """Add a product to the catalog."""
    try:
        product = Product(id=product_id, name=name, price=Money.of(price))
        CommandHandler().handle(AddProductCommand(product_repository(), product))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = QueryHandler().handle(GetAllProductsQuery(product_repository()))
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")
