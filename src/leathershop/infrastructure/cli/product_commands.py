"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from leathershop.application.add_product import AddProductHandler
from leathershop.application.list_products import ListProductsHandler
from leathershop.domain.exceptions import DomainException
from leathershop.infrastructure.bootstrap import (
    price_repository,
    product_repository,
    sequence_generator,
    settings,
    stock_repository,
)
from leathershop.infrastructure.cli.errors import to_click_error


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--description", default="", help="Description.")
@click.option("--material", default="", help="Material (e.g. full-grain leather).")
@click.option("--color", default="", help="Color.")
@click.option("--price", default=None, help="Initial price.")
@click.option("--stock", "initial_stock", default=None, type=int, help="Initial stock quantity.")
def product_add(
    name: str,
    category_id: str,
    description: str,
    material: str,
    color: str,
    price: str | None,
    initial_stock: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        price_repo=price_repository(),
        stock_repo=stock_repository(),
        sequences=sequence_generator(),
        currency=settings().default_currency,
    )

    try:
        dto = handler.handle(
            name=name,
            category_id=category_id,
            description=description,
            material=material,
            color=color,
            price=price,
            initial_stock=initial_stock,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product {dto.id} '{dto.name}' added")


@click.command("list")
def product_list() -> None:
    """List all active products with price and stock."""
    handler = ListProductsHandler(
        product_repo=product_repository(),
        price_repo=price_repository(),
        stock_repo=stock_repository(),
    )
    products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<24} {'Price':>16} {'Stock':>6}")
    click.echo("-" * 59)
    for p in products:
        stock = "-" if p.stock is None else str(p.stock)
        click.echo(f"{p.id:<10} {p.name:<24} {p.price or '-':>16} {stock:>6}")
