"""CLI commands for stock management."""

from __future__ import annotations

import click

from leathershop.application.adjust_stock import AdjustStockHandler
from leathershop.application.create_stock import CreateStockHandler
from leathershop.application.dto import StockDTO
from leathershop.application.set_stock import (
    DeactivateStockHandler,
    SetStockQuantityHandler,
    UpdateStockSettingsHandler,
)
from leathershop.application.show_stock import ShowLowStockHandler, ShowStockHandler
from leathershop.domain.exceptions import DomainException
from leathershop.infrastructure.bootstrap import (
    product_repository,
    sequence_generator,
    stock_repository,
)
from leathershop.infrastructure.cli.errors import to_click_error


def _repos() -> dict:
    return {
        "stock_repo": stock_repository(),
        "product_repo": product_repository(),
        "sequences": sequence_generator(),
    }


def _display_stock(dto: StockDTO) -> None:
    click.echo(f"Stock {dto.id} for {dto.product_id}")
    click.echo(f"  Quantity: {dto.quantity}  (minimum {dto.minimum})")
    click.echo(f"  Location: {dto.location}")


@click.command("create")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Initial quantity.")
@click.option("--minimum", default=None, type=int, help="Low-stock threshold.")
@click.option("--location", default=None, help="Where the goods are kept.")
def stock_create(product_id: str, quantity: int, minimum: int | None, location: str | None) -> None:
    """Open the stock record of a product."""
    handler = CreateStockHandler(**_repos())

    try:
        dto = handler.handle(product_id, quantity, minimum=minimum, location=location)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_stock(dto)


@click.command("show")
@click.option("--product", "product_id", required=True, help="Product ID.")
def stock_show(product_id: str) -> None:
    """Show the stock of a product."""
    handler = ShowStockHandler(**_repos())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_stock(dto)


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New on-hand quantity.")
def stock_set(product_id: str, quantity: int) -> None:
    """Overwrite the on-hand quantity of a product."""
    handler = SetStockQuantityHandler(**_repos())

    try:
        dto = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Stock for '{dto.product_id}' set to {dto.quantity}")


@click.command("adjust")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to move.")
@click.option(
    "--direction",
    required=True,
    type=click.Choice(["increase", "decrease"]),
    help="Whether units come in or go out.",
)
@click.option("--reason", default=None, help="Why the stock moved.")
def stock_adjust(product_id: str, quantity: int, direction: str, reason: str | None) -> None:
    """Increase or decrease the stock of a product."""
    handler = AdjustStockHandler(**_repos())

    try:
        dto = handler.handle(product_id, quantity, direction, reason=reason)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Stock for '{dto.product_id}': {dto.previous} -> {dto.new} ({dto.delta:+d})")


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--minimum", default=None, type=int, help="New low-stock threshold.")
@click.option("--location", default=None, help="New location.")
def stock_update(product_id: str, minimum: int | None, location: str | None) -> None:
    """Change the threshold or location of a stock record."""
    handler = UpdateStockSettingsHandler(**_repos())

    try:
        dto = handler.handle(product_id, minimum=minimum, location=location)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_stock(dto)


@click.command("deactivate")
@click.option("--product", "product_id", required=True, help="Product ID.")
def stock_deactivate(product_id: str) -> None:
    """Retire the stock record of a product."""
    handler = DeactivateStockHandler(**_repos())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Stock {dto.id} for '{dto.product_id}' deactivated")


@click.command("low")
def stock_low() -> None:
    """List products at or below their minimum stock."""
    handler = ShowLowStockHandler(**_repos())
    lines = handler.handle()

    if not lines:
        click.echo("No products below minimum stock.")
        return

    click.echo(f"{'Product':<12} {'Name':<24} {'Qty':>6} {'Min':>6}  Location")
    click.echo("-" * 70)
    for line in lines:
        click.echo(
            f"{line.product_id:<12} {line.product_name or '?':<24} "
            f"{line.quantity:>6} {line.minimum:>6}  {line.location}"
        )
