"""CLI commands for price history."""

from __future__ import annotations

import click

from leathershop.application.set_price import SetPriceHandler
from leathershop.application.show_price import ShowCurrentPriceHandler, ShowPriceHistoryHandler
from leathershop.domain.exceptions import DomainException
from leathershop.infrastructure.bootstrap import (
    price_repository,
    product_repository,
    sequence_generator,
    settings,
)
from leathershop.infrastructure.cli.errors import to_click_error


def _repos() -> dict:
    return {
        "price_repo": price_repository(),
        "product_repo": product_repository(),
        "sequences": sequence_generator(),
    }


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--amount", required=True, help="Price (e.g. 15000.00).")
@click.option("--promo", default=None, help="Promotional price.")
@click.option("--currency", default=None, help="Currency code.")
def price_set(product_id: str, amount: str, promo: str | None, currency: str | None) -> None:
    """Make a new price current for a product."""
    handler = SetPriceHandler(**_repos())

    try:
        dto = handler.handle(
            product_id,
            amount,
            promo_amount=promo,
            currency=currency or settings().default_currency,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Price {dto.id} for '{product_id}' is now {dto.amount}")


@click.command("show")
@click.option("--product", "product_id", required=True, help="Product ID.")
def price_show(product_id: str) -> None:
    """Show the current price of a product."""
    handler = ShowCurrentPriceHandler(**_repos())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    promo = f"  (promo {dto.promo_amount})" if dto.promo_amount else ""
    click.echo(f"{product_id}: {dto.amount}{promo}  since {dto.created_at}")


@click.command("history")
@click.option("--product", "product_id", required=True, help="Product ID.")
def price_history(product_id: str) -> None:
    """Show every price a product has had, newest first."""
    handler = ShowPriceHistoryHandler(**_repos())
    lines = handler.handle(product_id)

    if not lines:
        click.echo(f"No prices recorded for '{product_id}'.")
        return

    click.echo(f"{'Id':<12} {'Amount':>16} {'Promo':>16}  {'Created':<20} Current")
    click.echo("-" * 78)
    for dto in lines:
        click.echo(
            f"{dto.id:<12} {dto.amount:>16} {dto.promo_amount or '-':>16}  "
            f"{dto.created_at:<20} {'yes' if dto.current else ''}"
        )
