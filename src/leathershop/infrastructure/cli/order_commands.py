"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from leathershop.application.dto import CustomerSpec, OrderDTO, OrderItemSpec
from leathershop.application.list_orders import ListOrdersHandler
from leathershop.application.place_order import PlaceOrderHandler
from leathershop.application.show_order import ShowOrderHandler
from leathershop.application.update_order_status import UpdateOrderStatusHandler
from leathershop.domain.exceptions import DomainException
from leathershop.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    sequence_generator,
    settings,
    stock_repository,
)
from leathershop.infrastructure.cli.errors import to_click_error


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'PROD-1000:2:100,PROD-1001:1:50' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Quantity:UnitPrice'."
            )
        product_id, qty_str, price = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty, unit_price=price))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.number}  [{dto.id}]  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    if dto.customer_email:
        click.echo(f"Email:    {dto.customer_email}")
    click.echo(f"Vendor:   {dto.vendor_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Product':<12} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*48}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<12} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<18} {dto.total:>29}")


@click.command("place")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", default="", help="Customer email.")
@click.option("--phone", default="", help="Customer phone.")
@click.option("--address", default="", help="Delivery address.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty:UnitPrice,...'.")
@click.option("--user", "vendor_id", required=True, help="Id of the user placing the order.")
@click.option("--notes", default="", help="Free-text notes.")
def order_place(
    customer: str,
    email: str,
    phone: str,
    address: str,
    items: str,
    vendor_id: str,
    notes: str,
) -> None:
    """Place a new order (validates and debits stock)."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        stock_repo=stock_repository(),
        product_repo=product_repository(),
        sequences=sequence_generator(),
        currency=settings().default_currency,
    )

    try:
        dto = handler.handle(
            customer=CustomerSpec(name=customer, email=email, phone=phone, address=address),
            item_specs=specs,
            vendor_id=vendor_id,
            notes=notes,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.option("--role", required=True, help="Caller role (admin, employee).")
@click.option("--user", "caller_id", required=True, help="Caller user id.")
def order_show(order_id: str, role: str, caller_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, caller_role=role, caller_id=caller_id)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--role", required=True, help="Caller role (admin, employee).")
@click.option("--user", "caller_id", required=True, help="Caller user id.")
@click.option("--status", default=None, help="Only orders in this status.")
def order_list(role: str, caller_id: str, status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(caller_role=role, caller_id=caller_id, status=status)
    except DomainException as exc:
        raise to_click_error(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Number':<16} {'Id':<10} {'Status':<11} {'Customer':<20} {'Total':>14}")
    click.echo("-" * 75)
    for dto in orders:
        click.echo(
            f"{dto.number:<16} {dto.id:<10} {dto.status:<11} {dto.customer_name:<20} {dto.total:>14}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--set", "new_status", required=True, help="New status token.")
def order_status(order_id: str, new_status: str) -> None:
    """Change the status of an order."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order {dto.number} is now {dto.status}.")
