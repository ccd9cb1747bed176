"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from leathershop.domain.model.order import Order
from leathershop.domain.model.price import PriceRecord
from leathershop.domain.model.stock import StockAdjustment, StockRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class CustomerSpec:
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product, quantity, quoted unit price)."""

    product_id: str
    quantity: int
    unit_price: str


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    vendor_id: str
    notes: str
    created_at: str


@dataclass(frozen=True)
class StockDTO:
    id: str
    product_id: str
    quantity: int
    minimum: int
    location: str
    active: bool


@dataclass(frozen=True)
class LowStockDTO:
    product_id: str
    product_name: str | None
    quantity: int
    minimum: int
    location: str


@dataclass(frozen=True)
class StockAdjustmentDTO:
    product_id: str
    previous: int
    new: int
    delta: int


@dataclass(frozen=True)
class PriceDTO:
    id: str
    product_id: str
    amount: str
    promo_amount: str | None
    currency: str
    current: bool
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category_id: str
    price: str | None
    stock: int | None


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        number=order.number,
        customer_name=order.customer.name,
        customer_email=order.customer.email,
        customer_phone=order.customer.phone,
        customer_address=order.customer.address,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        vendor_id=order.vendor_id,
        notes=order.notes,
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
    )


def stock_to_dto(record: StockRecord) -> StockDTO:
    return StockDTO(
        id=record.id,
        product_id=record.product_id,
        quantity=record.quantity,
        minimum=record.minimum,
        location=record.location,
        active=record.active,
    )


def adjustment_to_dto(adjustment: StockAdjustment) -> StockAdjustmentDTO:
    return StockAdjustmentDTO(
        product_id=adjustment.product_id,
        previous=adjustment.previous,
        new=adjustment.new,
        delta=adjustment.delta,
    )


def price_to_dto(record: PriceRecord) -> PriceDTO:
    return PriceDTO(
        id=record.id,
        product_id=record.product_id,
        amount=str(record.amount),
        promo_amount=str(record.promo_amount) if record.promo_amount is not None else None,
        currency=record.currency,
        current=record.current,
        created_at=record.created_at.strftime(TIMESTAMP_FORMAT),
    )
