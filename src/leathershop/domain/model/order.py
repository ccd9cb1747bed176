"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its line items.  Line items
capture the unit price the caller quoted at placement time, so later
price changes never touch an existing order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from leathershop.domain.exceptions import ForbiddenError, ValidationError
from leathershop.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROCESS = "in_process"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: OrderStatus | str) -> OrderStatus:
        if isinstance(raw, OrderStatus):
            return raw
        try:
            return OrderStatus(raw)
        except ValueError:
            valid = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid order status '{raw}'. Valid statuses: {valid}",
                field="status",
                valid_statuses=[s.value for s in OrderStatus],
            ) from None

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


# Forward steps of the happy path.  Anything else is an irregular jump.
_NEXT_STATUS = {
    OrderStatus.PENDING: OrderStatus.CONFIRMED,
    OrderStatus.CONFIRMED: OrderStatus.IN_PROCESS,
    OrderStatus.IN_PROCESS: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
}


def is_regular_transition(current: OrderStatus, new: OrderStatus) -> bool:
    """True for a forward step of the happy path or a cancellation of a
    non-terminal order."""
    if new is OrderStatus.CANCELLED:
        return not current.is_terminal
    return _NEXT_STATUS.get(current) is new


class Role(Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"

    @staticmethod
    def is_employee(role: str) -> bool:
        return role in (Role.EMPLOYEE.value, "empleado")


@dataclass(frozen=True)
class Customer:
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required", field="customer.name")


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a product at placement time."""

    product_id: str
    quantity: Quantity
    unit_price: Money  # locked at placement time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


def format_order_number(at: datetime, consecutive: int) -> str:
    """``PED-YYYYMM-NNNN``; NNNN widens past 9999 instead of wrapping."""
    return f"PED-{at.year}{at.month:02d}-{str(consecutive).zfill(4)}"


def order_number_counter(at: datetime) -> str:
    """Key of the per-month counter that feeds ``format_order_number``."""
    return f"pedidos-{at.year}{at.month:02d}"


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str
    number: str
    customer: Customer
    items: list[OrderLineItem]
    vendor_id: str
    notes: str = ""
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        number: str,
        customer: Customer,
        items: list[OrderLineItem],
        vendor_id: str,
        notes: str = "",
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        Order.validate_new(items, vendor_id)

        order = Order(
            id=order_id,
            number=number,
            customer=customer,
            items=list(items),
            vendor_id=vendor_id,
            notes=notes or "",
        )
        if created_at is not None:
            order.created_at = created_at
        return order

    @staticmethod
    def validate_new(items: list[OrderLineItem], vendor_id: str) -> None:
        if not items:
            raise ValidationError("Order must contain at least one item", field="items")
        if not vendor_id:
            raise ValidationError("Placing user is required", field="vendor_id")
        currencies = {item.unit_price.currency for item in items}
        if len(currencies) > 1:
            raise ValidationError(
                f"Line items mix currencies: {', '.join(sorted(currencies))}",
                field="unit_price",
            )

    # --- State transitions ----------------------------------------------------

    def set_status(self, new_status: OrderStatus) -> bool:
        """Move to *new_status* from whatever the current status is.

        Every recognised status is accepted from every status, terminal
        ones included.  Returns whether the move was a regular transition
        so the caller can flag irregular jumps.
        """
        regular = is_regular_transition(self.status, new_status)
        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)
        return regular

    # --- Access ---------------------------------------------------------------

    def ensure_visible_to(self, caller_role: str, caller_id: str) -> None:
        """Employees may only see orders they placed."""
        if Role.is_employee(caller_role) and self.vendor_id != caller_id:
            raise ForbiddenError(
                f"Not allowed to view order {self.id}",
                order_id=self.id,
                caller_id=caller_id,
            )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result
