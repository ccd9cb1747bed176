"""StockRecord aggregate: tracks on-hand quantity per product.

Each product has at most one active StockRecord that knows the quantity
on hand, the alert threshold and where the goods are kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from leathershop.domain.exceptions import InsufficientStockError, ValidationError
from leathershop.domain.model.value_objects import Lifecycle

DEFAULT_MINIMUM = 5
DEFAULT_LOCATION = "Main Warehouse"


class AdjustDirection(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"

    @staticmethod
    def parse(raw: AdjustDirection | str) -> AdjustDirection:
        if isinstance(raw, AdjustDirection):
            return raw
        try:
            return AdjustDirection(raw)
        except ValueError:
            raise ValidationError(
                f"Invalid adjustment direction '{raw}'. "
                f"Use 'increase' or 'decrease'.",
                field="direction",
            ) from None


@dataclass(frozen=True)
class StockAdjustment:
    """Before/after values of a relative stock change, for audit logging."""

    product_id: str
    previous: int
    new: int
    delta: int  # signed: negative for decreases


def require_non_negative(value: int, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field_name} must be an integer, got {type(value).__name__}",
            field=field_name,
        )
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative", field=field_name)


@dataclass
class StockRecord:
    """Aggregate root for stock tracking.

    Invariants:
    - ``quantity`` is never negative
    - ``minimum`` is never negative
    """

    id: str
    product_id: str
    quantity: int
    minimum: int = DEFAULT_MINIMUM
    location: str = DEFAULT_LOCATION
    lifecycle: Lifecycle = field(default_factory=Lifecycle)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    @staticmethod
    def create(
        stock_id: str,
        product_id: str,
        quantity: int,
        minimum: int | None = None,
        location: str | None = None,
    ) -> StockRecord:
        require_non_negative(quantity, "quantity")
        if minimum is not None:
            require_non_negative(minimum, "minimum")
        return StockRecord(
            id=stock_id,
            product_id=product_id,
            quantity=quantity,
            minimum=DEFAULT_MINIMUM if minimum is None else minimum,
            location=location.strip() if location and location.strip() else DEFAULT_LOCATION,
        )

    @property
    def active(self) -> bool:
        return self.lifecycle.active

    @property
    def below_minimum(self) -> bool:
        return self.quantity <= self.minimum

    def covers(self, quantity: int) -> bool:
        return quantity <= self.quantity

    # --- Mutations --------------------------------------------------------

    def set_quantity(self, quantity: int) -> None:
        """Absolute overwrite of the on-hand quantity."""
        require_non_negative(quantity, "quantity")
        self.quantity = quantity
        self._touch()

    def adjust(self, delta: int, direction: AdjustDirection) -> StockAdjustment:
        """Apply a relative change and report the before/after values.

        A decrease that would drive the quantity negative raises
        InsufficientStockError and leaves the record untouched.
        """
        if isinstance(delta, bool) or not isinstance(delta, int) or delta <= 0:
            raise ValidationError("Adjustment quantity must be a positive integer", field="delta")

        previous = self.quantity
        if direction is AdjustDirection.DECREASE:
            if delta > previous:
                raise InsufficientStockError(self.product_id, delta, previous)
            signed = -delta
        else:
            signed = delta

        self.quantity = previous + signed
        self._touch()
        return StockAdjustment(
            product_id=self.product_id,
            previous=previous,
            new=self.quantity,
            delta=signed,
        )

    def update_settings(self, minimum: int | None = None, location: str | None = None) -> None:
        if minimum is not None:
            require_non_negative(minimum, "minimum")
            self.minimum = minimum
        if location is not None:
            if not location.strip():
                raise ValidationError("Location cannot be blank", field="location")
            self.location = location.strip()
        self._touch()

    def deactivate(self, at: datetime | None = None) -> None:
        """Soft-delete the record; it drops out of every active query."""
        when = at or datetime.now(timezone.utc)
        self.lifecycle = self.lifecycle.retire(when)
        self.updated_at = when

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
