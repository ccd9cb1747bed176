"""PriceRecord: one version in a product's append-only price history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from leathershop.domain.exceptions import ValidationError
from leathershop.domain.model.value_objects import Lifecycle, Money


@dataclass
class PriceRecord:
    """A price version for a product.

    The record whose lifecycle is active is the product's *current*
    price.  Retiring a record flips the flag and stamps ``retired_at``;
    records are never deleted.
    """

    id: str
    product_id: str
    amount: Money
    promo_amount: Money | None = None
    lifecycle: Lifecycle = field(default_factory=Lifecycle)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        price_id: str,
        product_id: str,
        amount: Money,
        promo_amount: Money | None = None,
    ) -> PriceRecord:
        PriceRecord.validate(amount, promo_amount)
        return PriceRecord(
            id=price_id,
            product_id=product_id,
            amount=amount,
            promo_amount=promo_amount,
        )

    @staticmethod
    def validate(amount: Money, promo_amount: Money | None = None) -> None:
        """Reject amounts no price version may carry."""
        if amount.is_zero:
            raise ValidationError("Price must be greater than zero", field="amount")
        if promo_amount is not None and promo_amount.currency != amount.currency:
            raise ValidationError(
                "Promotional price must use the same currency as the price",
                field="promo_amount",
            )

    @property
    def current(self) -> bool:
        return self.lifecycle.active

    @property
    def currency(self) -> str:
        return self.amount.currency
