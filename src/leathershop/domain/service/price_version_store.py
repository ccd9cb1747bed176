"""Domain service: Price Version Store.

Keeps an append-only price history per product in which at most one
record is current.  Changing a price never edits a record: the current
one is retired (batch flag flip) and a new current one is inserted.

The retirement and the insert are two separate writes.  Between them
the product has no current price, so ``get_current_price`` may
transiently raise EntityNotFoundError for a product that is in the
middle of a price change.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal

from leathershop.domain.exceptions import EntityNotFoundError
from leathershop.domain.model.identifiers import EntityType
from leathershop.domain.model.price import PriceRecord
from leathershop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator

logger = logging.getLogger(__name__)


class PriceVersionStore:

    def __init__(
        self,
        price_repo: PriceRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._price_repo = price_repo
        self._product_repo = product_repo
        self._sequences = sequences

    def set_current_price(
        self,
        product_id: str,
        amount: str | int | Decimal,
        promo_amount: str | int | Decimal | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> PriceRecord:
        """Make a new price the product's current one.

        Steps:
        1. Retire every current record of the product (zero, one or,
           after an earlier interrupted write, several).
        2. Insert the new record as current.
        """
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(
                f"Product '{product_id}' not found", product_id=product_id
            )

        price = Money.of(amount, currency)
        promo = Money.of(promo_amount, currency) if promo_amount is not None else None
        PriceRecord.validate(price, promo)
        record = PriceRecord.create(
            price_id=self._sequences.next_id(EntityType.PRICES),
            product_id=product_id,
            amount=price,
            promo_amount=promo,
        )

        retired = self._price_repo.retire_current(product_id, datetime.now(timezone.utc))
        self._price_repo.add(record)

        logger.info(
            "Price %s set for product %s: %s (retired %d previous)",
            record.id,
            product_id,
            record.amount,
            retired,
        )
        return record

    def get_current_price(self, product_id: str) -> PriceRecord:
        record = self._price_repo.get_current(product_id)
        if record is None:
            raise EntityNotFoundError(
                f"No current price for product '{product_id}'", product_id=product_id
            )
        return record

    def get_history(self, product_id: str) -> list[PriceRecord]:
        """Every price the product ever had, newest first."""
        return self._price_repo.list_by_product(product_id)
