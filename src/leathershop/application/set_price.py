"""Application service: Set Price use case.

Adds a new current price version; the previous one is kept as history.
Existing orders are unaffected: they captured their own unit prices.
"""

from __future__ import annotations

from leathershop.application.dto import PriceDTO, price_to_dto
from leathershop.domain.model.value_objects import DEFAULT_CURRENCY
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.service.price_version_store import PriceVersionStore
from leathershop.domain.service.sequence_generator import SequenceGenerator


class SetPriceHandler:

    def __init__(
        self,
        price_repo: PriceRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._store = PriceVersionStore(price_repo, product_repo, sequences)

    def handle(
        self,
        product_id: str,
        amount: str,
        promo_amount: str | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> PriceDTO:
        record = self._store.set_current_price(product_id, amount, promo_amount, currency)
        return price_to_dto(record)
