"""Application service: Show Price use cases (queries)."""

from __future__ import annotations

from leathershop.application.dto import PriceDTO, price_to_dto
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.service.price_version_store import PriceVersionStore
from leathershop.domain.service.sequence_generator import SequenceGenerator


class ShowCurrentPriceHandler:

    def __init__(
        self,
        price_repo: PriceRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._store = PriceVersionStore(price_repo, product_repo, sequences)

    def handle(self, product_id: str) -> PriceDTO:
        return price_to_dto(self._store.get_current_price(product_id))


class ShowPriceHistoryHandler:

    def __init__(
        self,
        price_repo: PriceRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._store = PriceVersionStore(price_repo, product_repo, sequences)

    def handle(self, product_id: str) -> list[PriceDTO]:
        return [price_to_dto(record) for record in self._store.get_history(product_id)]
