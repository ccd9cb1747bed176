"""Application service: Create Stock use case."""

from __future__ import annotations

from leathershop.application.dto import StockDTO, stock_to_dto
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger


class CreateStockHandler:

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._ledger = StockLedger(stock_repo, product_repo, sequences)

    def handle(
        self,
        product_id: str,
        quantity: int,
        minimum: int | None = None,
        location: str | None = None,
    ) -> StockDTO:
        record = self._ledger.create(product_id, quantity, minimum, location)
        return stock_to_dto(record)
