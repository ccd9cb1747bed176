"""Application service: Show Stock use cases (queries)."""

from __future__ import annotations

from leathershop.application.dto import LowStockDTO, StockDTO, stock_to_dto
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger


class ShowStockHandler:

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._ledger = StockLedger(stock_repo, product_repo, sequences)

    def handle(self, product_id: str) -> StockDTO:
        return stock_to_dto(self._ledger.get(product_id))


class ShowLowStockHandler:
    """Active stock records at or below their minimum, with product names."""

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._product_repo = product_repo
        self._ledger = StockLedger(stock_repo, product_repo, sequences)

    def handle(self) -> list[LowStockDTO]:
        lines = []
        for record in self._ledger.list_below_minimum():
            product = self._product_repo.get_by_id(record.product_id)
            lines.append(
                LowStockDTO(
                    product_id=record.product_id,
                    product_name=product.name if product is not None else None,
                    quantity=record.quantity,
                    minimum=record.minimum,
                    location=record.location,
                )
            )
        return lines
