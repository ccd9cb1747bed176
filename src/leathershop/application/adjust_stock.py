"""Application service: Adjust Stock use case.

Relative increase/decrease of a product's stock.  The result carries the
before and after quantities for the caller's audit trail.
"""

from __future__ import annotations

from leathershop.application.dto import StockAdjustmentDTO, adjustment_to_dto
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger


class AdjustStockHandler:

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
        direction: str,
        reason: str | None = None,
    ) -> StockAdjustmentDTO:
        adjustment = self._ledger.adjust(product_id, quantity, direction, reason=reason)
        return adjustment_to_dto(adjustment)
