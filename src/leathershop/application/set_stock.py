"""Application service: Set Stock use cases (absolute overwrite, settings, retirement)."""

from __future__ import annotations

from leathershop.application.dto import StockDTO, stock_to_dto
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger


class SetStockQuantityHandler:

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._ledger = StockLedger(stock_repo, product_repo, sequences)

    def handle(self, product_id: str, quantity: int) -> StockDTO:
        """Overwrite the on-hand quantity of a product."""
        return stock_to_dto(self._ledger.set_quantity(product_id, quantity))


class UpdateStockSettingsHandler:

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
        minimum: int | None = None,
        location: str | None = None,
    ) -> StockDTO:
        record = self._ledger.update_settings(product_id, minimum=minimum, location=location)
        return stock_to_dto(record)


class DeactivateStockHandler:
    """Retire a product's stock record; a new one may then be created."""

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._ledger = StockLedger(stock_repo, product_repo, sequences)

    def handle(self, product_id: str) -> StockDTO:
        return stock_to_dto(self._ledger.deactivate(product_id))
