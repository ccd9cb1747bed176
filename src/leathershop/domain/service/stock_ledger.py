"""Domain service: Stock Ledger.

Owns every change to a product's on-hand quantity.  Relative
adjustments run as one conditional atomic update against the store
(``StockRepository.update_active``): the sufficiency check and the
write see the same state, so two concurrent decrements can never drive
the quantity below zero.
"""

from __future__ import annotations

import logging

from leathershop.domain.exceptions import ConflictError, EntityNotFoundError
from leathershop.domain.model.identifiers import EntityType
from leathershop.domain.model.stock import AdjustDirection, StockAdjustment, StockRecord
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator

logger = logging.getLogger(__name__)


class StockLedger:

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
    ) -> None:
        self._stock_repo = stock_repo
        self._product_repo = product_repo
        self._sequences = sequences

    def create(
        self,
        product_id: str,
        quantity: int,
        minimum: int | None = None,
        location: str | None = None,
    ) -> StockRecord:
        """Open the stock record of a product (one active record per product)."""
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(
                f"Product '{product_id}' not found", product_id=product_id
            )
        if self._stock_repo.get_active(product_id) is not None:
            raise ConflictError(
                f"Product '{product_id}' already has a stock record",
                product_id=product_id,
            )

        record = StockRecord.create(
            self._sequences.next_id(EntityType.STOCKS),
            product_id,
            quantity,
            minimum,
            location,
        )
        self._stock_repo.add(record)
        logger.info(
            "Stock %s created for product %s with quantity %d",
            record.id,
            product_id,
            quantity,
        )
        return record

    def get(self, product_id: str) -> StockRecord:
        record = self._stock_repo.get_active(product_id)
        if record is None:
            raise EntityNotFoundError(
                f"No stock record for product '{product_id}'", product_id=product_id
            )
        return record

    def set_quantity(self, product_id: str, quantity: int) -> StockRecord:
        """Overwrite the on-hand quantity."""
        updated = self._stock_repo.update_active(
            product_id, lambda record: self._overwrite(record, quantity)
        )
        if updated is None:
            raise EntityNotFoundError(
                f"No stock record for product '{product_id}'", product_id=product_id
            )
        logger.info("Stock for product %s set to %d", product_id, quantity)
        return updated

    def adjust(
        self,
        product_id: str,
        delta: int,
        direction: AdjustDirection | str,
        reason: str | None = None,
    ) -> StockAdjustment:
        """Increase or decrease the on-hand quantity by *delta*.

        A decrease larger than the quantity raises InsufficientStockError
        and leaves the record unchanged.
        """
        parsed = AdjustDirection.parse(direction)
        result = self._stock_repo.update_active(
            product_id, lambda record: record.adjust(delta, parsed)
        )
        if result is None:
            raise EntityNotFoundError(
                f"No stock record for product '{product_id}'", product_id=product_id
            )
        logger.info(
            "Stock movement for product %s: %s %d (%d -> %d), reason: %s",
            product_id,
            parsed.value,
            delta,
            result.previous,
            result.new,
            reason or "n/a",
        )
        return result

    def update_settings(
        self,
        product_id: str,
        minimum: int | None = None,
        location: str | None = None,
    ) -> StockRecord:
        updated = self._stock_repo.update_active(
            product_id, lambda record: self._apply_settings(record, minimum, location)
        )
        if updated is None:
            raise EntityNotFoundError(
                f"No stock record for product '{product_id}'", product_id=product_id
            )
        return updated

    def deactivate(self, product_id: str) -> StockRecord:
        updated = self._stock_repo.update_active(product_id, self._deactivate)
        if updated is None:
            raise EntityNotFoundError(
                f"No stock record for product '{product_id}'", product_id=product_id
            )
        logger.info("Stock %s for product %s deactivated", updated.id, product_id)
        return updated

    def list_below_minimum(self) -> list[StockRecord]:
        """Active records whose quantity is at or below their minimum.

        The store cannot compare two fields of the same document, so this
        scans every active record: cost grows with the catalog, not with
        the size of the result.
        """
        return [record for record in self._stock_repo.list_active() if record.below_minimum]

    # --- Mutators passed to update_active -------------------------------------

    @staticmethod
    def _overwrite(record: StockRecord, quantity: int) -> StockRecord:
        record.set_quantity(quantity)
        return record

    @staticmethod
    def _apply_settings(
        record: StockRecord, minimum: int | None, location: str | None
    ) -> StockRecord:
        record.update_settings(minimum=minimum, location=location)
        return record

    @staticmethod
    def _deactivate(record: StockRecord) -> StockRecord:
        record.deactivate()
        return record
