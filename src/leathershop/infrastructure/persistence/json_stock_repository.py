"""JSON-document-backed implementation of StockRepository."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from leathershop.domain.model.stock import StockRecord
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.repository.transaction import Transaction
from leathershop.infrastructure.persistence.json_document_store import JsonDocumentStore
from leathershop.infrastructure.persistence.serialization import (
    dt_from_raw,
    dt_to_raw,
    lifecycle_from_raw,
    lifecycle_to_raw,
)

T = TypeVar("T")

COLLECTION = "stocks"


class JsonStockRepository(StockRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- StockRepository interface --------------------------------------------

    def get_active(self, product_id: str) -> StockRecord | None:
        raws = self._store.find(COLLECTION, product_id=product_id, active=True)
        return self._to_domain(raws[0]) if raws else None

    def list_active(self) -> list[StockRecord]:
        return [self._to_domain(raw) for raw in self._store.find(COLLECTION, active=True)]

    def add(self, record: StockRecord) -> None:
        self._store.set(COLLECTION, record.id, self._to_raw(record))

    def update_active(self, product_id: str, mutate: Callable[[StockRecord], T]) -> T | None:
        def _update(tx: Transaction) -> T | None:
            raws = tx.find(COLLECTION, product_id=product_id, active=True)
            if not raws:
                return None
            record = self._to_domain(raws[0])
            result = mutate(record)
            tx.set(COLLECTION, record.id, self._to_raw(record))
            return result

        return self._store.run_transaction(_update)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: StockRecord) -> dict[str, Any]:
        return {
            "id": record.id,
            "product_id": record.product_id,
            "quantity": record.quantity,
            "minimum": record.minimum,
            "location": record.location,
            "created_at": dt_to_raw(record.created_at),
            "updated_at": dt_to_raw(record.updated_at),
            **lifecycle_to_raw(record.lifecycle),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> StockRecord:
        return StockRecord(
            id=raw["id"],
            product_id=raw["product_id"],
            quantity=raw["quantity"],
            minimum=raw["minimum"],
            location=raw["location"],
            lifecycle=lifecycle_from_raw(raw),
            created_at=dt_from_raw(raw["created_at"]),
            updated_at=dt_from_raw(raw.get("updated_at")),
        )
