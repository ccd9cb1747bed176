"""JSON-document-backed implementation of PriceRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from leathershop.domain.model.price import PriceRecord
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.infrastructure.persistence.json_document_store import JsonDocumentStore
from leathershop.infrastructure.persistence.serialization import (
    dt_from_raw,
    dt_to_raw,
    lifecycle_from_raw,
    lifecycle_to_raw,
    money_from_raw,
    money_to_raw,
)

COLLECTION = "precios"


class JsonPriceRepository(PriceRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- PriceRepository interface --------------------------------------------

    def get_current(self, product_id: str) -> PriceRecord | None:
        current = self._newest_first(
            self._store.find(COLLECTION, product_id=product_id, current=True)
        )
        return self._to_domain(current[0]) if current else None

    def list_by_product(self, product_id: str) -> list[PriceRecord]:
        raws = self._newest_first(self._store.find(COLLECTION, product_id=product_id))
        return [self._to_domain(raw) for raw in raws]

    def retire_current(self, product_id: str, retired_at: datetime) -> int:
        batch = self._store.batch()
        for raw in self._store.find(COLLECTION, product_id=product_id, current=True):
            batch.update(
                COLLECTION,
                raw["id"],
                {"current": False, "retired_at": dt_to_raw(retired_at)},
            )
        return batch.commit()

    def add(self, record: PriceRecord) -> None:
        self._store.set(COLLECTION, record.id, self._to_raw(record))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _newest_first(raws: list[dict[str, Any]]) -> list[dict[str, Any]]:
        # Insertion order breaks ties between identical timestamps.
        indexed = list(enumerate(raws))
        indexed.sort(key=lambda pair: (pair[1]["created_at"], pair[0]), reverse=True)
        return [raw for _, raw in indexed]

    @staticmethod
    def _to_raw(record: PriceRecord) -> dict[str, Any]:
        return {
            "id": record.id,
            "product_id": record.product_id,
            "amount": money_to_raw(record.amount),
            "promo_amount": money_to_raw(record.promo_amount),
            "currency": record.currency,
            "created_at": dt_to_raw(record.created_at),
            **lifecycle_to_raw(record.lifecycle, flag="current"),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> PriceRecord:
        currency = raw["currency"]
        return PriceRecord(
            id=raw["id"],
            product_id=raw["product_id"],
            amount=money_from_raw(raw["amount"], currency),
            promo_amount=money_from_raw(raw.get("promo_amount"), currency),
            lifecycle=lifecycle_from_raw(raw, flag="current"),
            created_at=dt_from_raw(raw["created_at"]),
        )
