"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, TypeVar

from leathershop.domain.exceptions import TransientStoreError
from leathershop.domain.model.order import Order, OrderStatus
from leathershop.domain.model.price import PriceRecord
from leathershop.domain.model.product import Product
from leathershop.domain.model.stock import StockRecord
from leathershop.domain.repository.order_repository import OrderRepository
from leathershop.domain.repository.price_repository import PriceRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.repository.transaction import Transaction, TransactionRunner
from leathershop.domain.service.sequence_generator import SequenceGenerator

T = TypeVar("T")


class FakeTransactionRunner(TransactionRunner):
    """Dict-backed transactions; ``fail_next`` aborts that many runs."""

    def __init__(self) -> None:
        self.docs: dict[tuple[str, str], dict[str, Any]] = {}
        self.fail_next = 0

    def run_transaction(self, fn: Callable[[Transaction], T]) -> T:
        tx = _FakeTransaction(self.docs)
        result = fn(tx)
        if self.fail_next > 0:
            self.fail_next -= 1
            raise TransientStoreError("simulated write conflict")
        self.docs.update(tx.writes)
        return result


class _FakeTransaction(Transaction):

    def __init__(self, docs: dict[tuple[str, str], dict[str, Any]]) -> None:
        self._docs = docs
        self.writes: dict[tuple[str, str], dict[str, Any]] = {}

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        key = (collection, doc_id)
        doc = self.writes.get(key, self._docs.get(key))
        return copy.deepcopy(doc) if doc is not None else None

    def find(self, collection: str, **equals: Any) -> list[dict[str, Any]]:
        return [
            copy.deepcopy(doc)
            for (coll, _), doc in self._docs.items()
            if coll == collection and all(doc.get(k) == v for k, v in equals.items())
        ]

    def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self.writes[(collection, doc_id)] = copy.deepcopy(data)


def fake_sequences() -> SequenceGenerator:
    return SequenceGenerator(FakeTransactionRunner())


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self.list_active():
            if p.name.lower() == name.strip().lower():
                return p
        return None

    def list_active(self) -> list[Product]:
        return [p for p in self._store.values() if p.active]

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakePriceRepository(PriceRepository):

    def __init__(self) -> None:
        self._records: list[PriceRecord] = []
        self.retire_calls = 0

    def get_current(self, product_id: str) -> PriceRecord | None:
        current = [r for r in self.list_by_product(product_id) if r.current]
        return current[0] if current else None

    def list_by_product(self, product_id: str) -> list[PriceRecord]:
        indexed = [
            (i, r) for i, r in enumerate(self._records) if r.product_id == product_id
        ]
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [r for _, r in indexed]

    def retire_current(self, product_id: str, retired_at: datetime) -> int:
        self.retire_calls += 1
        retired = 0
        for record in self._records:
            if record.product_id == product_id and record.current:
                record.lifecycle = record.lifecycle.retire(retired_at)
                retired += 1
        return retired

    def add(self, record: PriceRecord) -> None:
        self._records.append(record)


class FakeStockRepository(StockRepository):

    def __init__(self, records: list[StockRecord] | None = None) -> None:
        self._store: dict[str, StockRecord] = {}
        for record in records or []:
            self._store[record.id] = record

    def get_active(self, product_id: str) -> StockRecord | None:
        for record in self._store.values():
            if record.product_id == product_id and record.active:
                return replace(record)
        return None

    def list_active(self) -> list[StockRecord]:
        return [replace(r) for r in self._store.values() if r.active]

    def add(self, record: StockRecord) -> None:
        self._store[record.id] = record

    def update_active(self, product_id: str, mutate: Callable[[StockRecord], T]) -> T | None:
        current = self.get_active(product_id)
        if current is None:
            return None
        result = mutate(current)
        self._store[current.id] = current
        return result

    def quantity_of(self, product_id: str) -> int:
        record = self.get_active(product_id)
        assert record is not None
        return record.quantity


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def find(
        self,
        vendor_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        orders = [
            o
            for o in self._store.values()
            if (vendor_id is None or o.vendor_id == vendor_id)
            and (status is None or o.status == status)
        ]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        self._store[order.id] = order

    def count(self) -> int:
        return len(self._store)
