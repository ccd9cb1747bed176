"""Abstract repository for StockRecord aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from leathershop.domain.model.stock import StockRecord

T = TypeVar("T")


class StockRepository(ABC):

    @abstractmethod
    def get_active(self, product_id: str) -> StockRecord | None:
        """Return the active stock record for a product, or None."""

    @abstractmethod
    def list_active(self) -> list[StockRecord]:
        """Return every active stock record."""

    @abstractmethod
    def add(self, record: StockRecord) -> None:
        """Insert a new stock record."""

    @abstractmethod
    def update_active(self, product_id: str, mutate: Callable[[StockRecord], T]) -> T | None:
        """Atomically load, mutate and store the product's active record.

        *mutate* runs against the latest stored state; if it raises,
        nothing is written and the exception propagates.  Returns what
        *mutate* returned, or None when the product has no active record.
        """
