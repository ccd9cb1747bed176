"""Abstract repository for price history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from leathershop.domain.model.price import PriceRecord


class PriceRepository(ABC):

    @abstractmethod
    def get_current(self, product_id: str) -> PriceRecord | None:
        """Return the product's current price record, or None."""

    @abstractmethod
    def list_by_product(self, product_id: str) -> list[PriceRecord]:
        """Return every price record of a product, newest first."""

    @abstractmethod
    def retire_current(self, product_id: str, retired_at: datetime) -> int:
        """Flip every current record of the product to retired in one batch.

        Returns the number of records retired (normally 0 or 1).
        """

    @abstractmethod
    def add(self, record: PriceRecord) -> None:
        """Insert a new price record."""
