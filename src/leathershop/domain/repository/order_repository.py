"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from leathershop.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find(
        self,
        vendor_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        """Return orders newest first, optionally filtered."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
