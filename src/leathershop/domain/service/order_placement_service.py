"""Domain service: Order Placement.

Coordinates the cross-aggregate work of turning a list of line items
into a persisted order and the matching stock debits.

The flow is validate-then-write:
  Phase 1: read the stock of every product and fail before any write
           if one of them cannot cover the requested quantity.
  Phase 2: persist the order, then debit each product through the
           stock ledger's atomic conditional decrement.

Phase 1 is advisory, not a reservation: a concurrent order can consume
the same stock before phase 2.  When a debit then fails, the order
stays persisted as ``pending`` and earlier debits stay applied; the
error carries the order id so the caller can reconcile.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from leathershop.domain.exceptions import EntityNotFoundError, InsufficientStockError
from leathershop.domain.model.identifiers import EntityType
from leathershop.domain.model.order import (
    Customer,
    Order,
    OrderLineItem,
    format_order_number,
    order_number_counter,
)
from leathershop.domain.model.stock import AdjustDirection
from leathershop.domain.repository.order_repository import OrderRepository
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger

logger = logging.getLogger(__name__)


class OrderPlacementService:

    def __init__(
        self,
        order_repo: OrderRepository,
        stock_ledger: StockLedger,
        sequences: SequenceGenerator,
    ) -> None:
        self._order_repo = order_repo
        self._stock_ledger = stock_ledger
        self._sequences = sequences

    def place(
        self,
        customer: Customer,
        items: list[OrderLineItem],
        vendor_id: str,
        notes: str = "",
    ) -> Order:
        Order.validate_new(items, vendor_id)

        # Phase 1: validate every line before any write
        self._check_stock(items)

        # Phase 2: persist, then debit
        now = datetime.now(timezone.utc)
        consecutive = self._sequences.next(order_number_counter(now), initial=1)
        order = Order.create(
            order_id=self._sequences.next_id(EntityType.ORDERS),
            number=format_order_number(now, consecutive),
            customer=customer,
            items=items,
            vendor_id=vendor_id,
            notes=notes,
            created_at=now,
        )
        self._order_repo.save(order)
        logger.info(
            "Order %s (%s) placed for %s, total %s",
            order.number,
            order.id,
            customer.name,
            order.total,
        )

        self._debit_stock(order)
        return order

    def _check_stock(self, items: list[OrderLineItem]) -> None:
        # Lines for the same product must be covered together.
        requested: dict[str, int] = {}
        for line in items:
            requested[line.product_id] = requested.get(line.product_id, 0) + line.quantity.value

        for product_id, quantity in requested.items():
            try:
                stock = self._stock_ledger.get(product_id)
            except EntityNotFoundError:
                raise InsufficientStockError(product_id, quantity, None) from None
            if not stock.covers(quantity):
                raise InsufficientStockError(product_id, quantity, stock.quantity)

    def _debit_stock(self, order: Order) -> None:
        debited: list[str] = []
        for line in order.items:
            try:
                self._stock_ledger.adjust(
                    line.product_id,
                    line.quantity.value,
                    AdjustDirection.DECREASE,
                    reason=f"order {order.number}",
                )
            except (InsufficientStockError, EntityNotFoundError) as exc:
                available = exc.available if isinstance(exc, InsufficientStockError) else None
                logger.error(
                    "Order %s persisted but stock debit failed for product %s; "
                    "already debited: %s",
                    order.id,
                    line.product_id,
                    ", ".join(debited) or "none",
                )
                raise InsufficientStockError(
                    line.product_id,
                    line.quantity.value,
                    available,
                    order_id=order.id,
                    debited=list(debited),
                ) from exc
            debited.append(line.product_id)
