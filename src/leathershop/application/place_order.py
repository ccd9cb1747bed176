"""Application service: Place Order use case.

Turns the caller's input into domain objects and hands them to the
order placement domain service, which validates stock, persists the
order and debits stock.
"""

from __future__ import annotations

from leathershop.application.dto import CustomerSpec, OrderDTO, OrderItemSpec, order_to_dto
from leathershop.domain.model.order import Customer, OrderLineItem
from leathershop.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from leathershop.domain.repository.order_repository import OrderRepository
from leathershop.domain.repository.product_repository import ProductRepository
from leathershop.domain.repository.stock_repository import StockRepository
from leathershop.domain.service.order_placement_service import OrderPlacementService
from leathershop.domain.service.sequence_generator import SequenceGenerator
from leathershop.domain.service.stock_ledger import StockLedger


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        sequences: SequenceGenerator,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._order_repo = order_repo
        self._stock_repo = stock_repo
        self._product_repo = product_repo
        self._sequences = sequences
        self._currency = currency

    def handle(
        self,
        customer: CustomerSpec,
        item_specs: list[OrderItemSpec],
        vendor_id: str,
        notes: str = "",
    ) -> OrderDTO:
        """Place a new order.

        Unit prices are the ones the caller quoted; the live price
        history is not consulted, so the order is a price snapshot.
        """
        line_items = [
            OrderLineItem(
                product_id=spec.product_id,
                quantity=Quantity(spec.quantity),
                unit_price=Money.of(spec.unit_price, self._currency),  # <-- price snapshot
            )
            for spec in item_specs
        ]

        ledger = StockLedger(self._stock_repo, self._product_repo, self._sequences)
        svc = OrderPlacementService(self._order_repo, ledger, self._sequences)
        order = svc.place(
            customer=Customer(
                name=customer.name.strip() if customer.name else "",
                email=customer.email,
                phone=customer.phone,
                address=customer.address,
            ),
            items=line_items,
            vendor_id=vendor_id,
            notes=notes,
        )
        return order_to_dto(order)
