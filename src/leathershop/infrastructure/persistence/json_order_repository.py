"""JSON-document-backed implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from leathershop.domain.model.order import Customer, Order, OrderLineItem, OrderStatus
from leathershop.domain.model.value_objects import Quantity
from leathershop.domain.repository.order_repository import OrderRepository
from leathershop.infrastructure.persistence.json_document_store import JsonDocumentStore
from leathershop.infrastructure.persistence.serialization import (
    dt_from_raw,
    dt_to_raw,
    money_from_raw,
    money_to_raw,
)

COLLECTION = "pedidos"


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._store.get(COLLECTION, order_id)
        return self._to_domain(raw) if raw is not None else None

    def find(
        self,
        vendor_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        filters: dict[str, Any] = {}
        if vendor_id is not None:
            filters["vendor_id"] = vendor_id
        if status is not None:
            filters["status"] = status.value
        raws = self._store.find(COLLECTION, **filters)
        orders = [self._to_domain(raw) for raw in raws]
        orders.sort(key=lambda order: order.created_at, reverse=True)
        return orders

    def save(self, order: Order) -> None:
        self._store.set(COLLECTION, order.id, self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "id": order.id,
            "number": order.number,
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
                "phone": order.customer.phone,
                "address": order.customer.address,
            },
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "unit_price": money_to_raw(item.unit_price),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
            "total": money_to_raw(order.total),
            "status": order.status.value,
            "vendor_id": order.vendor_id,
            "notes": order.notes,
            "created_at": dt_to_raw(order.created_at),
            "updated_at": dt_to_raw(order.updated_at),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=money_from_raw(i["unit_price"], i["currency"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            number=raw["number"],
            customer=Customer(**raw["customer"]),
            items=items,
            vendor_id=raw["vendor_id"],
            notes=raw.get("notes", ""),
            status=OrderStatus(raw["status"]),
            created_at=dt_from_raw(raw["created_at"]),
            updated_at=dt_from_raw(raw.get("updated_at")),
        )
