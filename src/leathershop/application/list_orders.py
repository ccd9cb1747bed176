"""Application service: List Orders use case (query).

Employees only see the orders they placed; every other role sees all.
"""

from __future__ import annotations

from leathershop.application.dto import OrderDTO, order_to_dto
from leathershop.domain.model.order import OrderStatus, Role
from leathershop.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        caller_role: str,
        caller_id: str,
        status: str | None = None,
    ) -> list[OrderDTO]:
        status_filter = OrderStatus.parse(status) if status is not None else None
        vendor_filter = caller_id if Role.is_employee(caller_role) else None
        orders = self._order_repo.find(vendor_id=vendor_filter, status=status_filter)
        return [order_to_dto(order) for order in orders]
