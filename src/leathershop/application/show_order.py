"""Application service: Show Order use case (query)."""

from __future__ import annotations

from leathershop.application.dto import OrderDTO, order_to_dto
from leathershop.domain.exceptions import EntityNotFoundError
from leathershop.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, caller_role: str, caller_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found", order_id=order_id)
        order.ensure_visible_to(caller_role, caller_id)
        return order_to_dto(order)
