"""Application service: Update Order Status use case.

Any recognised status can be set from any status.  Moves that are not a
forward step of pending -> confirmed -> in_process -> shipped ->
delivered (or a cancellation of an open order) are accepted but logged
as irregular.
"""

from __future__ import annotations

import logging

from leathershop.application.dto import OrderDTO, order_to_dto
from leathershop.domain.exceptions import EntityNotFoundError
from leathershop.domain.model.order import OrderStatus
from leathershop.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, new_status: str) -> OrderDTO:
        status = OrderStatus.parse(new_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found", order_id=order_id)

        previous = order.status
        regular = order.set_status(status)
        self._order_repo.save(order)

        if regular:
            logger.info("Order %s status %s -> %s", order_id, previous.value, status.value)
        else:
            logger.warning(
                "Order %s irregular status change %s -> %s",
                order_id,
                previous.value,
                status.value,
            )
        return order_to_dto(order)
