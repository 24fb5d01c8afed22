"""Application service: Update Order Status use case.

Records who moved the order to which status and when. Any status is
accepted from any status; role checks belong to the calling layer. The
save is conditional on the version loaded here, so two concurrent
updates cannot silently drop a history entry.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import OrderDTO
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.order import OrderStatus
from marketplace.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock = utc_now) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(
        self,
        order_id: str,
        status: OrderStatus | str,
        acting_user_id: str,
    ) -> OrderDTO:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)

        previous = order.status
        order.record_status(new_status, acting_user_id, self._clock())
        self._order_repo.save(order)

        logger.info(
            "order.status_updated",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
            updated_by=acting_user_id,
        )
        return OrderDTO.from_order(order)
