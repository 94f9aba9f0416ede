"""Application service: Reject Order use case (admin)."""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.application.order_notifier import OrderNotifier
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.notification_repository import NotificationRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RejectOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self._order_repo = order_repo
        self._notifier = OrderNotifier(notification_repo)

    def handle(self, order_id: str, reason: str) -> OrderDTO:
        with self._order_repo.locked():
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order {order_id} not found")
            order.reject(reason)
            self._order_repo.save(order)
            self._notifier.status_changed(order)

        logger.info("Order %s rejected: %s", order_id, order.status_reason)
        return OrderDTO.from_domain(order)
