"""Writes the customer notification for an order status change."""

from __future__ import annotations

from storefront.domain.model.notification import Notification, order_status_message
from storefront.domain.model.order import Order
from storefront.domain.repository.notification_repository import NotificationRepository


class OrderNotifier:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def status_changed(self, order: Order) -> Notification:
        notification = Notification.create(
            notification_id=self._notification_repo.next_id(),
            recipient=order.recipient,
            message=order_status_message(order),
        )
        self._notification_repo.append(notification)
        return notification
