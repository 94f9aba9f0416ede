"""Application service: List Notifications (query)."""

from __future__ import annotations

from storefront.application.dto import NotificationDTO
from storefront.domain.repository.notification_repository import NotificationRepository
from storefront.domain.repository.order_repository import OrderRepository


class ListNotificationsHandler:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def handle(self, recipient: str | None = None) -> list[NotificationDTO]:
        if recipient is None:
            notifications = self._notification_repo.list_all()
        else:
            notifications = self._notification_repo.list_for_recipient(recipient)
        return [NotificationDTO.from_domain(n) for n in notifications]


class ListCustomerNotificationsHandler:
    """What a signed-in customer sees on their dashboard.

    Notifications are addressed to the shipping e-mail of each order, which
    need not be the address the customer signs in with, so the inbox covers
    the account e-mail plus every shipping e-mail on the customer's orders.
    """

    def __init__(
        self,
        notification_repo: NotificationRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._notification_repo = notification_repo
        self._order_repo = order_repo

    def handle(self, customer_id: str) -> list[NotificationDTO]:
        addresses = {customer_id.strip().lower()}
        addresses.update(
            order.recipient.lower() for order in self._order_repo.list_for_customer(customer_id)
        )
        return [
            NotificationDTO.from_domain(n)
            for n in self._notification_repo.list_all()
            if n.recipient.lower() in addresses
        ]
