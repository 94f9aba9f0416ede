"""Application service: Expire Pending Orders use case.

Run on demand (CLI or admin endpoint); there is no background timer.
Every pending order older than ``max_age`` moves to ``expired`` and its
customer is notified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from storefront.application.order_notifier import OrderNotifier
from storefront.domain.repository.notification_repository import NotificationRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExpirePendingOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        notification_repo: NotificationRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._order_repo = order_repo
        self._notifier = OrderNotifier(notification_repo)
        self._clock = clock

    def handle(self, max_age: timedelta) -> list[str]:
        """Return the IDs of the orders that were expired."""
        cutoff = self._clock() - max_age
        expired: list[str] = []
        with self._order_repo.locked():
            for order in self._order_repo.list_all():
                if not order.is_pending or order.created_at > cutoff:
                    continue
                order.expire()
                self._order_repo.save(order)
                self._notifier.status_changed(order)
                expired.append(order.id)

        if expired:
            logger.info("Expired %d pending orders: %s", len(expired), ", ".join(expired))
        return expired
