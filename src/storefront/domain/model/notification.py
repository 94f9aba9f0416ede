"""Notification: a customer-facing message emitted by an order transition.

Notifications are append-only: once written they are never edited or
removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class Notification:
    id: str
    recipient: str
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(notification_id: str, recipient: str, message: str) -> Notification:
        if not recipient or not recipient.strip():
            raise ValidationError("Notification recipient is required")
        if not message or not message.strip():
            raise ValidationError("Notification message is required")
        return Notification(
            id=notification_id,
            recipient=recipient.strip(),
            message=message.strip(),
        )


def order_status_message(order: Order) -> str:
    """Text sent to the customer after *order* changed status."""
    status = order.status.value
    if order.status_reason:
        return f"Your order {order.id} has been {status}: {order.status_reason}."
    return f"Your order {order.id} has been {status}. Total: {order.total}."
