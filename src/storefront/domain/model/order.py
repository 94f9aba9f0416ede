"""Order aggregate: the core of the domain.

An order is created once, at checkout, from the customer's cart.  Its
line items and total are snapshots: nothing that happens to the catalog
afterwards changes them.  After creation only the status moves.

    pending ──approve──▶ approved
       │
       ├────reject────▶ rejected
       └────expire────▶ expired

Every state other than ``pending`` is terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ConflictError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails


class OrderStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    EXPIRED = "expired"


@dataclass(frozen=True)
class OrderLineItem:
    """Captures name, quantity and price of a cart line at checkout."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the item went into the cart

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules and computes the total.  The ``__init__`` is plain so
    the repository can reconstitute persisted orders without
    re-validating or recomputing anything.
    """

    id: str
    customer_id: str
    shipping: ShippingDetails
    items: list[OrderLineItem]
    total: Money
    payment_method: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status_reason: str | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_id: str,
        shipping: ShippingDetails,
        items: list[OrderLineItem],
        payment_method: str,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(
            id=order_id,
            customer_id=customer_id.strip(),
            shipping=shipping,
            items=list(items),
            total=total,
            payment_method=payment_method.strip(),
        )

    # --- State transitions ----------------------------------------------------

    def approve(self) -> None:
        """Transition pending -> approved.

        Approving twice is a conflict rather than a no-op, so the caller
        can tell whether this call actually changed anything (and only
        then notify the customer).
        """
        if self.status == OrderStatus.APPROVED:
            raise ConflictError(f"Order {self.id} is already approved")
        self._require_pending("approve")
        self.status = OrderStatus.APPROVED
        self.status_reason = None

    def reject(self, reason: str) -> None:
        """Transition pending -> rejected (payment failed or admin refused)."""
        if not reason or not reason.strip():
            raise ValidationError("A rejection reason is required")
        self._require_pending("reject")
        self.status = OrderStatus.REJECTED
        self.status_reason = reason.strip()

    def expire(self) -> None:
        """Transition pending -> expired (payment never arrived)."""
        self._require_pending("expire")
        self.status = OrderStatus.EXPIRED
        self.status_reason = "payment not received in time"

    # --- Queries --------------------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def recipient(self) -> str:
        """Who gets told about status changes."""
        return self.shipping.email

    # --- Internal helpers -----------------------------------------------------

    def _require_pending(self, action: str) -> None:
        if self.status != OrderStatus.PENDING:
            raise ConflictError(
                f"Cannot {action} order {self.id}: current status is "
                f"{self.status.value}, expected {OrderStatus.PENDING.value}"
            )
