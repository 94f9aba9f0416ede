"""Application service: Approve Order use case (admin).

Optionally asks the payment collaborator first.  The check runs before
the orders lock is taken so a slow payment service never holds up other
writers; the transition itself re-reads the order under the lock.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.application.order_notifier import OrderNotifier
from storefront.application.payment_verifier import PaymentVerifier
from storefront.domain.exceptions import EntityNotFoundError, PaymentNotConfirmedError
from storefront.domain.model.order import Order
from storefront.domain.repository.notification_repository import NotificationRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ApproveOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        notification_repo: NotificationRepository,
        payment_verifier: PaymentVerifier | None = None,
        auto_confirm_payments: bool = False,
    ) -> None:
        self._order_repo = order_repo
        self._notifier = OrderNotifier(notification_repo)
        self._payment_verifier = payment_verifier
        self._auto_confirm_payments = auto_confirm_payments

    def handle(self, order_id: str, verify_payment: bool = False) -> OrderDTO:
        """Approve a pending order and notify the customer exactly once.

        Raises ConflictError if the order is no longer pending (including
        a second approval), and PaymentNotConfirmedError if a payment check
        was required and did not come back positive.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        if not order.is_pending:
            order.approve()  # raises ConflictError for every non-pending status

        if verify_payment or self._auto_confirm_payments:
            self._require_confirmed_payment(order)

        with self._order_repo.locked():
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order {order_id} not found")
            order.approve()
            self._order_repo.save(order)
            self._notifier.status_changed(order)

        logger.info("Order %s approved", order_id)
        return OrderDTO.from_domain(order)

    def _require_confirmed_payment(self, order: Order) -> None:
        if self._payment_verifier is None:
            raise PaymentNotConfirmedError(
                "Payment confirmation was requested but no payment service is configured"
            )
        if not self._payment_verifier.is_confirmed(order):
            raise PaymentNotConfirmedError(f"Payment for order {order.id} is not confirmed")
