"""Application service: Continue Checkout use case.

The customer acknowledges their pending order and is shown its current
status.  Nothing is mutated; payment is confirmed later, by an admin or
by the payment collaborator.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ContinueCheckoutHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, customer_id: str, order_id: str | None = None) -> OrderDTO:
        """Return the given order, or the customer's active pending order.

        Orders belonging to somebody else are reported as not found.
        """
        if order_id is None:
            order = self._order_repo.get_active_for_customer(customer_id)
            if order is None:
                raise EntityNotFoundError("No pending order to continue")
        else:
            order = self._order_repo.get_by_id(order_id)
            if order is None or order.customer_id != customer_id:
                raise EntityNotFoundError(f"Order {order_id} not found")
        return OrderDTO.from_domain(order)
