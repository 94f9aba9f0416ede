"""Application services: Show Order and List Orders (queries)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return OrderDTO.from_domain(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, customer_id: str | None = None) -> list[OrderDTO]:
        """All orders for the admin dashboard, or one customer's own."""
        if customer_id is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_for_customer(customer_id)
        return [OrderDTO.from_domain(o) for o in orders]
