"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import abstractmethod

from storefront.domain.model.order import Order
from storefront.domain.repository.base import LockableRepository


class OrderRepository(LockableRepository):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh, unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def list_for_customer(self, customer_id: str) -> list[Order]:
        """Return the customer's orders, oldest first."""

    def get_active_for_customer(self, customer_id: str) -> Order | None:
        """Return the customer's most recent pending order, or None."""
        pending = [o for o in self.list_for_customer(customer_id) if o.is_pending]
        if not pending:
            return None
        return max(pending, key=lambda o: o.created_at)

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
