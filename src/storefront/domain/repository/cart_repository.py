"""Abstract store for session carts.

Carts are not durable: implementations may forget a cart after a period
of inactivity.  A forgotten cart reads back as an empty one.
"""

from __future__ import annotations

from abc import abstractmethod

from storefront.domain.model.cart import Cart
from storefront.domain.repository.base import LockableRepository


class CartRepository(LockableRepository):

    @abstractmethod
    def get(self, customer_id: str) -> Cart:
        """Return the customer's cart, or a new empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Store the cart for its customer."""
