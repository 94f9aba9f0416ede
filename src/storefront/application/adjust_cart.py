"""Application services: Increase / Decrease cart quantity (customer)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.repository.cart_repository import CartRepository


class IncreaseCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, customer_id: str, product_id: str) -> CartDTO:
        with self._cart_repo.locked():
            cart = self._cart_repo.get(customer_id)
            cart.increase(product_id)
            self._cart_repo.save(cart)
        return CartDTO.from_domain(cart)


class DecreaseCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, customer_id: str, product_id: str) -> CartDTO:
        """Remove one unit; at zero the line is dropped from the cart."""
        with self._cart_repo.locked():
            cart = self._cart_repo.get(customer_id)
            cart.decrease(product_id)
            self._cart_repo.save(cart)
        return CartDTO.from_domain(cart)
