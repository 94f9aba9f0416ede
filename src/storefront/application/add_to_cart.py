"""Application service: Add To Cart use case (customer)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, customer_id: str, product_id: str) -> CartDTO:
        """Add one unit of a product, capturing its current price.

        An unknown product is rejected before the cart is touched.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        with self._cart_repo.locked():
            cart = self._cart_repo.get(customer_id)
            cart.add(product)
            self._cart_repo.save(cart)
        return CartDTO.from_domain(cart)
