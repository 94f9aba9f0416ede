"""Application services: Show Cart and Show Checkout (queries)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CheckoutViewDTO
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.country_repository import CountryRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, customer_id: str) -> CartDTO:
        return CartDTO.from_domain(self._cart_repo.get(customer_id))


class ShowCheckoutHandler:

    def __init__(self, cart_repo: CartRepository, country_repo: CountryRepository) -> None:
        self._cart_repo = cart_repo
        self._country_repo = country_repo

    def handle(self, customer_id: str) -> CheckoutViewDTO:
        return CheckoutViewDTO(
            cart=CartDTO.from_domain(self._cart_repo.get(customer_id)),
            countries=self._country_repo.list_all(),
        )
