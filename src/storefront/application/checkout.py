"""Application service: Checkout use case.

Turns the customer's cart into a pending order.  This is the only place
that coordinates the cart, the country lookup and the order aggregate.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, ShippingSpec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Quantity, ShippingDetails
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.country_repository import CountryRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        country_repo: CountryRepository,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._country_repo = country_repo

    def handle(
        self,
        customer_id: str,
        shipping: ShippingSpec,
        payment_method: str,
    ) -> OrderDTO:
        """Create a pending order from the customer's cart.

        Steps:
        1. Validate the shipping form (all fields, known country and city).
        2. Refuse an empty cart: no order is created, the cart is kept.
        3. Copy every cart line, with its add-time price, into the order.
        4. Persist the order, then clear the cart.
        """
        details = self._validate_shipping(shipping)

        with self._cart_repo.locked():
            cart = self._cart_repo.get(customer_id)
            if cart.is_empty:
                raise ValidationError("Cannot check out an empty cart")

            line_items = [
                OrderLineItem(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=Quantity(line.quantity),
                    unit_price=line.price_snapshot,
                )
                for line in cart.lines
            ]

            order = Order.create(
                order_id=self._order_repo.next_id(),
                customer_id=customer_id,
                shipping=details,
                items=line_items,
                payment_method=payment_method,
            )
            self._order_repo.save(order)

            cart.clear()
            self._cart_repo.save(cart)

        logger.info(
            "Order %s created for %s (total %s, %d lines)",
            order.id, customer_id, order.total, len(order.items),
        )
        return OrderDTO.from_domain(order)

    def _validate_shipping(self, shipping: ShippingSpec) -> ShippingDetails:
        details = ShippingDetails(
            full_name=shipping.full_name,
            phone=shipping.phone,
            address=shipping.address,
            country=shipping.country,
            city=shipping.city,
            email=shipping.email,
        )
        cities = self._country_repo.cities_for(details.country)
        if cities is None:
            raise ValidationError(f"Unknown country: '{details.country}'")
        if not any(c.lower() == details.city.lower() for c in cities):
            raise ValidationError(
                f"City '{details.city}' is not listed for {details.country}"
            )
        return details
