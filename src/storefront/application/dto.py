"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.  Money is
formatted (``"$15.00"``) and timestamps are ISO-8601 strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.notification import Notification
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.support_message import SupportMessage
from storefront.domain.model.user import User


@dataclass(frozen=True)
class ShippingSpec:
    """Input: the shipping form as the customer filled it in."""

    full_name: str
    phone: str
    address: str
    country: str
    city: str
    email: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    image: str
    created_at: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            image=product.image,
            created_at=product.created_at.isoformat(),
        )


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    customer_id: str
    lines: list[CartLineDTO]
    total: str

    @staticmethod
    def from_domain(cart: Cart) -> CartDTO:
        return CartDTO(
            customer_id=cart.customer_id,
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=str(line.price_snapshot),
                    line_total=str(line.line_total),
                )
                for line in cart.lines
            ],
            total=str(cart.total),
        )


@dataclass(frozen=True)
class CheckoutViewDTO:
    """Output: what the checkout page needs (GET /checkout)."""

    cart: CartDTO
    countries: dict[str, list[str]]


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    customer_id: str
    status: str
    status_reason: str | None
    full_name: str
    phone: str
    email: str
    address: str
    country: str
    city: str
    payment_method: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        shipping = order.shipping
        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.value,
            status_reason=order.status_reason,
            full_name=shipping.full_name,
            phone=shipping.phone,
            email=shipping.email,
            address=shipping.address,
            country=shipping.country,
            city=shipping.city,
            payment_method=order.payment_method,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            created_at=order.created_at.isoformat(),
        )


@dataclass(frozen=True)
class NotificationDTO:
    id: str
    recipient: str
    message: str
    created_at: str

    @staticmethod
    def from_domain(notification: Notification) -> NotificationDTO:
        return NotificationDTO(
            id=notification.id,
            recipient=notification.recipient,
            message=notification.message,
            created_at=notification.created_at.isoformat(),
        )


@dataclass(frozen=True)
class SupportMessageDTO:
    id: str
    sender: str
    message: str
    reply: str | None
    created_at: str

    @staticmethod
    def from_domain(message: SupportMessage) -> SupportMessageDTO:
        return SupportMessageDTO(
            id=message.id,
            sender=message.sender,
            message=message.message,
            reply=message.reply,
            created_at=message.created_at.isoformat(),
        )


@dataclass(frozen=True)
class UserDTO:
    """Output: a user without the password hash."""

    email: str
    created_at: str

    @staticmethod
    def from_domain(user: User) -> UserDTO:
        return UserDTO(email=user.email, created_at=user.created_at.isoformat())
