"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from storefront.application.payment_verifier import PaymentVerifier
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.country_repository import CountryRepository
from storefront.domain.repository.message_repository import MessageRepository
from storefront.domain.repository.notification_repository import NotificationRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.infrastructure.config import Settings
from storefront.infrastructure.payment.exchange_client import ExchangeWalletClient
from storefront.infrastructure.persistence.json_country_repository import (
    JsonCountryRepository,
)
from storefront.infrastructure.persistence.json_message_repository import (
    JsonMessageRepository,
)
from storefront.infrastructure.persistence.json_notification_repository import (
    JsonNotificationRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.persistence.memory_cart_repository import (
    InMemoryCartRepository,
)
from storefront.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher
from storefront.infrastructure.session.session_store import SessionStore


@dataclass
class Container:
    settings: Settings
    products: ProductRepository
    orders: OrderRepository
    notifications: NotificationRepository
    messages: MessageRepository
    users: UserRepository
    countries: CountryRepository
    carts: CartRepository
    sessions: SessionStore
    password_hasher: PasswordHasher
    payment_verifier: PaymentVerifier | None

    @property
    def order_expiry(self) -> timedelta:
        return timedelta(hours=self.settings.order_expiry_hours)

    def close(self) -> None:
        if self.payment_verifier is not None:
            self.payment_verifier.close()


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def notification_repository(settings: Settings) -> JsonNotificationRepository:
    return JsonNotificationRepository(settings.data_dir / "notifications.json")


def message_repository(settings: Settings) -> JsonMessageRepository:
    return JsonMessageRepository(settings.data_dir / "messages.json")


def user_repository(settings: Settings) -> JsonUserRepository:
    return JsonUserRepository(settings.data_dir / "users.json")


def country_repository(settings: Settings) -> JsonCountryRepository:
    return JsonCountryRepository(settings.data_dir / "countries.json")


def payment_verifier(settings: Settings) -> PaymentVerifier | None:
    """Return a verifier backed by the exchange wallet, or None if unconfigured."""
    if not settings.payment_checks_enabled:
        return None
    client = ExchangeWalletClient(
        base_url=settings.exchange_api_base,
        api_key=settings.exchange_api_key,
        api_secret=settings.exchange_api_secret,
        timeout=settings.exchange_timeout_seconds,
    )
    # The verifier's bound is a little above the HTTP timeout so the
    # request's own timeout error is what normally surfaces.
    return PaymentVerifier(client, timeout=settings.exchange_timeout_seconds + 1.0)


def build_container(settings: Settings) -> Container:
    return Container(
        settings=settings,
        products=product_repository(settings),
        orders=order_repository(settings),
        notifications=notification_repository(settings),
        messages=message_repository(settings),
        users=user_repository(settings),
        countries=country_repository(settings),
        carts=InMemoryCartRepository(ttl_seconds=settings.cart_ttl_seconds),
        sessions=SessionStore(ttl_seconds=settings.session_ttl_seconds),
        password_hasher=BcryptPasswordHasher(),
        payment_verifier=payment_verifier(settings),
    )
