"""Tests for session tokens, the cart store, configuration and hashing."""

from pathlib import Path

import pytest

from storefront.domain.exceptions import AuthError, ForbiddenError
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.memory_cart_repository import InMemoryCartRepository
from storefront.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher
from storefront.infrastructure.session.session_store import Principal, SessionStore


class _Clock:

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestSessionStore:

    def test_issue_and_resolve(self):
        store = SessionStore(ttl_seconds=60)
        token = store.issue(Principal.customer("a@b.com"))
        assert store.resolve(token).customer_id == "a@b.com"

    def test_expiry(self):
        clock = _Clock()
        store = SessionStore(ttl_seconds=60, clock=clock)
        token = store.issue(Principal.admin())
        clock.now += 61
        with pytest.raises(AuthError, match="expired"):
            store.resolve(token)

    def test_revoke(self):
        store = SessionStore(ttl_seconds=60)
        token = store.issue(Principal.admin())
        store.revoke(token)
        with pytest.raises(AuthError):
            store.resolve(token)

    def test_missing_token(self):
        with pytest.raises(AuthError, match="Not signed in"):
            SessionStore(ttl_seconds=60).resolve(None)

    def test_principal_guards(self):
        with pytest.raises(ForbiddenError):
            Principal.customer("a@b.com").require_admin()
        with pytest.raises(ForbiddenError):
            Principal.admin().require_customer()


class TestInMemoryCartRepository:

    def test_cart_survives_within_ttl(self):
        clock = _Clock()
        repo = InMemoryCartRepository(ttl_seconds=60, clock=clock)
        cart = Cart("a@b.com")
        cart.add(Product(id="p1", name="Scarf", price=Money.of("1")))
        repo.save(cart)
        clock.now += 30
        assert len(repo.get("a@b.com").lines) == 1

    def test_idle_cart_is_forgotten(self):
        clock = _Clock()
        repo = InMemoryCartRepository(ttl_seconds=60, clock=clock)
        cart = Cart("a@b.com")
        cart.add(Product(id="p1", name="Scarf", price=Money.of("1")))
        repo.save(cart)
        clock.now += 61
        assert repo.get("a@b.com").is_empty

    def test_returned_cart_is_a_copy(self):
        repo = InMemoryCartRepository(ttl_seconds=60)
        cart = Cart("a@b.com")
        cart.add(Product(id="p1", name="Scarf", price=Money.of("1")))
        repo.save(cart)
        repo.get("a@b.com").clear()
        assert not repo.get("a@b.com").is_empty


class TestSettings:

    def test_defaults(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.payment_checks_enabled is False

    def test_overrides(self, tmp_path: Path):
        settings = load_settings({
            "STOREFRONT_DATA_DIR": str(tmp_path),
            "STOREFRONT_ADMIN_PASSWORD": "s3cret",
            "STOREFRONT_AUTO_CONFIRM_PAYMENTS": "yes",
            "STOREFRONT_ORDER_EXPIRY_HOURS": "12",
            "STOREFRONT_LOG_LEVEL": "debug",
            "EXCHANGE_API_KEY": "k",
            "EXCHANGE_API_SECRET": "s",
        })
        assert settings.data_dir == tmp_path
        assert settings.admin_password == "s3cret"
        assert settings.auto_confirm_payments is True
        assert settings.order_expiry_hours == 12.0
        assert settings.log_level == "DEBUG"
        assert settings.payment_checks_enabled is True

    @pytest.mark.parametrize(
        "name,value",
        [
            ("STOREFRONT_CART_TTL_SECONDS", "soon"),
            ("STOREFRONT_SESSION_TTL_SECONDS", "-5"),
            ("STOREFRONT_AUTO_CONFIRM_PAYMENTS", "maybe"),
        ],
    )
    def test_invalid_values(self, name, value):
        with pytest.raises(ValueError, match=name):
            load_settings({name: value})


class TestBcryptPasswordHasher:

    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("secret1")
        assert hashed != "secret1"
        assert hasher.verify("secret1", hashed)
        assert not hasher.verify("secret2", hashed)

    def test_garbage_hash_does_not_verify(self):
        assert BcryptPasswordHasher(rounds=4).verify("secret1", "not-a-hash") is False
