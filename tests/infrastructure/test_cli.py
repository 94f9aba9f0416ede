"""Tests for the admin CLI, run against JSON files in a temp dir."""

import dataclasses
import json

from click.testing import CliRunner

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import ShippingSpec
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import Settings
from tests.fakes import FakePasswordHasher

SHIPPING = ShippingSpec(
    full_name="Ada Obi",
    phone="08012345678",
    address="12 Marina Road",
    country="Nigeria",
    city="Lagos",
    email="ada@example.com",
)


def _setup(tmp_path):
    (tmp_path / "countries.json").write_text(
        json.dumps({"Nigeria": ["Lagos"]}), encoding="utf-8"
    )
    container = build_container(Settings(data_dir=tmp_path))
    return dataclasses.replace(container, password_hasher=FakePasswordHasher())


def _run(container, *args):
    return CliRunner().invoke(cli, list(args), obj=container)


def _place_order(container, product_id: str) -> str:
    AddToCartHandler(container.carts, container.products).handle("ada@example.com", product_id)
    handler = CheckoutHandler(container.orders, container.carts, container.countries)
    return handler.handle("ada@example.com", SHIPPING, "crypto").id


def _only_product_id(container) -> str:
    (product,) = container.products.list_all()
    return product.id


class TestProductCommands:

    def test_add_and_list(self, tmp_path):
        container = _setup(tmp_path)
        result = _run(container, "product", "add", "--name", "Silk Scarf", "--price", "15")
        assert result.exit_code == 0, result.output
        assert "$15.00" in result.output

        listing = _run(container, "product", "list")
        assert "Silk Scarf" in listing.output

    def test_invalid_price(self, tmp_path):
        container = _setup(tmp_path)
        result = _run(container, "product", "add", "--name", "Scarf", "--price", "-1")
        assert result.exit_code == 1
        assert "negative" in result.output

    def test_update_requires_a_field(self, tmp_path):
        container = _setup(tmp_path)
        result = _run(container, "product", "update", "--id", "x")
        assert result.exit_code == 2

    def test_delete_unknown(self, tmp_path):
        container = _setup(tmp_path)
        result = _run(container, "product", "delete", "--id", "missing")
        assert result.exit_code == 1

    def test_fix_images(self, tmp_path):
        container = _setup(tmp_path)
        static = tmp_path / "public"
        (static / "images").mkdir(parents=True)
        (static / "images" / "real.jpg").write_bytes(b"jpg")
        _run(container, "product", "add", "--name", "A", "--price", "1", "--image", "/images/real.jpg")
        _run(container, "product", "add", "--name", "B", "--price", "1", "--image", "/images/gone.jpg")

        result = _run(container, "product", "fix-images", "--static-dir", str(static))
        assert result.exit_code == 0, result.output
        assert "Fixed 1 product(s)." in result.output
        images = sorted(p.image for p in container.products.list_all())
        assert images == ["/images/default.jpg", "/images/real.jpg"]


class TestOrderCommands:

    def test_approve_then_list(self, tmp_path):
        container = _setup(tmp_path)
        _run(container, "product", "add", "--name", "Silk Scarf", "--price", "15")
        order_id = _place_order(container, _only_product_id(container))

        result = _run(container, "order", "approve", "--id", order_id)
        assert result.exit_code == 0, result.output
        assert "ada@example.com notified" in result.output

        listing = _run(container, "order", "list", "--status", "approved")
        assert order_id in listing.output
        assert len(container.notifications.list_all()) == 1

    def test_approve_twice_fails(self, tmp_path):
        container = _setup(tmp_path)
        _run(container, "product", "add", "--name", "Silk Scarf", "--price", "15")
        order_id = _place_order(container, _only_product_id(container))
        _run(container, "order", "approve", "--id", order_id)

        result = _run(container, "order", "approve", "--id", order_id)
        assert result.exit_code == 1
        assert "already approved" in result.output

    def test_show_unknown(self, tmp_path):
        result = _run(_setup(tmp_path), "order", "show", "--id", "nope")
        assert result.exit_code == 1

    def test_expire_rejects_non_positive_age(self, tmp_path):
        result = _run(_setup(tmp_path), "order", "expire", "--older-than-hours", "0")
        assert result.exit_code == 2

    def test_expire_nothing_pending(self, tmp_path):
        result = _run(_setup(tmp_path), "order", "expire")
        assert result.exit_code == 0
        assert "Expired 0 order(s)." in result.output


class TestSupportCommands:

    def test_reply_without_messages(self, tmp_path):
        result = _run(_setup(tmp_path), "message", "reply", "--user", "a@b.com", "--text", "hi")
        assert result.exit_code == 1

    def test_empty_listings(self, tmp_path):
        container = _setup(tmp_path)
        assert "No messages." in _run(container, "message", "list").output
        assert "No notifications." in _run(container, "notification", "list").output
        assert "No users." in _run(container, "user", "list").output
