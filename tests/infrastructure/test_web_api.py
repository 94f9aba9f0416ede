"""End-to-end tests for the HTTP API, backed by JSON files in a temp dir."""

import dataclasses
import json

import pytest
from fastapi.testclient import TestClient

from storefront.application.payment_verifier import PaymentVerifier
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.config import Settings
from storefront.infrastructure.web.app import create_app
from tests.fakes import FakePasswordHasher, StubPaymentConfirmation

ADMIN_PASSWORD = "s3cret"
SHIPPING = {
    "fullName": "Ada Obi",
    "phone": "08012345678",
    "email": "ada@example.com",
    "address": "12 Marina Road",
    "country": "Nigeria",
    "city": "Lagos",
    "paymentMethod": "crypto",
}


def _setup(tmp_path):
    (tmp_path / "countries.json").write_text(
        json.dumps({"Nigeria": ["Lagos", "Abuja"]}), encoding="utf-8"
    )
    container = build_container(Settings(data_dir=tmp_path, admin_password=ADMIN_PASSWORD))
    container = dataclasses.replace(container, password_hasher=FakePasswordHasher())
    return TestClient(create_app(container)), container


def _order(order_id: str) -> Order:
    return Order.create(
        order_id=order_id,
        customer_id="ada@example.com",
        shipping=ShippingDetails(
            "Ada Obi", "0801", "12 Marina Road", "Nigeria", "Lagos", "ada@example.com"
        ),
        items=[OrderLineItem("p1", "Silk Scarf", Quantity(1), Money.of("15.00"))],
        payment_method="crypto",
    )


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def _customer_token(client: TestClient, email: str = "ada@example.com") -> str:
    assert client.post("/signup", json={"email": email, "password": "secret1"}).status_code == 201
    response = client.post("/login", json={"email": email, "password": "secret1"})
    assert response.status_code == 200
    return response.json()["token"]


def _admin_token(client: TestClient) -> str:
    response = client.post("/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


def _add_product(client: TestClient, admin: str, name: str = "Silk Scarf", price="15.00") -> str:
    response = client.post(
        "/admin/product/upload", json={"name": name, "price": price}, headers=_auth(admin)
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestPurchaseFlow:

    def test_checkout_approve_and_notify(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        customer = _customer_token(client)
        scarf = _add_product(client, admin)
        bag = _add_product(client, admin, name="Tote Bag", price=20)

        client.post("/cart/add", json={"id": scarf}, headers=_auth(customer))
        client.post("/cart/add", json={"id": scarf}, headers=_auth(customer))
        cart = client.post("/cart/add", json={"id": bag}, headers=_auth(customer)).json()
        assert cart["total"] == "$50.00"

        response = client.post("/checkout", json=SHIPPING, headers=_auth(customer))
        assert response.status_code == 201
        order = response.json()
        assert order["status"] == "pending"
        assert order["total"] == "$50.00"
        assert client.get("/cart", headers=_auth(customer)).json()["lines"] == []

        resumed = client.post("/checkout/continue", headers=_auth(customer))
        assert resumed.json()["id"] == order["id"]

        approved = client.post(
            "/admin/order/approve", json={"orderId": order["id"]}, headers=_auth(admin)
        )
        assert approved.status_code == 200
        assert approved.json()["status"] == "approved"

        again = client.post(
            "/admin/order/approve", json={"orderId": order["id"]}, headers=_auth(admin)
        )
        assert again.status_code == 409
        assert again.json()["error_type"] == "ConflictError"

        notes = client.get("/notifications", headers=_auth(customer)).json()
        assert len(notes) == 1
        assert order["id"] in notes[0]["message"]
        assert notes[0]["recipient"] == "ada@example.com"

    def test_price_snapshot_survives_catalog_edit(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        customer = _customer_token(client)
        scarf = _add_product(client, admin)

        client.post("/cart/add", json={"id": scarf}, headers=_auth(customer))
        client.post(f"/admin/product/edit/{scarf}", json={"price": "99"}, headers=_auth(admin))

        order = client.post("/checkout", json=SHIPPING, headers=_auth(customer)).json()
        assert order["total"] == "$15.00"

    def test_notice_reaches_customer_who_ships_elsewhere(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        customer = _customer_token(client, email="login@example.com")
        client.post("/cart/add", json={"id": _add_product(client, admin)}, headers=_auth(customer))
        order = client.post("/checkout", json=SHIPPING, headers=_auth(customer)).json()
        assert order["email"] == "ada@example.com"

        approved = client.post(
            "/admin/order/approve", json={"orderId": order["id"]}, headers=_auth(admin)
        )
        assert approved.status_code == 200

        notes = client.get("/notifications", headers=_auth(customer)).json()
        assert len(notes) == 1
        assert order["id"] in notes[0]["message"]

        other = _customer_token(client, email="someone@example.com")
        assert client.get("/notifications", headers=_auth(other)).json() == []

    def test_reject_with_reason(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        customer = _customer_token(client)
        client.post("/cart/add", json={"id": _add_product(client, admin)}, headers=_auth(customer))
        order = client.post("/checkout", json=SHIPPING, headers=_auth(customer)).json()

        response = client.post(
            "/admin/order/reject",
            json={"orderId": order["id"], "reason": "Out of stock"},
            headers=_auth(admin),
        )
        assert response.json()["status"] == "rejected"
        notes = client.get("/notifications", headers=_auth(customer)).json()
        assert "Out of stock" in notes[0]["message"]


class TestErrors:

    def test_empty_cart_checkout(self, tmp_path):
        client, _ = _setup(tmp_path)
        customer = _customer_token(client)
        response = client.post("/checkout", json=SHIPPING, headers=_auth(customer))
        assert response.status_code == 400
        assert response.json()["error_type"] == "ValidationError"

    def test_unknown_city(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        customer = _customer_token(client)
        client.post("/cart/add", json={"id": _add_product(client, admin)}, headers=_auth(customer))
        response = client.post(
            "/checkout", json={**SHIPPING, "city": "Accra"}, headers=_auth(customer)
        )
        assert response.status_code == 400

    def test_unknown_product(self, tmp_path):
        client, _ = _setup(tmp_path)
        customer = _customer_token(client)
        response = client.post("/cart/add", json={"id": "nope"}, headers=_auth(customer))
        assert response.status_code == 404

    def test_duplicate_signup(self, tmp_path):
        client, _ = _setup(tmp_path)
        _customer_token(client)
        response = client.post(
            "/signup", json={"email": "ADA@example.com", "password": "secret1"}
        )
        assert response.status_code == 409

    def test_bad_login(self, tmp_path):
        client, _ = _setup(tmp_path)
        _customer_token(client)
        response = client.post(
            "/login", json={"email": "ada@example.com", "password": "wrong-one"}
        )
        assert response.status_code == 401

    def test_missing_field_is_rejected_by_schema(self, tmp_path):
        client, _ = _setup(tmp_path)
        customer = _customer_token(client)
        body = {k: v for k, v in SHIPPING.items() if k != "city"}
        assert client.post("/checkout", json=body, headers=_auth(customer)).status_code == 422


class TestAccessControl:

    def test_cart_requires_sign_in(self, tmp_path):
        client, _ = _setup(tmp_path)
        assert client.get("/cart").status_code == 401

    def test_malformed_authorization_header(self, tmp_path):
        client, _ = _setup(tmp_path)
        response = client.get("/cart", headers={"Authorization": "Token abc"})
        assert response.status_code == 401

    def test_logout_revokes_token(self, tmp_path):
        client, _ = _setup(tmp_path)
        customer = _customer_token(client)
        client.post("/logout", headers=_auth(customer))
        assert client.get("/cart", headers=_auth(customer)).status_code == 401

    def test_customer_cannot_use_admin_routes(self, tmp_path):
        client, _ = _setup(tmp_path)
        customer = _customer_token(client)
        assert client.get("/admin/orders", headers=_auth(customer)).status_code == 403

    def test_admin_has_no_cart(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        assert client.get("/cart", headers=_auth(admin)).status_code == 403

    def test_wrong_admin_password(self, tmp_path):
        client, _ = _setup(tmp_path)
        response = client.post("/admin/login", json={"password": "guess"})
        assert response.status_code == 401

    @pytest.mark.parametrize("path", ["/products", "/health"])
    def test_public_routes(self, tmp_path, path):
        client, _ = _setup(tmp_path)
        assert client.get(path).status_code == 200


class TestSupportAndUsers:

    def test_message_and_reply(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        customer = _customer_token(client)

        sent = client.post("/messages", json={"message": "Where is my parcel?"}, headers=_auth(customer))
        assert sent.status_code == 201

        reply = client.post(
            "/admin/reply",
            json={"user": "ada@example.com", "reply": "On its way"},
            headers=_auth(admin),
        )
        assert reply.json()["reply"] == "On its way"

    def test_users_never_expose_password(self, tmp_path):
        client, _ = _setup(tmp_path)
        admin = _admin_token(client)
        _customer_token(client)
        users = client.get("/admin/users", headers=_auth(admin)).json()
        assert [u["email"] for u in users] == ["ada@example.com"]
        assert "password" not in users[0]
        assert "password_hash" not in users[0]


class TestShutdown:

    def test_app_shutdown_stops_payment_checks(self, tmp_path):
        _, container = _setup(tmp_path)
        stub = StubPaymentConfirmation(paid={"o1"})
        container = dataclasses.replace(container, payment_verifier=PaymentVerifier(stub))

        with TestClient(create_app(container)) as client:
            assert client.get("/health").status_code == 200

        assert container.payment_verifier.is_confirmed(_order("o1")) is False
        assert stub.calls == []

    def test_container_without_payment_checks_closes_cleanly(self, tmp_path):
        _, container = _setup(tmp_path)
        assert container.payment_verifier is None
        container.close()
