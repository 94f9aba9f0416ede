"""Customer-facing endpoints: accounts, catalog, cart, checkout."""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends

from storefront.application.accounts import LoginHandler, SignupHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.adjust_cart import DecreaseCartItemHandler, IncreaseCartItemHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.continue_checkout import ContinueCheckoutHandler
from storefront.application.dto import ShippingSpec
from storefront.application.list_notifications import ListCustomerNotificationsHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_cart import ShowCartHandler, ShowCheckoutHandler
from storefront.application.show_order import ListOrdersHandler
from storefront.application.support import SendSupportMessageHandler
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.session.session_store import Principal
from storefront.infrastructure.web.dependencies import bearer_token, current_customer, get_container
from storefront.infrastructure.web.schemas import (
    CheckoutIn,
    ContinueCheckoutIn,
    CredentialsIn,
    MessageIn,
    ProductRefIn,
)

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


# --- Accounts -----------------------------------------------------------------


@router.post("/signup", status_code=201)
def signup(body: CredentialsIn, container: Container = Depends(get_container)) -> dict:
    handler = SignupHandler(container.users, container.password_hasher)
    return asdict(handler.handle(body.email, body.password))


@router.post("/login")
def login(body: CredentialsIn, container: Container = Depends(get_container)) -> dict:
    user = LoginHandler(container.users, container.password_hasher).handle(
        body.email, body.password
    )
    token = container.sessions.issue(Principal.customer(user.email))
    return {"token": token, "user": asdict(user)}


@router.post("/logout")
def logout(
    token: Optional[str] = Depends(bearer_token),
    container: Container = Depends(get_container),
) -> dict:
    if token:
        container.sessions.revoke(token)
    return {"status": "signed out"}


# --- Catalog and cart ---------------------------------------------------------


@router.get("/products")
def list_products(container: Container = Depends(get_container)) -> list[dict]:
    return [asdict(p) for p in ListProductsHandler(container.products).handle()]


@router.get("/cart")
def show_cart(
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    return asdict(ShowCartHandler(container.carts).handle(customer_id))


@router.post("/cart/add")
def add_to_cart(
    body: ProductRefIn,
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    handler = AddToCartHandler(container.carts, container.products)
    return asdict(handler.handle(customer_id, body.product_id))


@router.post("/cart/increase")
def increase_cart_item(
    body: ProductRefIn,
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    return asdict(IncreaseCartItemHandler(container.carts).handle(customer_id, body.product_id))


@router.post("/cart/decrease")
def decrease_cart_item(
    body: ProductRefIn,
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    return asdict(DecreaseCartItemHandler(container.carts).handle(customer_id, body.product_id))


# --- Checkout and orders ------------------------------------------------------


@router.get("/checkout")
def show_checkout(
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    handler = ShowCheckoutHandler(container.carts, container.countries)
    return asdict(handler.handle(customer_id))


@router.post("/checkout", status_code=201)
def checkout(
    body: CheckoutIn,
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    handler = CheckoutHandler(container.orders, container.carts, container.countries)
    shipping = ShippingSpec(
        full_name=body.full_name,
        phone=body.phone,
        address=body.address,
        country=body.country,
        city=body.city,
        email=body.email,
    )
    return asdict(handler.handle(customer_id, shipping, body.payment_method))


@router.post("/checkout/continue")
def continue_checkout(
    body: Optional[ContinueCheckoutIn] = None,
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    order_id = body.order_id if body is not None else None
    return asdict(ContinueCheckoutHandler(container.orders).handle(customer_id, order_id))


@router.get("/orders")
def my_orders(
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> list[dict]:
    return [asdict(o) for o in ListOrdersHandler(container.orders).handle(customer_id)]


@router.get("/notifications")
def my_notifications(
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> list[dict]:
    handler = ListCustomerNotificationsHandler(container.notifications, container.orders)
    return [asdict(n) for n in handler.handle(customer_id)]


@router.post("/messages", status_code=201)
def send_message(
    body: MessageIn,
    customer_id: str = Depends(current_customer),
    container: Container = Depends(get_container),
) -> dict:
    return asdict(SendSupportMessageHandler(container.messages).handle(customer_id, body.message))
