"""Admin endpoints.  Every route except login sits behind ``require_admin``."""

from __future__ import annotations

from dataclasses import asdict
from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends

from storefront.application.accounts import AdminLoginHandler, ListUsersHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.approve_order import ApproveOrderHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.expire_orders import ExpirePendingOrdersHandler
from storefront.application.reject_order import RejectOrderHandler
from storefront.application.show_order import ListOrdersHandler
from storefront.application.support import ListMessagesHandler, ReplyToMessageHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.session.session_store import Principal
from storefront.infrastructure.web.dependencies import get_container, require_admin
from storefront.infrastructure.web.schemas import (
    AdminLoginIn,
    ApproveOrderIn,
    ExpireOrdersIn,
    ProductEditIn,
    ProductIn,
    RejectOrderIn,
    ReplyIn,
)

login_router = APIRouter(prefix="/admin")
router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


@login_router.post("/login")
def admin_login(body: AdminLoginIn, container: Container = Depends(get_container)) -> dict:
    AdminLoginHandler(container.settings.admin_password).handle(body.password)
    return {"token": container.sessions.issue(Principal.admin())}


# --- Orders -------------------------------------------------------------------


@router.get("/orders")
def list_orders(container: Container = Depends(get_container)) -> list[dict]:
    return [asdict(o) for o in ListOrdersHandler(container.orders).handle()]


@router.post("/order/approve")
def approve_order(body: ApproveOrderIn, container: Container = Depends(get_container)) -> dict:
    handler = ApproveOrderHandler(
        container.orders,
        container.notifications,
        payment_verifier=container.payment_verifier,
        auto_confirm_payments=container.settings.auto_confirm_payments,
    )
    return asdict(handler.handle(body.order_id, verify_payment=body.verify_payment))


@router.post("/order/reject")
def reject_order(body: RejectOrderIn, container: Container = Depends(get_container)) -> dict:
    handler = RejectOrderHandler(container.orders, container.notifications)
    return asdict(handler.handle(body.order_id, body.reason))


@router.post("/orders/expire")
def expire_orders(
    body: Optional[ExpireOrdersIn] = None,
    container: Container = Depends(get_container),
) -> dict:
    max_age = container.order_expiry
    if body is not None and body.max_age_hours is not None:
        max_age = timedelta(hours=body.max_age_hours)
    handler = ExpirePendingOrdersHandler(container.orders, container.notifications)
    return {"expired": handler.handle(max_age)}


# --- Catalog ------------------------------------------------------------------


@router.post("/product/upload", status_code=201)
def upload_product(body: ProductIn, container: Container = Depends(get_container)) -> dict:
    handler = AddProductHandler(container.products)
    return asdict(handler.handle(body.name, body.price, body.image))


@router.post("/product/edit")
def edit_product(body: ProductEditIn, container: Container = Depends(get_container)) -> dict:
    if not body.product_id:
        raise ValidationError("Product ID is required")
    return _edit(body.product_id, body, container)


@router.post("/product/edit/{product_id}")
def edit_product_by_path(
    product_id: str,
    body: ProductEditIn,
    container: Container = Depends(get_container),
) -> dict:
    return _edit(product_id, body, container)


def _edit(product_id: str, body: ProductEditIn, container: Container) -> dict:
    handler = UpdateProductHandler(container.products)
    return asdict(
        handler.handle(product_id, name=body.name, price=body.price, image=body.image)
    )


@router.post("/product/delete/{product_id}")
def delete_product(product_id: str, container: Container = Depends(get_container)) -> dict:
    DeleteProductHandler(container.products).handle(product_id)
    return {"deleted": product_id}


# --- Support and users --------------------------------------------------------


@router.get("/messages")
def list_messages(container: Container = Depends(get_container)) -> list[dict]:
    return [asdict(m) for m in ListMessagesHandler(container.messages).handle()]


@router.post("/reply")
def reply(body: ReplyIn, container: Container = Depends(get_container)) -> dict:
    return asdict(ReplyToMessageHandler(container.messages).handle(body.user, body.reply))


@router.get("/users")
def list_users(container: Container = Depends(get_container)) -> list[dict]:
    return [asdict(u) for u in ListUsersHandler(container.users).handle()]
