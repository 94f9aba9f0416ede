"""CLI commands for the order lifecycle (admin side)."""

from __future__ import annotations

from datetime import timedelta

import click

from storefront.application.approve_order import ApproveOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.expire_orders import ExpirePendingOrdersHandler
from storefront.application.reject_order import RejectOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    if dto.status_reason:
        click.echo(f"Reason:   {dto.status_reason}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Ship to:  {dto.full_name}, {dto.address}, {dto.city}, {dto.country}")
    click.echo(f"Contact:  {dto.email} / {dto.phone}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("list")
@click.option("--customer", default=None, help="Only this customer's orders.")
@click.option("--status", default=None, help="Only orders in this status.")
@click.pass_obj
def order_list(container: Container, customer: str | None, status: str | None) -> None:
    """List orders."""
    orders = ListOrdersHandler(order_repo=container.orders).handle(customer)
    if status:
        orders = [o for o in orders if o.status == status.lower()]

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<34} {'Status':<10} {'Total':>10}  Customer")
    click.echo("-" * 80)
    for o in orders:
        click.echo(f"{o.id:<34} {o.status:<10} {o.total:>10}  {o.customer_id}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: str) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(order_repo=container.orders).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("approve")
@click.option("--id", "order_id", required=True, help="Order ID to approve.")
@click.option(
    "--verify-payment",
    is_flag=True,
    default=False,
    help="Only approve if the exchange wallet shows the payment.",
)
@click.pass_obj
def order_approve(container: Container, order_id: str, verify_payment: bool) -> None:
    """Approve a pending order and notify the customer."""
    handler = ApproveOrderHandler(
        order_repo=container.orders,
        notification_repo=container.notifications,
        payment_verifier=container.payment_verifier,
        auto_confirm_payments=container.settings.auto_confirm_payments,
    )

    try:
        dto = handler.handle(order_id, verify_payment=verify_payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} approved, {dto.email} notified.")


@click.command("reject")
@click.option("--id", "order_id", required=True, help="Order ID to reject.")
@click.option("--reason", required=True, help="Shown to the customer.")
@click.pass_obj
def order_reject(container: Container, order_id: str, reason: str) -> None:
    """Reject a pending order and notify the customer."""
    handler = RejectOrderHandler(
        order_repo=container.orders,
        notification_repo=container.notifications,
    )

    try:
        dto = handler.handle(order_id, reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} rejected, {dto.email} notified.")


@click.command("expire")
@click.option(
    "--older-than-hours",
    type=float,
    default=None,
    help="Age after which a pending order expires (defaults to the configured value).",
)
@click.pass_obj
def order_expire(container: Container, older_than_hours: float | None) -> None:
    """Expire pending orders whose payment never arrived."""
    if older_than_hours is not None and older_than_hours <= 0:
        raise click.BadParameter("must be positive", param_hint="--older-than-hours")
    max_age = (
        timedelta(hours=older_than_hours)
        if older_than_hours is not None
        else container.order_expiry
    )
    handler = ExpirePendingOrdersHandler(
        order_repo=container.orders,
        notification_repo=container.notifications,
    )
    expired = handler.handle(max_age)
    click.echo(f"Expired {len(expired)} order(s).")
    for order_id in expired:
        click.echo(f"  {order_id}")
