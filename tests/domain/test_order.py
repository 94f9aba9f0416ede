"""Unit tests for the Order aggregate and its state machine."""

import pytest

from storefront.domain.exceptions import ConflictError, ValidationError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails

SHIPPING = ShippingDetails(
    full_name="A B",
    phone="0800",
    address="1 Main St",
    country="Nigeria",
    city="Lagos",
    email="a@b.com",
)


def _make_item(pid: str = "p1", qty: int = 1, price: str = "10.00") -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id=pid,
        product_name=f"Product {pid}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


def _make_order(*items: OrderLineItem) -> Order:
    return Order.create(
        order_id="o1",
        customer_id="a@b.com",
        shipping=SHIPPING,
        items=list(items) or [_make_item()],
        payment_method="crypto",
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = _make_order(_make_item(qty=2, price="10.00"))
        assert order.status == OrderStatus.PENDING
        assert order.total == Money.of("20.00")
        assert order.payment_method == "crypto"

    def test_total_is_sum_of_line_items(self):
        order = _make_order(
            _make_item("p1", qty=3, price="15.00"),
            _make_item("p2", qty=5, price="25.00"),
        )
        assert order.total == Money.of("170.00")

    def test_free_items_allowed(self):
        order = _make_order(_make_item(price="0"))
        assert order.total == Money.of("0")

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("o1", "a@b.com", SHIPPING, [], "crypto")

    def test_blank_payment_method_rejected(self):
        with pytest.raises(ValidationError, match="Payment method"):
            Order.create("o1", "a@b.com", SHIPPING, [_make_item()], "  ")

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer"):
            Order.create("o1", "", SHIPPING, [_make_item()], "crypto")

    def test_many_line_items_allowed(self):
        items = [_make_item(f"p{i}") for i in range(120)]
        order = _make_order(*items)
        assert len(order.items) == 120
        assert order.total == Money.of("1200.00")

    def test_recipient_is_shipping_email(self):
        assert _make_order().recipient == "a@b.com"


class TestOrderApprove:

    def test_pending_to_approved(self):
        order = _make_order()
        order.approve()
        assert order.status == OrderStatus.APPROVED

    def test_second_approval_is_a_conflict(self):
        order = _make_order()
        order.approve()
        with pytest.raises(ConflictError, match="already approved"):
            order.approve()
        assert order.status == OrderStatus.APPROVED

    def test_cannot_approve_rejected_order(self):
        order = _make_order()
        order.reject("card declined")
        with pytest.raises(ConflictError, match="expected pending"):
            order.approve()


class TestOrderRejectAndExpire:

    def test_reject_records_reason(self):
        order = _make_order()
        order.reject("  payment bounced ")
        assert order.status == OrderStatus.REJECTED
        assert order.status_reason == "payment bounced"

    def test_reject_needs_reason(self):
        with pytest.raises(ValidationError, match="reason"):
            _make_order().reject("")

    def test_expire_pending(self):
        order = _make_order()
        order.expire()
        assert order.status == OrderStatus.EXPIRED

    def test_cannot_expire_approved_order(self):
        order = _make_order()
        order.approve()
        with pytest.raises(ConflictError):
            order.expire()

    def test_cannot_reject_expired_order(self):
        order = _make_order()
        order.expire()
        with pytest.raises(ConflictError):
            order.reject("too late")


class TestOrderLineItem:

    def test_line_total_calculation(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")
