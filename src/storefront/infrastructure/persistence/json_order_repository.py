"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import uuid
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def locked(self) -> AbstractContextManager:
        return self._collection.locked()

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._collection.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._collection.read()]

    def list_for_customer(self, customer_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._collection.read()
            if raw["customer_id"] == customer_id
        ]

    def save(self, order: Order) -> None:
        # Upsert: replace if exists, otherwise append
        with self._collection.mutate() as orders:
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        shipping = order.shipping
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "status": order.status.value,
            "status_reason": order.status_reason,
            "created_at": order.created_at.isoformat(),
            "payment_method": order.payment_method,
            "shipping": {
                "full_name": shipping.full_name,
                "phone": shipping.phone,
                "address": shipping.address,
                "country": shipping.country,
                "city": shipping.city,
                "email": shipping.email,
            },
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
            "total": str(order.total.amount),
            "currency": order.total.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            shipping=ShippingDetails(**raw["shipping"]),
            items=items,
            # The stored total is authoritative; it is never recomputed.
            total=Money(Decimal(raw["total"]), raw.get("currency", "USD")),
            payment_method=raw["payment_method"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            status_reason=raw.get("status_reason"),
        )
