"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import uuid
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import DEFAULT_IMAGE, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- ProductRepository interface ------------------------------------------

    def locked(self) -> AbstractContextManager:
        return self._collection.locked()

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._collection.read():
            if str(raw["id"]) == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._collection.read()]

    def save(self, product: Product) -> None:
        with self._collection.mutate() as records:
            for i, raw in enumerate(records):
                if str(raw["id"]) == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))

    def delete(self, product_id: str) -> bool:
        with self._collection.mutate() as records:
            before = len(records)
            records[:] = [raw for raw in records if str(raw["id"]) != product_id]
            return len(records) != before

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "image": product.image,
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            price=Money(Decimal(str(raw["price"])), raw.get("currency", "USD")),
            image=raw.get("image") or raw.get("img") or DEFAULT_IMAGE,
            created_at=_parse_created_at(raw.get("created_at")),
        )


def _parse_created_at(value: str | None) -> datetime:
    # Records written before timestamps were tracked sort first.
    if not value:
        return datetime.fromtimestamp(0, tz=timezone.utc)
    return datetime.fromisoformat(value)
