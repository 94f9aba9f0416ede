"""Cart aggregate: what a customer intends to buy in the current session.

A cart belongs to exactly one customer and is never written to durable
storage.  Each line remembers the price the product had when it was
added; checkout charges that price, not the live catalog price.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass
class CartLine:
    product_id: str
    product_name: str
    quantity: int
    price_snapshot: Money

    @property
    def line_total(self) -> Money:
        return self.price_snapshot * self.quantity


@dataclass
class Cart:
    customer_id: str
    lines: list[CartLine] = field(default_factory=list)

    def add(self, product: Product) -> None:
        """Add one unit of *product*, snapshotting its current price."""
        line = self._find_line(product.id)
        if line is not None:
            line.quantity += 1
            return
        self.lines.append(
            CartLine(
                product_id=product.id,
                product_name=product.name,
                quantity=1,
                price_snapshot=product.price,
            )
        )

    def increase(self, product_id: str) -> None:
        self._require_line(product_id).quantity += 1

    def decrease(self, product_id: str) -> None:
        """Remove one unit; the line disappears once nothing is left."""
        line = self._require_line(product_id)
        line.quantity -= 1
        if line.quantity <= 0:
            self.lines.remove(line)

    def clear(self) -> None:
        self.lines.clear()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _require_line(self, product_id: str) -> CartLine:
        line = self._find_line(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product '{product_id}' is not in the cart")
        return line
