"""Product aggregate.

Products live independently of orders.  Admins add, edit and remove
them; orders only ever keep a snapshot of name and price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

DEFAULT_IMAGE = "/images/default.jpg"


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products.  The ``__init__`` stays
    plain so repositories can reconstitute stored records as-is.
    """

    id: str
    name: str
    price: Money
    image: str = DEFAULT_IMAGE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(product_id: str, name: str, price: Money, image: str | None = None) -> Product:
        return Product(
            id=product_id,
            name=_clean_name(name),
            price=price,
            image=_clean_image(image),
        )

    def update(
        self,
        name: str | None = None,
        price: Money | None = None,
        image: str | None = None,
    ) -> None:
        """Apply a partial edit.

        Existing orders are unaffected because they captured a price
        snapshot when the item went into the cart.
        """
        # Validate everything before touching any field.
        new_name = _clean_name(name) if name is not None else self.name
        new_image = _clean_image(image) if image is not None else self.image
        self.name = new_name
        self.image = new_image
        if price is not None:
            self.price = price


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def _clean_image(image: str | None) -> str:
    if image is None or not image.strip():
        return DEFAULT_IMAGE
    return image.strip()
