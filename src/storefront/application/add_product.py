"""Application service: Add Product use case (admin)."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, name: str, price: str | int | float, image: str | None = None
    ) -> ProductDTO:
        """Add a new product to the catalog.

        The price is validated here, at the boundary: anything that is not
        a finite, non-negative number is rejected rather than coerced.
        """
        product = Product.create(
            product_id=self._product_repo.next_id(),
            name=name,
            price=Money.of(price),
            image=image,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added at %s", product.id, product.name, product.price)
        return ProductDTO.from_domain(product)
