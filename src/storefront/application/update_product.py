"""Application service: Update Product use case (admin)."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        price: str | int | float | None = None,
        image: str | None = None,
    ) -> ProductDTO:
        """Edit any subset of a product's name, price and image.

        This does NOT affect any existing orders or carts; they captured
        a price snapshot already.
        """
        new_price = Money.of(price) if price is not None else None

        with self._product_repo.locked():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            product.update(name=name, price=new_price, image=image)
            self._product_repo.save(product)

        logger.info("Product %s updated", product_id)
        return ProductDTO.from_domain(product)
