"""Application service: Fix Product Images maintenance task.

Points every product whose image is missing, or refers to a file that is
not present under the static directory, at the default image.
"""

from __future__ import annotations

import logging
from pathlib import Path

from storefront.domain.model.product import DEFAULT_IMAGE
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class FixProductImagesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, static_dir: Path, default_image: str = DEFAULT_IMAGE) -> list[str]:
        """Return the IDs of the products that were repaired."""
        fixed: list[str] = []
        with self._product_repo.locked():
            for product in self._product_repo.list_all():
                if product.image == default_image or self._image_exists(
                    static_dir, product.image
                ):
                    continue
                logger.info("Fixing image of product %s '%s'", product.id, product.name)
                product.update(image=default_image)
                self._product_repo.save(product)
                fixed.append(product.id)
        return fixed

    @staticmethod
    def _image_exists(static_dir: Path, image: str) -> bool:
        if not image or image.startswith(("http://", "https://")):
            return bool(image)
        return (static_dir / image.lstrip("/")).is_file()
