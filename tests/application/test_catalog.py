"""Integration tests for the admin catalog use cases."""

from pathlib import Path

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.fix_product_images import FixProductImagesHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import DEFAULT_IMAGE, Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_adds_with_fresh_id(self):
        repo = FakeProductRepository()
        dto = AddProductHandler(repo).handle("Silk Scarf", "30.00", "/images/scarf.jpg")
        assert dto.price == "$30.00"
        assert repo.get_by_id(dto.id).name == "Silk Scarf"

    @pytest.mark.parametrize("price", ["-1", "abc", "NaN", "inf", ""])
    def test_invalid_price_rejected_not_coerced(self, price):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError):
            AddProductHandler(repo).handle("Silk Scarf", price)
        assert repo.list_all() == []

    def test_numeric_price_accepted(self):
        dto = AddProductHandler(FakeProductRepository()).handle("Silk Scarf", 12.5)
        assert dto.price == "$12.50"


class TestUpdateProduct:

    def _repo(self) -> FakeProductRepository:
        return FakeProductRepository(
            [Product(id="p1", name="Silk Scarf", price=Money.of("30.00"))]
        )

    def test_partial_edit(self):
        repo = self._repo()
        dto = UpdateProductHandler(repo).handle("p1", price="25.00")
        assert dto.name == "Silk Scarf"
        assert dto.price == "$25.00"

    def test_invalid_price_keeps_old_price(self):
        repo = self._repo()
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle("p1", price="-5")
        assert repo.get_by_id("p1").price == Money.of("30.00")

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(self._repo()).handle("p9", name="X")


class TestDeleteProduct:

    def test_delete(self):
        repo = FakeProductRepository([Product(id="p1", name="Scarf", price=Money.of("1"))])
        DeleteProductHandler(repo).handle("p1")
        assert repo.get_by_id("p1") is None

    def test_delete_absent_is_not_found(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(FakeProductRepository()).handle("p1")


class TestListProducts:

    def test_lists_everything(self):
        repo = FakeProductRepository()
        AddProductHandler(repo).handle("A", "1")
        AddProductHandler(repo).handle("B", "2")
        assert {p.name for p in ListProductsHandler(repo).handle()} == {"A", "B"}


class TestFixProductImages:

    def test_repairs_missing_files_only(self, tmp_path: Path):
        (tmp_path / "images").mkdir()
        (tmp_path / "images" / "ok.jpg").write_bytes(b"jpg")
        repo = FakeProductRepository([
            Product(id="p1", name="Good", price=Money.of("1"), image="/images/ok.jpg"),
            Product(id="p2", name="Broken", price=Money.of("1"), image="/images/gone.jpg"),
            Product(id="p3", name="Remote", price=Money.of("1"), image="https://cdn/x.jpg"),
        ])

        fixed = FixProductImagesHandler(repo).handle(tmp_path)

        assert fixed == ["p2"]
        assert repo.get_by_id("p2").image == DEFAULT_IMAGE
        assert repo.get_by_id("p1").image == "/images/ok.jpg"
        assert repo.get_by_id("p3").image == "https://cdn/x.jpg"
