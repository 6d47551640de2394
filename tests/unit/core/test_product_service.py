"""Tests for ProductService over an in-memory store."""

import pytest

from src.product_app.core.exceptions import (
    ProductAppError,
    ProductNotFoundError,
    StorageUnavailableError,
)
from src.product_app.core.services import ProductService
from src.product_app.entities.product import Product, ProductPayload
from tests.fixtures.dummies import InMemoryProductStore, UnavailableProductStore


class TestProductService:
    """Test product use cases."""

    def test_get_all_products_empty(self, product_service: ProductService):
        assert product_service.get_all_products() == []

    def test_saved_product_can_be_read_back(self, product_service: ProductService):
        for name, price in [("Pen", 1.5), ("Ink", 3.0), ("Paper", None)]:
            created = product_service.save_product(Product(name=name, price=price))

            found = product_service.get_product_by_id(created.id)

            assert found.name == name
            assert found.price == price

    def test_save_assigns_id_on_insert(self, product_service: ProductService):
        created = product_service.save_product(Product(name="Pen", price=1.5))

        assert created.id == 1

    def test_save_with_id_updates(
        self, product_service: ProductService, in_memory_store: InMemoryProductStore
    ):
        created = product_service.save_product(Product(name="Pen", price=1.5))

        product_service.save_product(Product(id=created.id, name="Pencil", price=2.0))

        assert in_memory_store.list_all() == [Product(id=1, name="Pencil", price=2.0)]

    def test_get_missing_product_raises_not_found(self, product_service: ProductService):
        with pytest.raises(ProductNotFoundError) as exc_info:
            product_service.get_product_by_id(42)

        assert exc_info.value.product_id == 42
        assert "42" in str(exc_info.value)

    def test_update_round_trip_keeps_id(self, product_service: ProductService):
        created = product_service.save_product(Product(name="Pen", price=1.5))

        existing = product_service.get_product_by_id(created.id)
        product_service.save_product(existing.merge(ProductPayload(name="Pencil", price=2.0)))
        updated = product_service.get_product_by_id(created.id)

        assert updated == Product(id=created.id, name="Pencil", price=2.0)

    def test_delete_product(self, product_service: ProductService):
        created = product_service.save_product(Product(name="Pen", price=1.5))

        product_service.delete_product(created.id)

        with pytest.raises(ProductNotFoundError):
            product_service.get_product_by_id(created.id)

    def test_delete_missing_product_does_not_raise(self, product_service: ProductService):
        product_service.delete_product(999)

        assert product_service.get_all_products() == []

    def test_storage_errors_propagate(self):
        service = ProductService(UnavailableProductStore())

        with pytest.raises(StorageUnavailableError):
            service.get_all_products()


class TestExceptions:
    """Test the exception taxonomy."""

    def test_not_found_maps_to_404(self):
        error = ProductNotFoundError(5)

        assert isinstance(error, ProductAppError)
        assert error.status_code == 404
        assert error.error_code == "not_found"
        assert error.detail == "Product not found with id: 5"

    def test_storage_unavailable_default_detail(self):
        error = StorageUnavailableError()

        assert error.status_code == 503
        assert error.detail == "Product storage is unavailable."
