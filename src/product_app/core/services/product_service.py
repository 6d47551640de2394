"""Product business service."""

from loguru import logger

from src.product_app.core.exceptions import ProductNotFoundError
from src.product_app.entities.product import Product, ProductStore


class ProductService:
    """Product use cases on top of a ``ProductStore``.

    The only rule this layer adds is that reading a missing product is an
    error; deleting one is not.
    """

    def __init__(self, repository: ProductStore) -> None:
        self._repository = repository

    def get_all_products(self) -> list[Product]:
        return self._repository.list_all()

    def get_product_by_id(self, product_id: int) -> Product:
        """Return the product with ``product_id``.

        Raises:
            ProductNotFoundError: If no product has that id.
        """
        product = self._repository.find_by_id(product_id)
        if product is None:
            logger.info("Product {} not found", product_id)
            raise ProductNotFoundError(product_id)
        return product

    def save_product(self, product: Product) -> Product:
        """Insert ``product`` if it has no id, otherwise update it by id."""
        saved = self._repository.upsert(product)
        logger.info(
            "Product {} {}", saved.id, "updated" if product.id is not None else "created"
        )
        return saved

    def delete_product(self, product_id: int) -> None:
        self._repository.delete_by_id(product_id)
        logger.info("Product {} deleted", product_id)
