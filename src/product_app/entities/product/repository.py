"""Product data access layer."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from loguru import logger
from sqlalchemy.exc import DisconnectionError, OperationalError
from sqlmodel import Session, select

from src.product_app.core.exceptions import StorageUnavailableError

from .entity import Product
from .table import ProductTable

# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_PRODUCT_ID = 2**63 - 1


def _storable_id(product_id: int) -> bool:
    return -MAX_PRODUCT_ID - 1 <= product_id <= MAX_PRODUCT_ID


class ProductStore(Protocol):
    """Storage operations the product service depends on."""

    def list_all(self) -> list[Product]: ...

    def find_by_id(self, product_id: int) -> Product | None: ...

    def upsert(self, product: Product) -> Product: ...

    def delete_by_id(self, product_id: int) -> None: ...


class ProductRepository:
    """SQL-backed product store.

    Every write is committed on its own; there is no grouping of operations
    into a larger transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _storage_errors(self) -> Iterator[None]:
        try:
            yield
        except (OperationalError, DisconnectionError) as e:
            self._session.rollback()
            logger.error(
                "Product storage unavailable",
                extra={"error_type": type(e).__name__, "error_message": str(e)},
            )
            raise StorageUnavailableError() from e

    def list_all(self) -> list[Product]:
        with self._storage_errors():
            rows = self._session.exec(select(ProductTable).order_by(ProductTable.id)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, product_id: int) -> Product | None:
        if not _storable_id(product_id):
            return None
        with self._storage_errors():
            row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def upsert(self, product: Product) -> Product:
        """Insert ``product`` when it has no id, otherwise update the row with its id."""
        with self._storage_errors():
            row = self._session.merge(ProductTable(**product.model_dump()))
            self._session.commit()
            self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def delete_by_id(self, product_id: int) -> None:
        """Delete the product with ``product_id``; a missing id is a no-op."""
        if not _storable_id(product_id):
            logger.debug("Delete of out-of-range product id {} ignored", product_id)
            return
        with self._storage_errors():
            row = self._session.get(ProductTable, product_id)
            if row is None:
                logger.debug("Delete of missing product {} ignored", product_id)
                return
            self._session.delete(row)
            self._session.commit()
