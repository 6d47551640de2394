from __future__ import annotations

from itertools import count

from src.product_app.core.exceptions import StorageUnavailableError
from src.product_app.entities.product import Product


class InMemoryProductStore:
    """Dict-backed ``ProductStore`` that assigns ids like an autoincrement column."""

    def __init__(self) -> None:
        self._rows: dict[int, Product] = {}
        self._ids = count(1)

    def list_all(self) -> list[Product]:
        return [row.model_copy() for row in self._rows.values()]

    def find_by_id(self, product_id: int) -> Product | None:
        row = self._rows.get(product_id)
        return row.model_copy() if row is not None else None

    def upsert(self, product: Product) -> Product:
        stored = product.model_copy()
        if stored.id is None:
            stored.id = next(self._ids)
        self._rows[stored.id] = stored
        return stored.model_copy()

    def delete_by_id(self, product_id: int) -> None:
        self._rows.pop(product_id, None)


class UnavailableProductStore:
    """``ProductStore`` whose backend is down."""

    def list_all(self) -> list[Product]:
        raise StorageUnavailableError()

    def find_by_id(self, product_id: int) -> Product | None:
        raise StorageUnavailableError()

    def upsert(self, product: Product) -> Product:
        raise StorageUnavailableError()

    def delete_by_id(self, product_id: int) -> None:
        raise StorageUnavailableError()
