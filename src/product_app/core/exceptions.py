"""Application exceptions and their HTTP mapping."""

from typing import Any


class ProductAppError(Exception):
    """Base class for errors raised by the product service."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, detail: Any = None) -> None:
        self.detail = detail if detail is not None else self.__class__.__doc__
        super().__init__(str(self.detail))


class ProductNotFoundError(ProductAppError):
    """Product not found."""

    status_code = 404
    error_code = "not_found"

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")


class ValidationError(ProductAppError):
    """Request payload failed validation."""

    status_code = 422
    error_code = "validation_error"


class StorageUnavailableError(ProductAppError):
    """Product storage is unavailable."""

    status_code = 503
    error_code = "storage_unavailable"
