"""Entity package: Product."""

from .entity import Product, ProductPayload
from .repository import ProductRepository, ProductStore
from .table import ProductTable

__all__ = ["Product", "ProductPayload", "ProductRepository", "ProductStore", "ProductTable"]
