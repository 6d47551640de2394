"""Entities organised by business concept.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .product import Product, ProductPayload, ProductRepository, ProductStore, ProductTable

__all__ = [
    "Product",
    "ProductPayload",
    "ProductRepository",
    "ProductStore",
    "ProductTable",
]
