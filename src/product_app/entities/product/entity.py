"""Entity: Product."""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product entity representing a product in the catalog.

    ``id`` stays ``None`` until the product has been persisted; the store
    assigns it exactly once.
    """

    id: int | None = Field(default=None, description="Store-assigned identifier")
    name: str | None = Field(default=None, description="Product name")
    price: float | None = Field(default=None, description="Product price")

    def merge(self, payload: "ProductPayload") -> "Product":
        """Overwrite ``name`` and ``price`` from ``payload``, keeping everything else."""
        self.name = payload.name
        self.price = payload.price
        return self


class ProductPayload(BaseModel):
    """Writable product fields accepted on create and update.

    Any ``id`` sent by the client is ignored.
    """

    name: str | None = Field(default=None, description="Product name")
    price: float | None = Field(default=None, description="Product price")

    def to_product(self) -> Product:
        return Product(name=self.name, price=self.price)
