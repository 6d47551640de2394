"""Product database table model."""

from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity so the API schema and the table can
    evolve independently.
    """

    __tablename__ = "product"

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = None
    price: float | None = None
