"""Entity: Product."""

from decimal import Decimal

from pydantic import Field

from src.catalog.entities.core._base import Entity


class Product(Entity):
    """Product entity representing an item offered in the catalog.

    A product references its category and owning user by id. Both keys are
    optional and may point at rows that no longer exist; resolving them is
    the job of ProductRepository.category and ProductRepository.owner.
    """

    name: str = Field(description="Name")
    description: str | None = Field(default=None, description="Description")
    price: Decimal = Field(default=Decimal("0"), description="Unit price")
    stock: int = Field(default=0, description="Units in stock")
    category_id: str | None = Field(default=None, description="Category reference")
    user_id: str | None = Field(default=None, description="Owning user reference")
