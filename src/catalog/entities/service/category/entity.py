"""Entity: Category."""

from pydantic import Field

from src.catalog.entities.core._base import Entity


class Category(Entity):
    """Category entity grouping products.

    Categories are owned independently of the products that reference them.
    """

    name: str = Field(description="Name")
    slug: str | None = Field(default=None, description="URL-friendly name")
    description: str | None = Field(default=None, description="Description")
