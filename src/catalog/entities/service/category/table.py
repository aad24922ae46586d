"""Category database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    __tablename__ = "categories"

    name: str = Field(index=True)
    slug: str | None = Field(default=None, unique=True)
    description: str | None = None
