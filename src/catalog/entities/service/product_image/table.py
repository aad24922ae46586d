"""Product image database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class ProductImageTable(EntityTable, table=True):
    """Database persistence model for product images."""

    __tablename__ = "product_images"

    product_id: str = Field(foreign_key="products.id", index=True)
    path: str
    caption: str | None = None
    position: int = Field(default=0)
