"""Entity: ProductImage."""

from pydantic import Field

from src.catalog.entities.core._base import Entity


class ProductImage(Entity):
    """Photo attached to a product.

    The image references its product by id; it is not contained by it.
    """

    product_id: str = Field(description="Product this image belongs to")
    path: str = Field(description="Storage path or URL of the image file")
    caption: str | None = Field(default=None, description="Caption")
    position: int = Field(default=0, description="Display order among the product's images")
