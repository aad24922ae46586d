"""Product image repository."""

from sqlmodel import select

from src.catalog.entities.core._repository import EntityRepository

from .entity import ProductImage
from .table import ProductImageTable


class ProductImageRepository(EntityRepository[ProductImage, ProductImageTable]):
    """Data-access layer for product images."""

    entity_type = ProductImage
    table_type = ProductImageTable

    def list_for_product(self, product_id: str) -> list[ProductImage]:
        """Return every image of product_id, by position, then creation time, then id."""
        statement = (
            select(ProductImageTable)
            .where(ProductImageTable.product_id == product_id)
            .order_by(
                ProductImageTable.position,
                ProductImageTable.created_at,
                ProductImageTable.id,
            )
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
