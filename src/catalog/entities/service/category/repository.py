"""Category repository."""

from sqlmodel import select

from src.catalog.entities.core._repository import EntityRepository

from .entity import Category
from .table import CategoryTable


class CategoryRepository(EntityRepository[Category, CategoryTable]):
    """Data-access layer for categories."""

    entity_type = Category
    table_type = CategoryTable

    def get_by_slug(self, slug: str) -> Category | None:
        statement = select(CategoryTable).where(CategoryTable.slug == slug)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
