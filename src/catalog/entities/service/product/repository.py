"""Product repository with navigation to related records."""

from sqlmodel import Session, select

from src.catalog.entities.core._repository import EntityRepository
from src.catalog.entities.core.user import User, UserRepository
from src.catalog.entities.service.category import Category, CategoryRepository
from src.catalog.entities.service.product_image import (
    ProductImage,
    ProductImageRepository,
)

from .entity import Product
from .table import ProductTable


class ProductRepository(EntityRepository[Product, ProductTable]):
    """Data-access layer for products.

    Besides CRUD, the repository resolves the three relationships of a
    product. Each lookup queries its table at call time; nothing is cached.
    """

    entity_type = Product
    table_type = ProductTable

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self._categories = CategoryRepository(session)
        self._users = UserRepository(session)
        self._images = ProductImageRepository(session)

    def category(self, product: Product) -> Category | None:
        """Return the product's category, or None if unset or dangling."""
        if product.category_id is None:
            return None
        return self._categories.get(product.category_id)

    def owner(self, product: Product) -> User | None:
        """Return the product's owning user, or None if unset or dangling."""
        if product.user_id is None:
            return None
        return self._users.get(product.user_id)

    def images(self, product: Product) -> list[ProductImage]:
        """Return exactly the images whose foreign key is this product's id."""
        return self._images.list_for_product(product.id)

    def list_by_category(self, category_id: str) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(ProductTable.category_id == category_id)
            .order_by(ProductTable.created_at)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def list_by_owner(self, user_id: str) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(ProductTable.user_id == user_id)
            .order_by(ProductTable.created_at)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
