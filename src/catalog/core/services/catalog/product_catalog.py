from loguru import logger
from pydantic import BaseModel
from sqlmodel import Session

from src.catalog.entities.core.user import User
from src.catalog.entities.service.category import Category
from src.catalog.entities.service.product import Product, ProductRepository
from src.catalog.entities.service.product_image import (
    ProductImage,
    ProductImageRepository,
)


class ProductDetail(BaseModel):
    """A product together with the records it references."""

    product: Product
    category: Category | None = None
    owner: User | None = None
    images: list[ProductImage] = []


class ProductCatalogService:
    def __init__(self, db_session: Session):
        self._product_repo = ProductRepository(db_session)
        self._image_repo = ProductImageRepository(db_session)

    def get_detail(self, product_id: str) -> ProductDetail | None:
        """Load a product and resolve its category, owner and images.

        Returns None when the product does not exist. Dangling category or
        owner references come back as None on the detail.
        """
        product = self._product_repo.get(product_id)
        if product is None:
            return None

        return ProductDetail(
            product=product,
            category=self._product_repo.category(product),
            owner=self._product_repo.owner(product),
            images=self._product_repo.images(product),
        )

    def add_image(
        self, product_id: str, path: str, caption: str | None = None
    ) -> ProductImage:
        """Attach an image to a product after its existing images."""
        product = self._product_repo.get(product_id)
        if product is None:
            raise ValueError(f"Product {product_id} not found")

        existing = self._product_repo.images(product)
        position = max((image.position for image in existing), default=-1) + 1
        image = self._image_repo.create(
            ProductImage(
                product_id=product.id, path=path, caption=caption, position=position
            )
        )
        logger.info("Added image {} to product {} at position {}", image.id, product.id, position)
        return image
