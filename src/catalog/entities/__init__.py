"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Core entities (users) live under ``core``; catalog entities (categories,
products and their images) live under ``service``.
"""

from .core.user import User, UserRepository, UserTable
from .service.category import Category, CategoryRepository, CategoryTable
from .service.product import Product, ProductRepository, ProductTable
from .service.product_image import (
    ProductImage,
    ProductImageRepository,
    ProductImageTable,
)

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "Category",
    "CategoryTable",
    "CategoryRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
    "ProductImage",
    "ProductImageTable",
    "ProductImageRepository",
]
