"""Entity package: ProductImage."""

from .entity import ProductImage
from .repository import ProductImageRepository
from .table import ProductImageTable

__all__ = ["ProductImage", "ProductImageRepository", "ProductImageTable"]
