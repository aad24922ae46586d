"""Core services for the catalog persistence layer."""

from .catalog.product_catalog import ProductCatalogService, ProductDetail
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "ProductCatalogService",
    "ProductDetail",
]
