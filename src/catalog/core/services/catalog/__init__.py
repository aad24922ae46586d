from .product_catalog import ProductCatalogService, ProductDetail

__all__ = ["ProductCatalogService", "ProductDetail"]
