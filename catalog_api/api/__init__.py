"""API routers."""

from catalog_api.api import categories, attributes, products, database

__all__ = ["categories", "attributes", "products", "database"]
