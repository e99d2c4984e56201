"""Business logic services."""

from catalog_api.services.category_service import CategoryService
from catalog_api.services.attribute_service import AttributeService
from catalog_api.services.product_service import ProductService
from catalog_api.services.filter_service import FilterService
from catalog_api.services import seed_service

__all__ = [
    "CategoryService",
    "AttributeService",
    "ProductService",
    "FilterService",
    "seed_service",
]
