"""Pydantic schemas for request/response validation."""

from catalog_api.schemas.category import (
    CategoryCreate,
    CategoryAttributeSummary,
    CategoryResponse,
)
from catalog_api.schemas.attribute import AttributeCreate, AttributeResponse
from catalog_api.schemas.product import (
    ProductFields,
    ProductImage,
    ProductResponse,
    ProductAttributeResponse,
    ProductAttributeLink,
    AttributeFilter,
    ProductFilterRequest,
)
from catalog_api.schemas.database import CatalogStats, SeedResponse

__all__ = [
    "CategoryCreate",
    "CategoryAttributeSummary",
    "CategoryResponse",
    "AttributeCreate",
    "AttributeResponse",
    "ProductFields",
    "ProductImage",
    "ProductResponse",
    "ProductAttributeResponse",
    "ProductAttributeLink",
    "AttributeFilter",
    "ProductFilterRequest",
    "CatalogStats",
    "SeedResponse",
]
