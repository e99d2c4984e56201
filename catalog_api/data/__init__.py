"""Seed data for the demo catalog."""

from catalog_api.data.demo_catalog import (
    CATEGORIES,
    SHARED_ATTRIBUTES,
    CATEGORY_ATTRIBUTES,
    ATTRIBUTE_VALUES,
    PRODUCTS,
)

__all__ = [
    "CATEGORIES",
    "SHARED_ATTRIBUTES",
    "CATEGORY_ATTRIBUTES",
    "ATTRIBUTE_VALUES",
    "PRODUCTS",
]
