"""Database models."""

from catalog_api.models.database import Base, engine, get_db
from catalog_api.models.category import Category, category_attribute_categories
from catalog_api.models.attribute import CategoryAttribute, AttributeValue
from catalog_api.models.product import Product, ProductAttributeValue

__all__ = [
    "Base",
    "engine",
    "get_db",
    "Category",
    "category_attribute_categories",
    "CategoryAttribute",
    "AttributeValue",
    "Product",
    "ProductAttributeValue",
]
