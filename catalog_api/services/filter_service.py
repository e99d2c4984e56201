"""Filter service for attribute-based product queries."""

from sqlalchemy import and_
from sqlalchemy.orm import Session, Query

from catalog_api.models.attribute import AttributeValue
from catalog_api.models.product import Product, ProductAttributeValue
from catalog_api.schemas.product import AttributeFilter


class FilterService:
    """Service for building composable product queries."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def build_query(
        self,
        category_id: int | None = None,
        attribute_filters: list[AttributeFilter] | None = None,
    ) -> Query:
        """Build a SQLAlchemy query with the given filters.

        Args:
            category_id: Restrict to products of this category
            attribute_filters: (attribute ID, value) pairs; a product must
                match every one of them

        Returns:
            SQLAlchemy Query object
        """
        query = self.db.query(Product)

        # Category filter
        if category_id is not None:
            query = query.filter(Product.category_id == category_id)

        # Attribute filters, one EXISTS per pair
        for attr_filter in attribute_filters or []:
            query = query.filter(self._attribute_predicate(attr_filter))

        return query.order_by(Product.id)

    def _attribute_predicate(self, attr_filter: AttributeFilter):
        """Predicate: product has a value equal to the filter under its attribute."""
        return Product.attribute_links.any(
            ProductAttributeValue.attribute_value.has(
                and_(
                    AttributeValue.category_attribute_id
                    == attr_filter.category_attribute_id,
                    AttributeValue.value == attr_filter.value,
                )
            )
        )

    def execute(
        self,
        category_id: int | None = None,
        attribute_filters: list[AttributeFilter] | None = None,
    ) -> list[Product]:
        """Build and run the filter query."""
        return self.build_query(category_id, attribute_filters).all()
