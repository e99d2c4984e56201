"""Category attribute and attribute value database models."""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from catalog_api.models.database import Base
from catalog_api.models.category import category_attribute_categories


class CategoryAttribute(Base):
    """A named facet (e.g. Color) usable by one or more categories."""

    __tablename__ = "category_attributes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)

    # Relationships
    categories = relationship(
        "Category",
        secondary=category_attribute_categories,
        back_populates="attributes",
    )
    values = relationship(
        "AttributeValue",
        back_populates="category_attribute",
        order_by="AttributeValue.id",
    )

    @property
    def value_strings(self) -> list[str]:
        """Get the literal values of this attribute."""
        return [v.value for v in self.values]

    def __repr__(self):
        return f"<CategoryAttribute(id={self.id}, name='{self.name}')>"


class AttributeValue(Base):
    """One concrete value of a category attribute (e.g. "Red" under Color)."""

    __tablename__ = "attribute_values"

    id = Column(Integer, primary_key=True, index=True)
    value = Column(String(100), nullable=False)
    category_attribute_id = Column(
        Integer, ForeignKey("category_attributes.id"), nullable=False, index=True
    )

    # Relationships
    category_attribute = relationship("CategoryAttribute", back_populates="values")
    # Deleting a value drops the product links that point at it
    product_links = relationship(
        "ProductAttributeValue",
        back_populates="attribute_value",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<AttributeValue(id={self.id}, value='{self.value}')>"
