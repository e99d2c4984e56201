"""Product database models."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Numeric,
    Boolean,
    ForeignKey,
)
from sqlalchemy.orm import relationship

from catalog_api.models.database import Base, utcnow


class Product(Base):
    """Product model representing a sellable catalog item."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(String(2000), nullable=True)
    price = Column(Numeric(18, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    # Base64 encoded image payload
    image_base64 = Column(Text, nullable=True)
    image_content_type = Column(String(50), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True)
    is_recommended = Column(Boolean, nullable=False, default=False)

    # Relationships
    category = relationship("Category", back_populates="products")
    attribute_links = relationship(
        "ProductAttributeValue",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductAttributeValue.attribute_value_id",
    )

    @property
    def price_float(self) -> float:
        """Get price as float."""
        return float(self.price)

    @property
    def attribute_value_ids(self) -> list[int]:
        """IDs of the attribute values linked to this product."""
        return [link.attribute_value_id for link in self.attribute_links]

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"


class ProductAttributeValue(Base):
    """Link between a product and one attribute value it exhibits."""

    __tablename__ = "product_attribute_values"

    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    attribute_value_id = Column(
        Integer, ForeignKey("attribute_values.id"), primary_key=True
    )

    # Relationships
    product = relationship("Product", back_populates="attribute_links")
    attribute_value = relationship("AttributeValue", back_populates="product_links")

    def __repr__(self):
        return (
            f"<ProductAttributeValue(product_id={self.product_id}, "
            f"attribute_value_id={self.attribute_value_id})>"
        )
