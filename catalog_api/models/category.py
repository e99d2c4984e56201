"""Category database model."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship

from catalog_api.models.database import Base, utcnow

# Many-to-many link between categories and the attributes they expose
category_attribute_categories = Table(
    "category_attribute_categories",
    Base.metadata,
    Column("category_id", Integer, ForeignKey("categories.id"), primary_key=True),
    Column(
        "category_attribute_id",
        Integer,
        ForeignKey("category_attributes.id"),
        primary_key=True,
    ),
)


class Category(Base):
    """Category model representing a top-level product grouping."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True)

    # Relationships
    attributes = relationship(
        "CategoryAttribute",
        secondary=category_attribute_categories,
        back_populates="categories",
        order_by="CategoryAttribute.id",
    )
    products = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
