"""Category service for CRUD operations."""

import logging

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from catalog_api.models.attribute import CategoryAttribute
from catalog_api.models.category import Category
from catalog_api.models.database import utcnow
from catalog_api.models.product import Product
from catalog_api.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for category CRUD and attribute association."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def get(self, category_id: int) -> Category | None:
        """Get a category by ID."""
        return self.db.query(Category).filter(Category.id == category_id).first()

    def list_categories(self) -> list[Category]:
        """Get all categories."""
        return self.db.query(Category).order_by(Category.id).all()

    def exists(self, category_id: int) -> bool:
        """Check if a category exists."""
        return self.get(category_id) is not None

    def _resolve_attributes(self, attribute_ids: list[int]) -> list[CategoryAttribute]:
        """Look up the attributes matching the given IDs.

        Unknown IDs are dropped without error.
        """
        if not attribute_ids:
            return []
        return (
            self.db.query(CategoryAttribute)
            .filter(CategoryAttribute.id.in_(attribute_ids))
            .order_by(CategoryAttribute.id)
            .all()
        )

    def create(self, category_in: CategoryCreate) -> Category:
        """Create a new category and attach the requested attributes."""
        category = Category(
            name=category_in.name,
            description=category_in.description,
            created_at=utcnow(),
        )
        self.db.add(category)
        self.db.flush()  # Get the ID

        if category_in.attribute_ids:
            category.attributes.extend(self._resolve_attributes(category_in.attribute_ids))

        self.db.commit()
        self.db.refresh(category)
        logger.info(
            f"Created category {category.id} '{category.name}' "
            f"with {len(category.attributes)} attributes"
        )
        return category

    def update(self, category_id: int, category_in: CategoryCreate) -> Category | None:
        """Update an existing category.

        Returns None if the category does not exist (or vanished while
        saving). When ``attribute_ids`` is given, the attribute set is
        replaced wholesale.
        """
        category = self.get(category_id)
        if category is None:
            return None

        category.name = category_in.name
        category.description = category_in.description
        category.updated_at = utcnow()

        if category_in.attribute_ids is not None:
            category.attributes.clear()
            category.attributes.extend(self._resolve_attributes(category_in.attribute_ids))

        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            if not self.exists(category_id):
                logger.warning(f"Category {category_id} was deleted during update")
                return None
            raise

        self.db.refresh(category)
        return category

    def delete(self, category: Category) -> None:
        """Delete a category.

        Raises:
            ValueError: If products still belong to the category
        """
        product_count = (
            self.db.query(Product).filter(Product.category_id == category.id).count()
        )
        if product_count:
            raise ValueError(
                f"Cannot delete category {category.id} - "
                f"has {product_count} associated products"
            )

        category_id = category.id
        self.db.delete(category)
        self.db.commit()
        logger.info(f"Deleted category {category_id}")
