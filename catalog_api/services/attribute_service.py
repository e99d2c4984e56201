"""Attribute service for category attributes and their values."""

import logging

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from catalog_api.models.attribute import CategoryAttribute, AttributeValue
from catalog_api.schemas.attribute import AttributeCreate

logger = logging.getLogger(__name__)


class AttributeService:
    """Service for attribute CRUD and value maintenance."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def get(self, attribute_id: int) -> CategoryAttribute | None:
        """Get an attribute by ID."""
        return (
            self.db.query(CategoryAttribute)
            .filter(CategoryAttribute.id == attribute_id)
            .first()
        )

    def list_attributes(self) -> list[CategoryAttribute]:
        """Get all attributes."""
        return self.db.query(CategoryAttribute).order_by(CategoryAttribute.id).all()

    def _add_values(self, attribute_id: int, values: list[str]) -> None:
        """Insert one AttributeValue row per string."""
        self.db.add_all(
            [AttributeValue(value=v, category_attribute_id=attribute_id) for v in values]
        )

    def _delete_values(self, attribute: CategoryAttribute) -> int:
        """Delete every value of an attribute, with their product links."""
        count = len(attribute.values)
        for value in list(attribute.values):
            self.db.delete(value)
        self.db.flush()
        self.db.expire(attribute, ["values"])
        return count

    def create(self, attribute_in: AttributeCreate) -> CategoryAttribute:
        """Create a new attribute with its values."""
        attribute = CategoryAttribute(
            name=attribute_in.name,
            description=attribute_in.description,
        )
        self.db.add(attribute)
        self.db.flush()  # Get the ID

        if attribute_in.values:
            self._add_values(attribute.id, attribute_in.values)

        self.db.commit()
        self.db.refresh(attribute)
        logger.info(
            f"Created attribute {attribute.id} '{attribute.name}' "
            f"with {len(attribute.values)} values"
        )
        return attribute

    def update(
        self, attribute_id: int, attribute_in: AttributeCreate
    ) -> CategoryAttribute | None:
        """Update an existing attribute.

        When ``values`` is given, all current values are deleted and the new
        set inserted. Product links to the deleted values are removed too.
        """
        attribute = self.get(attribute_id)
        if attribute is None:
            return None

        attribute.name = attribute_in.name
        attribute.description = attribute_in.description

        try:
            if attribute_in.values is not None:
                removed = self._delete_values(attribute)
                self._add_values(attribute_id, attribute_in.values)
                logger.info(
                    f"Replaced {removed} values of attribute {attribute_id} "
                    f"with {len(attribute_in.values)} new values"
                )
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            if self.get(attribute_id) is None:
                logger.warning(f"Attribute {attribute_id} was deleted during update")
                return None
            raise

        self.db.refresh(attribute)
        return attribute

    def delete(self, attribute: CategoryAttribute) -> None:
        """Delete an attribute, removing its values first."""
        attribute_id = attribute.id
        self._delete_values(attribute)
        attribute.categories.clear()
        self.db.delete(attribute)
        self.db.commit()
        logger.info(f"Deleted attribute {attribute_id}")

    def to_response(self, attribute: CategoryAttribute) -> dict:
        """Flatten an attribute and its values for the API."""
        return {
            "id": attribute.id,
            "name": attribute.name,
            "description": attribute.description,
            "values": attribute.value_strings,
        }
