"""Product service for CRUD operations."""

import base64
import logging

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from catalog_api.config import settings
from catalog_api.models.attribute import AttributeValue
from catalog_api.models.category import Category
from catalog_api.models.database import utcnow
from catalog_api.models.product import Product, ProductAttributeValue
from catalog_api.schemas.product import ProductFields, ProductImage

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product CRUD operations and attribute links."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def get(self, product_id: int) -> Product | None:
        """Get a product by ID."""
        return self.db.query(Product).filter(Product.id == product_id).first()

    def list_products(self) -> list[Product]:
        """Get all products."""
        return self.db.query(Product).order_by(Product.id).all()

    def list_by_category(self, category_id: int) -> list[Product]:
        """Get all products in a category."""
        return (
            self.db.query(Product)
            .filter(Product.category_id == category_id)
            .order_by(Product.id)
            .all()
        )

    def validate_category_exists(self, category_id: int) -> bool:
        """Check if a category exists."""
        return (
            self.db.query(Category).filter(Category.id == category_id).first()
            is not None
        )

    def validate_attribute_value_exists(self, attribute_value_id: int) -> bool:
        """Check if an attribute value exists."""
        return (
            self.db.query(AttributeValue)
            .filter(AttributeValue.id == attribute_value_id)
            .first()
            is not None
        )

    def _check_attribute_values(self, attribute_value_ids: list[int]) -> list[int]:
        """Deduplicate attribute value IDs and make sure all of them exist.

        Raises:
            ValueError: If any ID does not reference an attribute value
        """
        unique_ids = list(dict.fromkeys(attribute_value_ids))
        if not unique_ids:
            return []

        found = {
            row.id
            for row in self.db.query(AttributeValue.id)
            .filter(AttributeValue.id.in_(unique_ids))
            .all()
        }
        missing = [i for i in unique_ids if i not in found]
        if missing:
            raise ValueError(f"Invalid attribute value IDs: {missing}")
        return unique_ids

    def encode_image(self, image: ProductImage) -> tuple[str, str | None]:
        """Validate an uploaded image and encode it for storage.

        Returns:
            Tuple of (base64 text, content type)

        Raises:
            ValueError: If the image exceeds the configured size limit
        """
        if len(image.content) > settings.max_image_size_bytes:
            raise ValueError(
                f"Image size exceeds {settings.max_image_size_mb:g}MB limit"
            )
        return base64.b64encode(image.content).decode("ascii"), image.content_type

    def _validate(
        self,
        fields: ProductFields,
        image: ProductImage | None,
        attribute_value_ids: list[int] | None,
    ) -> tuple[tuple[str, str | None] | None, list[int] | None]:
        """Run every check that must pass before anything is written."""
        if not self.validate_category_exists(fields.category_id):
            raise ValueError(f"Invalid category ID: {fields.category_id}")

        encoded = self.encode_image(image) if image is not None else None

        if attribute_value_ids is not None:
            attribute_value_ids = self._check_attribute_values(attribute_value_ids)

        return encoded, attribute_value_ids

    def _apply_fields(self, product: Product, fields: ProductFields) -> None:
        product.name = fields.name
        product.description = fields.description
        product.price = fields.price
        product.stock_quantity = fields.stock_quantity
        product.category_id = fields.category_id
        product.is_recommended = fields.is_recommended

    def create(
        self,
        fields: ProductFields,
        image: ProductImage | None = None,
        attribute_value_ids: list[int] | None = None,
    ) -> Product:
        """Create a new product and link its attribute values.

        Raises:
            ValueError: On an unknown category or attribute value, or an
                oversized image. Nothing is persisted in that case.
        """
        encoded, attribute_value_ids = self._validate(fields, image, attribute_value_ids)

        product = Product(created_at=utcnow())
        self._apply_fields(product, fields)
        if encoded is not None:
            product.image_base64, product.image_content_type = encoded

        self.db.add(product)
        self.db.flush()  # Get the ID

        for attribute_value_id in attribute_value_ids or []:
            self.db.add(
                ProductAttributeValue(
                    product_id=product.id, attribute_value_id=attribute_value_id
                )
            )

        self.db.commit()
        self.db.refresh(product)
        logger.info(
            f"Created product {product.id} '{product.name}' "
            f"with {len(product.attribute_links)} attribute values"
        )
        return product

    def update(
        self,
        product_id: int,
        fields: ProductFields,
        image: ProductImage | None = None,
        attribute_value_ids: list[int] | None = None,
    ) -> Product | None:
        """Update an existing product.

        The stored image is kept unless a new one is supplied. When
        ``attribute_value_ids`` is given, the existing links are all removed
        and the new set inserted.

        Returns None if the product does not exist.
        """
        product = self.get(product_id)
        if product is None:
            return None

        encoded, attribute_value_ids = self._validate(fields, image, attribute_value_ids)

        self._apply_fields(product, fields)
        if encoded is not None:
            product.image_base64, product.image_content_type = encoded
        product.updated_at = utcnow()

        try:
            if attribute_value_ids is not None:
                # Flushing the removals also writes the product row
                product.attribute_links.clear()
                self.db.flush()
                product.attribute_links.extend(
                    ProductAttributeValue(attribute_value_id=attribute_value_id)
                    for attribute_value_id in attribute_value_ids
                )
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            if self.get(product_id) is None:
                logger.warning(f"Product {product_id} was deleted during update")
                return None
            raise

        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        """Delete a product along with its attribute links."""
        product_id = product.id
        self.db.delete(product)
        self.db.commit()
        logger.info(f"Deleted product {product_id}")

    def add_attribute(self, product: Product, attribute_value_id: int) -> Product:
        """Link one attribute value to a product.

        Linking a value that is already present leaves the product unchanged.

        Raises:
            ValueError: If the attribute value does not exist
        """
        if not self.validate_attribute_value_exists(attribute_value_id):
            raise ValueError(f"Invalid attribute value ID: {attribute_value_id}")

        if attribute_value_id not in product.attribute_value_ids:
            product.attribute_links.append(
                ProductAttributeValue(attribute_value_id=attribute_value_id)
            )
            product.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(product)

        return product

    def remove_attribute(self, product_id: int, attribute_value_id: int) -> bool:
        """Unlink an attribute value from a product.

        Returns False if no such link exists.
        """
        link = (
            self.db.query(ProductAttributeValue)
            .filter(
                ProductAttributeValue.product_id == product_id,
                ProductAttributeValue.attribute_value_id == attribute_value_id,
            )
            .first()
        )
        if link is None:
            return False

        link.product.updated_at = utcnow()
        self.db.delete(link)
        self.db.commit()
        return True

    def enrich_with_names(self, product: Product) -> dict:
        """Add category_name and flattened attributes to product data."""
        attributes = []
        for link in product.attribute_links:
            value = link.attribute_value
            attributes.append(
                {
                    "attribute_value_id": value.id,
                    "attribute_id": value.category_attribute_id,
                    "attribute_name": value.category_attribute.name,
                    "value": value.value,
                }
            )

        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": product.price_float,
            "stock_quantity": product.stock_quantity,
            "category_id": product.category_id,
            "category_name": product.category.name if product.category else None,
            "image_base64": product.image_base64,
            "image_content_type": product.image_content_type,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
            "is_recommended": product.is_recommended,
            "attributes": attributes,
        }
