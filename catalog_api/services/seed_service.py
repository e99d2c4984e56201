"""Seed and reset utilities for the demo catalog."""

import logging

from sqlalchemy.orm import Session

from catalog_api.data import demo_catalog
from catalog_api.models.attribute import CategoryAttribute, AttributeValue
from catalog_api.models.category import Category, category_attribute_categories
from catalog_api.models.database import utcnow
from catalog_api.models.product import Product, ProductAttributeValue

logger = logging.getLogger(__name__)


def catalog_stats(db: Session) -> dict[str, int]:
    """Count rows in every catalog table."""
    return {
        "categories": db.query(Category).count(),
        "attributes": db.query(CategoryAttribute).count(),
        "attribute_values": db.query(AttributeValue).count(),
        "products": db.query(Product).count(),
        "product_attribute_values": db.query(ProductAttributeValue).count(),
    }


def seed(db: Session) -> bool:
    """Populate the demo catalog if the database holds no catalog data.

    Returns:
        True if data was inserted, False if the call was a no-op
    """
    has_data = (
        db.query(Category).first() is not None
        or db.query(CategoryAttribute).first() is not None
    )
    if has_data:
        logger.info("Catalog already contains data, skipping seed")
        return False

    try:
        _populate(db)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Seeding failed, rolled back")
        raise

    logger.info(f"Seeded demo catalog: {catalog_stats(db)}")
    return True


def reseed(db: Session) -> None:
    """Delete all catalog data and populate the demo catalog again."""
    try:
        _clear(db)
        _populate(db)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Reseeding failed, rolled back")
        raise

    logger.info(f"Reseeded demo catalog: {catalog_stats(db)}")


def _clear(db: Session) -> None:
    """Delete every catalog row in dependency order."""
    db.query(ProductAttributeValue).delete(synchronize_session=False)
    db.query(AttributeValue).delete(synchronize_session=False)
    db.execute(category_attribute_categories.delete())
    db.query(CategoryAttribute).delete(synchronize_session=False)
    db.query(Product).delete(synchronize_session=False)
    db.query(Category).delete(synchronize_session=False)
    db.flush()
    db.expunge_all()


def _populate(db: Session) -> None:
    """Insert the demo catalog. The caller commits."""
    # Categories
    categories = {}
    for c_data in demo_catalog.CATEGORIES:
        category = Category(
            name=c_data["name"],
            description=c_data["description"],
            created_at=utcnow(),
        )
        db.add(category)
        categories[category.name] = category

    # Attributes: shared ones go on every category
    attributes = {}
    shared = []
    for a_data in demo_catalog.SHARED_ATTRIBUTES:
        attribute = CategoryAttribute(name=a_data["name"], description=a_data["description"])
        db.add(attribute)
        attributes[attribute.name] = attribute
        shared.append(attribute)

    for category in categories.values():
        category.attributes.extend(shared)

    for category_name, attr_list in demo_catalog.CATEGORY_ATTRIBUTES.items():
        for a_data in attr_list:
            attribute = CategoryAttribute(
                name=a_data["name"], description=a_data["description"]
            )
            db.add(attribute)
            attributes[attribute.name] = attribute
            categories[category_name].attributes.append(attribute)

    db.flush()  # Get attribute IDs

    # Attribute values
    values = {}
    for attribute_name, value_list in demo_catalog.ATTRIBUTE_VALUES.items():
        attribute = attributes[attribute_name]
        for v in value_list:
            value = AttributeValue(value=v, category_attribute_id=attribute.id)
            db.add(value)
            values[(attribute_name, v)] = value

    # Products
    products = []
    for p_data in demo_catalog.PRODUCTS:
        product = Product(
            name=p_data["name"],
            description=p_data["description"],
            price=p_data["price"],
            stock_quantity=p_data["stock_quantity"],
            category=categories[p_data["category"]],
            is_recommended=p_data["is_recommended"],
            image_base64=demo_catalog.PLACEHOLDER_IMAGE_BASE64,
            image_content_type=demo_catalog.PLACEHOLDER_IMAGE_CONTENT_TYPE,
            created_at=utcnow(),
        )
        db.add(product)
        products.append((product, p_data.get("attributes", [])))

    db.flush()  # Get product and value IDs

    # Product <-> attribute value links
    for product, links in products:
        for key in links:
            db.add(
                ProductAttributeValue(
                    product_id=product.id, attribute_value_id=values[key].id
                )
            )

    db.flush()
