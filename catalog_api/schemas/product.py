"""Pydantic schemas for Product."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from catalog_api.schemas.base import CamelModel


class ProductFields(CamelModel):
    """Scalar product fields shared by create and update.

    The HTTP layer receives these as multipart form fields.
    """

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    price: Decimal = Field(..., ge=0)
    stock_quantity: int = Field(0, ge=0)
    category_id: int
    is_recommended: bool = False


class ProductImage(CamelModel):
    """Raw uploaded image bytes with their content type."""

    content: bytes
    content_type: str | None = Field(None, max_length=50)


class ProductAttributeResponse(CamelModel):
    """Attribute value as seen on a product."""

    attribute_value_id: int
    attribute_id: int
    attribute_name: str
    value: str


class ProductResponse(CamelModel):
    """Schema for product response."""

    id: int
    name: str
    description: str | None = None
    price: float
    stock_quantity: int
    category_id: int
    category_name: str | None = None
    image_base64: str | None = None
    image_content_type: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    is_recommended: bool = False
    attributes: list[ProductAttributeResponse] = []


class ProductAttributeLink(CamelModel):
    """Body for attaching one attribute value to a product."""

    attribute_value_id: int


class AttributeFilter(CamelModel):
    """A (category attribute, literal value) predicate."""

    category_attribute_id: int
    value: str = Field(..., max_length=100)


class ProductFilterRequest(CamelModel):
    """Filter criteria; every attribute filter must match."""

    category_id: int | None = None
    attribute_filters: list[AttributeFilter] | None = None
