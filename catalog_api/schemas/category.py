"""Pydantic schemas for Category."""

from datetime import datetime

from pydantic import Field

from catalog_api.schemas.base import CamelModel


class CategoryBase(CamelModel):
    """Base category schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)


class CategoryCreate(CategoryBase):
    """Schema for creating or updating a category.

    ``attribute_ids`` left out of an update keeps the current attribute set;
    an empty list detaches every attribute.
    """

    attribute_ids: list[int] | None = None


class CategoryAttributeSummary(CamelModel):
    """Attribute as listed under a category (no values)."""

    id: int
    name: str
    description: str | None = None


class CategoryResponse(CamelModel):
    """Schema for category response."""

    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    attributes: list[CategoryAttributeSummary] = []
