"""Pydantic schemas for CategoryAttribute."""

from typing import Annotated

from pydantic import Field

from catalog_api.schemas.base import CamelModel


class AttributeCreate(CamelModel):
    """Schema for creating or updating an attribute.

    On update, ``values`` replaces every existing value when present.
    """

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    values: list[Annotated[str, Field(min_length=1, max_length=100)]] | None = None


class AttributeResponse(CamelModel):
    """Schema for attribute response with its flattened values."""

    id: int
    name: str
    description: str | None = None
    values: list[str] = []
