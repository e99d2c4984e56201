"""Attribute API endpoints."""

from fastapi import APIRouter, HTTPException, status

from catalog_api.dependencies import DbSession
from catalog_api.schemas.attribute import AttributeCreate, AttributeResponse
from catalog_api.services.attribute_service import AttributeService

router = APIRouter()


@router.get("/all", response_model=list[AttributeResponse])
async def list_attributes(db: DbSession):
    """List all attributes with their values."""
    attribute_service = AttributeService(db)
    return [attribute_service.to_response(a) for a in attribute_service.list_attributes()]


@router.get("/{attribute_id}", response_model=AttributeResponse)
async def get_attribute(attribute_id: int, db: DbSession):
    """Get an attribute by ID."""
    attribute_service = AttributeService(db)
    attribute = attribute_service.get(attribute_id)

    if not attribute:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attribute {attribute_id} not found",
        )

    return attribute_service.to_response(attribute)


@router.post("", response_model=AttributeResponse, status_code=status.HTTP_201_CREATED)
async def create_attribute(attribute_in: AttributeCreate, db: DbSession):
    """Create a new attribute with its values."""
    attribute_service = AttributeService(db)
    attribute = attribute_service.create(attribute_in)
    return attribute_service.to_response(attribute)


@router.put("/{attribute_id}", response_model=AttributeResponse)
async def update_attribute(attribute_id: int, attribute_in: AttributeCreate, db: DbSession):
    """Update an existing attribute.

    When values are sent, they replace every existing value. Products linked
    to a removed value lose that link.
    """
    attribute_service = AttributeService(db)
    attribute = attribute_service.update(attribute_id, attribute_in)

    if not attribute:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attribute {attribute_id} not found",
        )

    return attribute_service.to_response(attribute)


@router.delete("/{attribute_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attribute(attribute_id: int, db: DbSession):
    """Delete an attribute and all of its values."""
    attribute_service = AttributeService(db)
    attribute = attribute_service.get(attribute_id)

    if not attribute:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attribute {attribute_id} not found",
        )

    attribute_service.delete(attribute)
