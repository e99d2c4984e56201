"""Category API endpoints."""

from fastapi import APIRouter, HTTPException, status

from catalog_api.dependencies import DbSession
from catalog_api.schemas.category import CategoryCreate, CategoryResponse
from catalog_api.services.category_service import CategoryService

router = APIRouter()


@router.get("/all", response_model=list[CategoryResponse])
async def list_categories(db: DbSession):
    """List all categories with their attributes."""
    return CategoryService(db).list_categories()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int, db: DbSession):
    """Get a category by ID."""
    category = CategoryService(db).get(category_id)

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found",
        )

    return category


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(category_in: CategoryCreate, db: DbSession):
    """Create a new category.

    Attribute IDs that do not match an existing attribute are ignored.
    """
    return CategoryService(db).create(category_in)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: int, category_in: CategoryCreate, db: DbSession):
    """Update an existing category.

    Omit attributeIds to keep the current attributes; send an empty list to
    detach all of them.
    """
    category = CategoryService(db).update(category_id, category_in)

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found",
        )

    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, db: DbSession):
    """Delete a category.

    Note: This will fail if the category has associated products.
    """
    category_service = CategoryService(db)
    category = category_service.get(category_id)

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found",
        )

    try:
        category_service.delete(category)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
