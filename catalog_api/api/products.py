"""Product API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Request, Response, UploadFile, status

from catalog_api.dependencies import AttributeValueIds, DbSession, ImageUpload, ProductForm
from catalog_api.schemas.product import (
    ProductImage,
    ProductResponse,
    ProductAttributeLink,
    ProductFilterRequest,
)
from catalog_api.services.filter_service import FilterService
from catalog_api.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_image(image: UploadFile | None) -> ProductImage | None:
    """Read an uploaded image, treating an empty file part as no image."""
    if image is None or not image.filename:
        return None
    content = await image.read()
    if not content:
        return None
    return ProductImage(content=content, content_type=image.content_type)


def not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product {product_id} not found",
    )


@router.get("/all", response_model=list[ProductResponse])
async def list_products(db: DbSession):
    """List all products with their category and attributes."""
    product_service = ProductService(db)
    return [product_service.enrich_with_names(p) for p in product_service.list_products()]


@router.get("/category/{category_id}", response_model=list[ProductResponse])
async def list_products_by_category(category_id: int, db: DbSession):
    """List the products of one category."""
    product_service = ProductService(db)
    return [
        product_service.enrich_with_names(p)
        for p in product_service.list_by_category(category_id)
    ]


@router.post("/filter", response_model=list[ProductResponse])
async def filter_products(filter_in: ProductFilterRequest, db: DbSession):
    """Filter products by category and attribute values.

    A product must match every attribute filter to be returned.
    Example: {"categoryId": 1, "attributeFilters": [{"categoryAttributeId": 2, "value": "Red"}]}
    """
    products = FilterService(db).execute(
        category_id=filter_in.category_id,
        attribute_filters=filter_in.attribute_filters,
    )
    product_service = ProductService(db)
    return [product_service.enrich_with_names(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: DbSession):
    """Get a product by ID."""
    product_service = ProductService(db)
    product = product_service.get(product_id)

    if not product:
        raise not_found(product_id)

    return product_service.enrich_with_names(product)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    response: Response,
    fields: ProductForm,
    db: DbSession,
    image: ImageUpload = None,
    attribute_value_ids: AttributeValueIds = None,
):
    """Create a new product from a multipart form."""
    product_service = ProductService(db)

    try:
        product = product_service.create(
            fields,
            image=await read_image(image),
            attribute_value_ids=attribute_value_ids,
        )
    except ValueError as e:
        logger.info(f"Rejected product create: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product_service.enrich_with_names(product)


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    fields: ProductForm,
    db: DbSession,
    image: ImageUpload = None,
    attribute_value_ids: AttributeValueIds = None,
):
    """Update an existing product from a multipart form.

    The stored image is kept unless a new one is uploaded. Sending
    attributeValueIds replaces the product's attribute values.
    """
    product_service = ProductService(db)

    try:
        product = product_service.update(
            product_id,
            fields,
            image=await read_image(image),
            attribute_value_ids=attribute_value_ids,
        )
    except ValueError as e:
        logger.info(f"Rejected update of product {product_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if not product:
        raise not_found(product_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, db: DbSession):
    """Delete a product."""
    product_service = ProductService(db)
    product = product_service.get(product_id)

    if not product:
        raise not_found(product_id)

    product_service.delete(product)


@router.post("/{product_id}/attributes", response_model=ProductResponse)
async def add_product_attribute(
    product_id: int,
    link_in: ProductAttributeLink,
    db: DbSession,
):
    """Attach an attribute value to a product."""
    product_service = ProductService(db)
    product = product_service.get(product_id)

    if not product:
        raise not_found(product_id)

    try:
        product = product_service.add_attribute(product, link_in.attribute_value_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return product_service.enrich_with_names(product)


@router.delete(
    "/{product_id}/attributes/{attribute_value_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_product_attribute(product_id: int, attribute_value_id: int, db: DbSession):
    """Detach an attribute value from a product."""
    removed = ProductService(db).remove_attribute(product_id, attribute_value_id)

    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=(
                f"Attribute value {attribute_value_id} is not linked "
                f"to product {product_id}"
            ),
        )
