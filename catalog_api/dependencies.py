"""FastAPI dependencies for dependency injection.

Besides the database session, this holds the multipart form pieces shared
by the product create and update routes.
"""

from decimal import Decimal
from typing import Annotated

from fastapi import Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from catalog_api.models.database import get_db
from catalog_api.schemas.product import ProductFields

# Type aliases for common dependencies
DbSession = Annotated[Session, Depends(get_db)]


def product_form(
    name: str = Form(..., min_length=1, max_length=200),
    description: str | None = Form(None, max_length=2000),
    price: Decimal = Form(..., ge=0),
    stock_quantity: int = Form(0, alias="stockQuantity", ge=0),
    category_id: int = Form(..., alias="categoryId"),
    is_recommended: bool = Form(False, alias="isRecommended"),
) -> ProductFields:
    """Collect the scalar product fields from a multipart form."""
    return ProductFields(
        name=name,
        description=description,
        price=price,
        stock_quantity=stock_quantity,
        category_id=category_id,
        is_recommended=is_recommended,
    )


ProductForm = Annotated[ProductFields, Depends(product_form)]
AttributeValueIds = Annotated[list[int] | None, Form(alias="attributeValueIds")]
ImageUpload = Annotated[UploadFile | None, File()]
