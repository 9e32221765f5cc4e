"""Category API endpoints.

Provides endpoints for categories:
- GET /categories - list all categories
- GET /categories/{id} - category details
- GET /categories/{id}/products - products in a category
- POST /categories - create a category (admin)
- PUT /categories/{id} - update a category (admin)
- DELETE /categories/{id} - delete a category (admin)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    MAX_INT,
    CategoryRequest,
    CategoryResponse,
    ErrorResponse,
    ProductResponse,
)
from app.catalog.service import CatalogService, get_catalog_service
from app.domain.exceptions import CategoryNotFoundError
from app.infrastructure.database import get_session

router = APIRouter(prefix="/categories", tags=["Categories"])

CategoryId = Annotated[int, Path(ge=0, le=MAX_INT, description="Category ID")]


# ============================================================================
# Dependencies
# ============================================================================


def get_service(session: Annotated[AsyncSession, Depends(get_session)]) -> CatalogService:
    """Get catalog service bound to the request session."""
    return get_catalog_service(session)


def category_not_found(error: CategoryNotFoundError) -> HTTPException:
    """Convert CategoryNotFoundError to a 404 HTTPException."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "CATEGORY_NOT_FOUND",
            "message": error.message,
        },
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_service)],
) -> list[CategoryResponse]:
    """List all categories."""
    categories = await service.list_categories()
    return [CategoryResponse.from_record(category) for category in categories]


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get category",
)
async def get_category(
    category_id: CategoryId,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CategoryResponse:
    """Get a category by ID.

    Raises:
        HTTPException: If category not found.
    """
    try:
        category = await service.get_category(category_id)
    except CategoryNotFoundError as e:
        raise category_not_found(e)

    return CategoryResponse.from_record(category)


@router.get(
    "/{category_id}/products",
    response_model=list[ProductResponse],
    summary="List products in category",
)
async def list_category_products(
    category_id: CategoryId,
    service: Annotated[CatalogService, Depends(get_service)],
) -> list[ProductResponse]:
    """List all products in a category.

    An unknown category yields an empty list.
    """
    products = await service.list_products_by_category(category_id)
    return [ProductResponse.from_record(product) for product in products]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}},
    summary="Create category",
)
async def create_category(
    request: CategoryRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> CategoryResponse:
    """Create a category.

    Args:
        request: Category fields.
        service: Catalog service.

    Returns:
        Created category with its ID.
    """
    category = await service.create_category(request.to_data())
    return CategoryResponse.from_record(category)


@router.put(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update category",
)
async def update_category(
    category_id: CategoryId,
    request: CategoryRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Update a category.

    Raises:
        HTTPException: If category not found.
    """
    try:
        await service.update_category(category_id, request.to_data())
    except CategoryNotFoundError as e:
        raise category_not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete category",
)
async def delete_category(
    category_id: CategoryId,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Delete a category.

    Raises:
        HTTPException: If category not found.
    """
    try:
        await service.delete_category(category_id)
    except CategoryNotFoundError as e:
        raise category_not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
