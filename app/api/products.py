"""Product API endpoints.

Provides endpoints for products:
- GET /products - search products by any combination of filters
- GET /products/{id} - product details
- POST /products - create a product (admin)
- PUT /products/{id} - update a product (admin)
- DELETE /products/{id} - delete a product (admin)
"""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import MAX_INT, ErrorResponse, ProductRequest, ProductResponse
from app.catalog.filters import ProductFilter
from app.catalog.service import CatalogService, get_catalog_service
from app.domain.exceptions import ProductNotFoundError
from app.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])

ProductId = Annotated[int, Path(ge=0, le=MAX_INT, description="Product ID")]


# ============================================================================
# Dependencies
# ============================================================================


def get_service(session: Annotated[AsyncSession, Depends(get_session)]) -> CatalogService:
    """Get catalog service bound to the request session."""
    return get_catalog_service(session)


def product_not_found(error: ProductNotFoundError) -> HTTPException:
    """Convert ProductNotFoundError to a 404 HTTPException."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "PRODUCT_NOT_FOUND",
            "message": error.message,
        },
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductResponse],
    responses={422: {"model": ErrorResponse}},
    summary="Search products",
    description="Filter products by category, price range and sub-category. "
    "Every filter is optional; omitting all of them returns every product.",
)
async def search_products(
    service: Annotated[CatalogService, Depends(get_service)],
    cat: int | None = Query(default=None, ge=0, le=MAX_INT, description="Category ID"),
    min_price: Decimal | None = Query(
        default=None, ge=0, alias="minPrice", description="Minimum price (inclusive)"
    ),
    max_price: Decimal | None = Query(
        default=None, ge=0, alias="maxPrice", description="Maximum price (inclusive)"
    ),
    sub_category: str | None = Query(
        default=None, alias="subCategory", description="Exact sub-category"
    ),
) -> list[ProductResponse]:
    """Search products.

    Args:
        service: Catalog service.
        cat: Category filter.
        min_price: Lower price bound.
        max_price: Upper price bound.
        sub_category: Sub-category filter.

    Returns:
        Matching products.
    """
    product_filter = ProductFilter.from_raw(
        category_id=cat,
        min_price=min_price,
        max_price=max_price,
        sub_category=sub_category,
    )
    products = await service.search_products(product_filter)
    return [ProductResponse.from_record(product) for product in products]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: ProductId,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by ID.

    Raises:
        HTTPException: If product not found.
    """
    try:
        product = await service.get_product(product_id)
    except ProductNotFoundError as e:
        raise product_not_found(e)

    return ProductResponse.from_record(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    request: ProductRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Create a product.

    Args:
        request: Product fields.
        service: Catalog service.

    Returns:
        Created product with its ID.
    """
    product = await service.create_product(request.to_data())
    return ProductResponse.from_record(product)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update product",
)
async def update_product(
    product_id: ProductId,
    request: ProductRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Update a product.

    Raises:
        HTTPException: If product not found.
    """
    try:
        await service.update_product(product_id, request.to_data())
    except ProductNotFoundError as e:
        raise product_not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: ProductId,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Delete a product.

    Raises:
        HTTPException: If product not found.
    """
    try:
        await service.delete_product(product_id)
    except ProductNotFoundError as e:
        raise product_not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
