"""Catalog API endpoints.

Provides endpoints for listing products and retrieving product details.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import ErrorResponse, ProductListResponse, ProductSchema
from app.catalog.service import CatalogService
from app.domain.exceptions import ProductNotFoundError, StoreError
from app.infrastructure.database import get_session

logger = structlog.get_logger()

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ============================================================================
# Dependencies
# ============================================================================


def get_catalog_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service bound to the request session."""
    return CatalogService(session)


def first_query_values(request: Request) -> dict[str, str]:
    """Map each query parameter to its first value."""
    params: dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, value)
    return params


def store_error_exception(e: StoreError, message: str) -> HTTPException:
    """Convert a store failure to a 500 response."""
    logger.error("Store failure", error=e.message, **e.details)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error_code": "STORE_ERROR", "message": message},
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
    description=(
        "List products ordered by ID. Supports `offset`, `limit` (1-100), "
        "`category` (exact name) and `priceLessThan`. Malformed values "
        "fall back to their defaults."
    ),
)
async def list_products(
    request: Request,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductListResponse:
    """List products matching the query parameters.

    Args:
        request: Incoming request, read for raw query parameters.
        service: Catalog service.

    Returns:
        Page of products and total count.

    Raises:
        HTTPException: If the store fails.
    """
    try:
        page = await service.list_products(first_query_values(request))
    except StoreError as e:
        raise store_error_exception(e, "Failed to retrieve products") from e

    return ProductListResponse(
        products=[ProductSchema.from_view(p) for p in page.items],
        total=page.total,
    )


@router.get(
    "/{code}",
    response_model=ProductSchema,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product details",
    description="Get a product by code with its category and variants.",
)
async def get_product(
    code: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductSchema:
    """Get a product by code.

    Variants without their own price carry the product price.

    Args:
        code: Product code.
        service: Catalog service.

    Returns:
        Product details.

    Raises:
        HTTPException: If product not found or the store fails.
    """
    try:
        product = await service.get_product_detail(code)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": f"Product not found: {code}",
            },
        ) from e
    except StoreError as e:
        raise store_error_exception(e, "Failed to retrieve product") from e

    return ProductSchema.from_view(product)
