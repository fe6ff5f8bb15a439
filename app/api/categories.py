"""Category API endpoints.

Provides endpoints for listing and creating product categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.catalog import store_error_exception
from app.api.schemas import CategoryCreateRequest, CategoryResponse, ErrorResponse
from app.catalog.service import CategoryService
from app.domain.exceptions import DuplicateCategoryError, InvalidProductError, StoreError
from app.infrastructure.database import get_session

router = APIRouter(prefix="/categories", tags=["Categories"])


# ============================================================================
# Dependencies
# ============================================================================


def get_category_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryService:
    """Get category service bound to the request session."""
    return CategoryService(session)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[CategoryResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> list[CategoryResponse]:
    """List all categories."""
    try:
        categories = await service.list_categories()
    except StoreError as e:
        raise store_error_exception(e, "Error fetching categories") from e

    return [CategoryResponse.from_model(c) for c in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create category",
    description="Create a category for an existing product.",
)
async def create_category(
    request: CategoryCreateRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Create a category.

    Args:
        request: Product ID and category name.
        service: Category service.

    Returns:
        Created category.

    Raises:
        HTTPException: If the name is a duplicate for the product, the
            product does not exist, or the store fails.
    """
    try:
        category = await service.create_category(request.product_id, request.name)
    except DuplicateCategoryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error_code": "DUPLICATE_CATEGORY", "message": e.message},
        ) from e
    except InvalidProductError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error_code": "INVALID_PRODUCT", "message": e.message},
        ) from e
    except StoreError as e:
        raise store_error_exception(e, "Error creating category") from e

    return CategoryResponse.from_model(category)
