"""Domain layer - catalog errors.

Example usage:
    from app.domain import ProductNotFoundError, StoreError

    try:
        detail = await service.get_product_detail("PROD001")
    except ProductNotFoundError:
        ...
"""

from app.domain.exceptions import (
    CategoryError,
    DomainError,
    DuplicateCategoryError,
    InvalidProductError,
    ProductNotFoundError,
    StoreError,
)

__all__ = [
    "DomainError",
    "ProductNotFoundError",
    "StoreError",
    "CategoryError",
    "DuplicateCategoryError",
    "InvalidProductError",
]
