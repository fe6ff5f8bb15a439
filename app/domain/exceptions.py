"""Domain exceptions.

All domain-level errors raised by the catalog repositories and services.
The API layer translates them into HTTP error responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when no product matches a code or ID lookup."""

    def __init__(self, field: str, value: Any) -> None:
        """Initialize product not found error.

        Args:
            field: Lookup field ("code" or "id").
            value: Value that was looked up.
        """
        super().__init__(
            f"Product not found: {field}={value}",
            details={"field": field, "value": value},
        )


# ============================================================================
# Store Errors
# ============================================================================


class StoreError(DomainError):
    """Raised when the relational store fails or is unreachable.

    No retry is attempted; callers decide whether to try again.
    """

    def __init__(self, operation: str, cause: Exception) -> None:
        """Initialize store error.

        Args:
            operation: Repository operation that failed.
            cause: Underlying driver or SQLAlchemy exception.
        """
        super().__init__(
            f"Store operation '{operation}' failed",
            details={"operation": operation, "cause": type(cause).__name__},
        )
        self.operation = operation


# ============================================================================
# Category Errors
# ============================================================================


class CategoryError(DomainError):
    """Base class for category-related errors."""

    pass


class DuplicateCategoryError(CategoryError):
    """Raised when a product already has a category with the same name."""

    def __init__(self, product_id: int, name: str) -> None:
        """Initialize duplicate category error.

        Args:
            product_id: Owning product ID.
            name: Requested category name.
        """
        super().__init__(
            f"Duplicate category name '{name}' for product {product_id}",
            details={"product_id": product_id, "name": name},
        )


class InvalidProductError(CategoryError):
    """Raised when a category references a product that does not exist."""

    def __init__(self, product_id: int) -> None:
        """Initialize invalid product error.

        Args:
            product_id: Referenced product ID.
        """
        super().__init__(
            f"Invalid product ID: {product_id}",
            details={"product_id": product_id},
        )
