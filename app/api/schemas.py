"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
Prices are exact decimals and serialize as strings.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from app.catalog.models import Category
from app.catalog.views import CategoryView, ProductView, VariantView


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Catalog Schemas
# ============================================================================


class ProductCategorySchema(BaseModel):
    """Category embedded in a product."""

    code: str = Field(..., description="Category code (UUID)")
    name: str = Field(..., description="Category name")

    @classmethod
    def from_view(cls, view: CategoryView | None) -> "ProductCategorySchema | None":
        if view is None:
            return None
        return cls(code=view.code, name=view.name)


class ProductVariantSchema(BaseModel):
    """A product variant with its effective price."""

    id: int = Field(..., description="Variant identifier")
    product_id: int = Field(..., description="Parent product identifier")
    name: str = Field(..., description="Variant name")
    sku: str = Field(..., description="Stock keeping unit")
    price: Decimal = Field(..., description="Effective price (product price when not set)")

    @classmethod
    def from_view(cls, view: VariantView) -> "ProductVariantSchema":
        return cls(
            id=view.id,
            product_id=view.product_id,
            name=view.name,
            sku=view.sku,
            price=view.price,
        )


class ProductSchema(BaseModel):
    """A catalog product."""

    code: str = Field(..., description="Product code")
    price: Decimal = Field(..., description="Product price")
    category: ProductCategorySchema | None = Field(
        default=None, description="Product category"
    )
    variants: list[ProductVariantSchema] = Field(
        default_factory=list, description="Product variants"
    )

    @classmethod
    def from_view(cls, view: ProductView) -> "ProductSchema":
        return cls(
            code=view.code,
            price=view.price,
            category=ProductCategorySchema.from_view(view.category),
            variants=[ProductVariantSchema.from_view(v) for v in view.variants],
        )


class ProductListResponse(BaseModel):
    """Page of products and the total matching count."""

    products: list[ProductSchema] = Field(..., description="Products on this page")
    total: int = Field(..., description="Total products matching the filter")


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryCreateRequest(BaseModel):
    """Request to create a category."""

    product_id: int = Field(..., ge=1, description="Owning product identifier")
    name: str = Field(..., min_length=1, max_length=256, description="Category name")


class CategoryResponse(BaseModel):
    """A stored category."""

    id: int = Field(..., description="Category identifier")
    product_id: int = Field(..., description="Owning product identifier")
    code: str = Field(..., description="Category code (UUID)")
    name: str = Field(..., description="Category name")

    @classmethod
    def from_model(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            product_id=category.product_id,
            code=category.code,
            name=category.name,
        )
