"""Presentation copies of catalog entities.

Services return these instead of ORM rows so that display-time rules,
such as variant price fallback, never touch persisted state.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from app.catalog.models import Category, Product


@dataclass(frozen=True)
class CategoryView:
    """Category as presented to clients."""

    code: str
    name: str

    @classmethod
    def from_model(cls, category: Category | None) -> "CategoryView | None":
        """Build a view from a category row, if any."""
        if category is None:
            return None
        return cls(code=category.code, name=category.name)


@dataclass(frozen=True)
class VariantView:
    """Variant as presented to clients, with its effective price."""

    id: int
    product_id: int
    name: str
    sku: str
    price: Decimal


@dataclass(frozen=True)
class ProductView:
    """Product with category and effective variant prices."""

    code: str
    price: Decimal
    category: CategoryView | None
    variants: list[VariantView] = field(default_factory=list)

    @classmethod
    def from_model(cls, product: Product) -> "ProductView":
        """Build a view from a product with relations loaded."""
        return cls(
            code=product.code,
            price=product.price,
            category=CategoryView.from_model(product.category),
            variants=apply_price_fallback(product),
        )


def apply_price_fallback(product: Product) -> list[VariantView]:
    """Resolve the presented price of each variant.

    A variant whose stored price is zero inherits the product price.
    The product and its variants are left unchanged.

    Args:
        product: Product with variants loaded.

    Returns:
        Variant views in stored order.
    """
    return [
        VariantView(
            id=variant.id,
            product_id=variant.product_id,
            name=variant.name,
            sku=variant.sku,
            price=product.price if not variant.price else variant.price,
        )
        for variant in product.variants
    ]
