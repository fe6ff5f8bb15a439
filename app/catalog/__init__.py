"""Product Catalog.

Provides filter normalization, product queries with eager loading,
price-fallback presentation and category management.
"""

from app.catalog.filters import ProductFilter, normalize
from app.catalog.models import Category, Product, Variant
from app.catalog.repository import CategoryRepository, ProductRepository
from app.catalog.service import CatalogService, CategoryService, ProductPage
from app.catalog.views import CategoryView, ProductView, VariantView, apply_price_fallback

__all__ = [
    # Filters
    "ProductFilter",
    "normalize",
    # Models
    "Category",
    "Product",
    "Variant",
    # Repositories
    "CategoryRepository",
    "ProductRepository",
    # Views
    "CategoryView",
    "ProductView",
    "VariantView",
    "apply_price_fallback",
    # Services
    "CatalogService",
    "CategoryService",
    "ProductPage",
]
