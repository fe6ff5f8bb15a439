"""Catalog service for product and category operations.

High-level service that combines repository operations with
business logic for catalog queries and category management.
"""

from collections.abc import Mapping
from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.filters import ProductFilter, normalize
from app.catalog.models import Category
from app.catalog.repository import CategoryRepository, ProductRepository
from app.catalog.views import ProductView
from app.domain.exceptions import (
    DuplicateCategoryError,
    InvalidProductError,
    ProductNotFoundError,
)
from app.infrastructure.config import settings

logger = structlog.get_logger()


@dataclass
class ProductPage:
    """One page of products plus the total matching count.

    Attributes:
        items: Products on this page.
        total: Total products matching the filter.
        offset: Offset the page starts at.
        limit: Requested page size.
    """

    items: list[ProductView]
    total: int
    offset: int
    limit: int

    @property
    def has_more(self) -> bool:
        """Check if products exist past this page."""
        return self.offset + len(self.items) < self.total


class CatalogService:
    """Service for catalog read operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)

            page = await service.list_products({"category": "Shoes", "limit": "5"})
            detail = await service.get_product_detail("PROD001")
    """

    def __init__(
        self,
        session: AsyncSession,
        isolation_level: str | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            isolation_level: Isolation level for the list path; defaults to
                ``settings.read_isolation_level``. An empty string disables it.
        """
        if isolation_level is None:
            isolation_level = settings.read_isolation_level or None
        self.session = session
        self.repository = ProductRepository(session, isolation_level=isolation_level)

    async def list_products(self, raw_params: Mapping[str, str | None]) -> ProductPage:
        """List products from raw query parameters.

        Args:
            raw_params: Unvalidated ``offset``, ``limit``, ``category`` and
                ``priceLessThan`` values.

        Returns:
            Page of products with effective variant prices.

        Raises:
            StoreError: If the store fails.
        """
        return await self.search_products(normalize(raw_params))

    async def search_products(self, filters: ProductFilter) -> ProductPage:
        """List products matching a normalized filter.

        Args:
            filters: Normalized product filter.

        Returns:
            Page of products with effective variant prices.

        Raises:
            StoreError: If the store fails.
        """
        products, total = await self.repository.find_all(filters)

        logger.info(
            "Listed products",
            offset=filters.offset,
            limit=filters.limit,
            category=filters.category,
            max_price=str(filters.max_price) if filters.max_price is not None else None,
            returned=len(products),
            total=total,
        )

        return ProductPage(
            items=[ProductView.from_model(p) for p in products],
            total=total,
            offset=filters.offset,
            limit=filters.limit,
        )

    async def get_product_detail(self, code: str) -> ProductView:
        """Get a product by code with effective variant prices.

        Args:
            code: Product code.

        Returns:
            Product view.

        Raises:
            ProductNotFoundError: If no product has this code.
            StoreError: If the store fails.
        """
        product = await self.repository.get_by_code(code)
        return ProductView.from_model(product)


class CategoryService:
    """Service for listing and creating categories."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.categories = CategoryRepository(session)
        self.products = ProductRepository(session)

    async def list_categories(self) -> list[Category]:
        """List all categories.

        Returns:
            Categories ordered by ID.
        """
        return await self.categories.list_all()

    async def create_category(self, product_id: int, name: str) -> Category:
        """Create a category for a product.

        Args:
            product_id: Owning product ID.
            name: Category name.

        Returns:
            Created category.

        Raises:
            DuplicateCategoryError: If the product already has a category
                with this name, ignoring case.
            InvalidProductError: If the product does not exist.
            StoreError: If the store fails.
        """
        existing = await self.categories.list_all()
        for category in existing:
            if category.product_id == product_id and category.name.casefold() == name.casefold():
                raise DuplicateCategoryError(product_id, name)

        try:
            await self.products.get_by_id(product_id)
        except ProductNotFoundError as e:
            raise InvalidProductError(product_id) from e

        category = await self.categories.create(product_id, name)
        logger.info(
            "Created category",
            category_id=category.id,
            product_id=product_id,
            code=category.code,
        )
        return category
