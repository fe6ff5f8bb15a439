"""Product and category repositories for database operations.

The list path builds one predicate statement per filter and uses it for
both the total count and the page fetch.
"""

from collections.abc import Sequence

import structlog
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.catalog.filters import ProductFilter
from app.catalog.models import Category, Product
from app.domain.exceptions import ProductNotFoundError, StoreError

logger = structlog.get_logger()

# Errors raised by the driver or pool when the store misbehaves
STORE_ERRORS = (SQLAlchemyError, OSError)


class ProductRepository:
    """Repository for Product database operations.

    Handles filtering, counting and paginated fetching of products with
    their category and variants eagerly loaded.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products, total = await repo.find_all(
                ProductFilter(category="Shoes", limit=20),
            )
    """

    def __init__(
        self,
        session: AsyncSession,
        isolation_level: str | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
            isolation_level: Isolation level applied before the list path
                starts its transaction, or None for the driver default.
        """
        self.session = session
        self.isolation_level = isolation_level

    def build_query(self, filters: ProductFilter) -> Select:
        """Build the predicate statement for a filter.

        Args:
            filters: Normalized product filter.

        Returns:
            Unordered, unpaginated select of matching products.
        """
        query = select(Product)

        if filters.category is not None:
            # A product may own several category rows; DISTINCT keeps the
            # join from duplicating it.
            query = (
                query.join(Product.category)
                .where(Category.name == filters.category)
                .distinct()
            )

        if filters.max_price is not None:
            query = query.where(Product.price < filters.max_price)

        return query

    async def count(self, query: Select) -> int:
        """Count rows matched by a predicate statement.

        Args:
            query: Statement from ``build_query``.

        Returns:
            Number of matching products.
        """
        count_query = select(func.count()).select_from(query.subquery())
        result = await self.session.execute(count_query)
        return result.scalar_one()

    async def fetch_page(
        self,
        query: Select,
        offset: int,
        limit: int,
    ) -> Sequence[Product]:
        """Fetch one page of a predicate statement.

        Category and variants are loaded with one batched query each.

        Args:
            query: Statement from ``build_query``.
            offset: Rows to skip.
            limit: Maximum rows to return.

        Returns:
            Products ordered by ascending ID.
        """
        page_query = (
            query.order_by(Product.id.asc())
            .offset(offset)
            .limit(limit)
            .options(
                selectinload(Product.category),
                selectinload(Product.variants),
            )
        )
        result = await self.session.execute(page_query)
        return result.scalars().all()

    async def find_all(
        self,
        filters: ProductFilter,
    ) -> tuple[list[Product], int]:
        """Find a page of products and the total matching count.

        Args:
            filters: Normalized product filter.

        Returns:
            Tuple of (page of products, total matching count).

        Raises:
            StoreError: If the store fails.
        """
        query = self.build_query(filters)

        try:
            await self._begin_read()
            total = await self.count(query)

            if filters.offset >= total:
                logger.debug(
                    "Offset beyond result set, skipping page fetch",
                    offset=filters.offset,
                    total=total,
                )
                return [], total

            products = await self.fetch_page(query, filters.offset, filters.limit)
        except STORE_ERRORS as e:
            raise StoreError("find_all", e) from e

        return list(products), total

    async def get_by_code(self, code: str) -> Product:
        """Get product by code with category and variants loaded.

        Args:
            code: Product code.

        Returns:
            Matching product.

        Raises:
            ProductNotFoundError: If no product has this code.
            StoreError: If the store fails.
        """
        query = (
            select(Product)
            .where(Product.code == code)
            .options(
                selectinload(Product.category),
                selectinload(Product.variants),
            )
        )

        try:
            result = await self.session.execute(query)
            product = result.scalars().first()
        except STORE_ERRORS as e:
            raise StoreError("get_by_code", e) from e

        if product is None:
            raise ProductNotFoundError("code", code)
        return product

    async def get_by_id(self, product_id: int) -> Product:
        """Get product by ID without related entities.

        Args:
            product_id: Product ID.

        Returns:
            Matching product.

        Raises:
            ProductNotFoundError: If no product has this ID.
            StoreError: If the store fails.
        """
        try:
            product = await self.session.get(Product, product_id)
        except STORE_ERRORS as e:
            raise StoreError("get_by_id", e) from e

        if product is None:
            raise ProductNotFoundError("id", product_id)
        return product

    async def _begin_read(self) -> None:
        """Apply the configured isolation level to a fresh transaction."""
        if not self.isolation_level or self.session.in_transaction():
            return
        await self.session.connection(
            execution_options={"isolation_level": self.isolation_level},
        )


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_all(self) -> list[Category]:
        """List all categories ordered by ID.

        Returns:
            All categories.

        Raises:
            StoreError: If the store fails.
        """
        try:
            result = await self.session.execute(
                select(Category).order_by(Category.id.asc())
            )
        except STORE_ERRORS as e:
            raise StoreError("list_categories", e) from e
        return list(result.scalars().all())

    async def create(self, product_id: int, name: str) -> Category:
        """Store a new category.

        Args:
            product_id: Owning product ID.
            name: Category name.

        Returns:
            Created category with ID and code assigned.

        Raises:
            StoreError: If the store fails.
        """
        category = Category(product_id=product_id, name=name)
        self.session.add(category)
        try:
            await self.session.flush()
        except STORE_ERRORS as e:
            raise StoreError("create_category", e) from e
        return category
