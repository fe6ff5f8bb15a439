"""Shared fixtures: in-memory SQLite database for catalog tests."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.catalog.models import Category, Product, Variant
from app.catalog.seed import seed_catalog
from app.infrastructure.config import settings
from app.infrastructure.database import Base


@pytest.fixture(autouse=True)
def disable_read_isolation(monkeypatch: pytest.MonkeyPatch) -> None:
    """SQLite has no REPEATABLE READ level; use the driver default."""
    monkeypatch.setattr(settings, "read_isolation_level", "")


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the catalog schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a session on the in-memory database."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session on a database holding the sample catalog."""
    await seed_catalog(session, clear_existing=False)
    session.expunge_all()
    return session


@pytest.fixture
def statements(engine: AsyncEngine) -> list[str]:
    """Record every SQL statement sent to the database."""
    recorded: list[str] = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        recorded.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", before_cursor_execute)
    yield recorded
    event.remove(engine.sync_engine, "before_cursor_execute", before_cursor_execute)


@pytest.fixture
def add_product(session: AsyncSession):
    """Insert a product with an optional category and variants."""

    async def _add_product(
        code: str,
        price: str,
        category: str | None = None,
        variant_prices: list[str] | None = None,
    ) -> Product:
        product = Product(code=code, price=Decimal(price))
        if category is not None:
            product.category = Category(name=category)
        product.variants = [
            Variant(name=f"{code} v{i}", sku=f"SKU-{code}-{i}", price=Decimal(p))
            for i, p in enumerate(variant_prices or [])
        ]
        session.add(product)
        await session.flush()
        return product

    return _add_product
