"""Shared fixtures for API tests.

Services are replaced with mocks so these tests cover HTTP mapping only.
"""

from collections.abc import Generator
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.catalog import get_catalog_service
from app.api.categories import get_category_service
from app.catalog.service import CatalogService, CategoryService
from app.catalog.views import CategoryView, ProductView, VariantView
from app.infrastructure.database import get_session
from app.main import app


@pytest.fixture
def mock_catalog_service() -> MagicMock:
    """Create a mock catalog service."""
    service = MagicMock(spec=CatalogService)
    service.list_products = AsyncMock()
    service.get_product_detail = AsyncMock()
    return service


@pytest.fixture
def mock_category_service() -> MagicMock:
    """Create a mock category service."""
    service = MagicMock(spec=CategoryService)
    service.list_categories = AsyncMock()
    service.create_category = AsyncMock()
    return service


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock database session."""
    session = MagicMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def client(
    mock_catalog_service: MagicMock,
    mock_category_service: MagicMock,
    mock_session: MagicMock,
) -> Generator[TestClient, None, None]:
    """Create test client with services and session overridden."""

    async def override_session():
        yield mock_session

    app.dependency_overrides[get_catalog_service] = lambda: mock_catalog_service
    app.dependency_overrides[get_category_service] = lambda: mock_category_service
    app.dependency_overrides[get_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product() -> ProductView:
    """Create a sample product view."""
    return ProductView(
        code="PROD001",
        price=Decimal("10.99"),
        category=CategoryView(code="0f8fad5b-d9cb-469f-a165-70867728950e", name="Clothing"),
        variants=[
            VariantView(id=1, product_id=1, name="Variant A", sku="SKU001A", price=Decimal("11.99")),
            VariantView(id=2, product_id=1, name="Variant B", sku="SKU001B", price=Decimal("10.99")),
        ],
    )
