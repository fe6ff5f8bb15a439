"""Tests for health check endpoints."""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.infrastructure.database import get_session
from app.main import app


@pytest.fixture
def session() -> MagicMock:
    """Create a mock database session."""
    session = MagicMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def client(session: MagicMock) -> Generator[TestClient, None, None]:
    """Create test client with the database session overridden."""

    async def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "catalog-api"
    assert "version" in data


def test_readiness_check(client: TestClient, session: MagicMock) -> None:
    """Test readiness endpoint queries the database."""
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}
    session.execute.assert_awaited_once()


def test_readiness_check_database_down(client: TestClient, session: MagicMock) -> None:
    """Test readiness endpoint reports an unreachable database."""
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))

    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}
