"""
Backend Learning API — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (fresh app, API client, fake
       database clients) so no test needs a running server or database.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── app: Fresh FastAPI instance from create_app()
    ├── test_client: HTTPX AsyncClient bound to `app` via ASGITransport
    ├── fake_db_client: AsyncMock DatabaseClient reporting 3 users / 5 posts
    └── use_db_client: Installs a DatabaseClient on `app` via dependency_overrides
"""

import os
import tempfile
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
# Why: Keeps tests away from a real database and from a developer's .env
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="learning_api_test_"), "test.db"
)
os.environ["NODE_ENV"] = "test"
os.environ["CORS_ORIGINS"] = "*"
os.environ["LOG_LEVEL"] = "WARNING"

from learning_api.config import Settings  # noqa: E402
from learning_api.dependencies import get_database_client  # noqa: E402
from learning_api.main import create_app  # noqa: E402
from learning_api.services.db_client import DatabaseClient  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app():
    """
    A freshly built application.

    Why fresh: tests add throwaway routes and dependency overrides; neither
    may leak into the next test.
    """
    return create_app(Settings())


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fake_db_client():
    """
    A DatabaseClient stand-in for a reachable database with 3 users and 5 posts.

    Tests rewire `connect` / `count` side effects to simulate failures.
    """
    client = AsyncMock(spec=DatabaseClient)
    client.connect.return_value = None
    client.count.side_effect = lambda entity: {"user": 3, "post": 5}[entity]
    return client


@pytest.fixture
def use_db_client(app):
    """
    Returns a function that makes `app` hand out the given DatabaseClient.

    Usage:
        use_db_client(fake_db_client)
    """

    def install(client: DatabaseClient) -> None:
        app.dependency_overrides[get_database_client] = lambda: client

    yield install
    app.dependency_overrides.clear()
