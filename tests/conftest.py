"""Pytest configuration for all tests."""

import os

# Must be set before any tasklist module reads the settings
os.environ.setdefault("TASKLIST_ENVIRONMENT", "testing")
os.environ.setdefault("TASKLIST_PASSWORD_HASH_COST", "1")
os.environ.setdefault("TASKLIST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TASKLIST_SECRET_KEY", "test-secret-key-not-for-production")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tasklist.infrastructure.persistence import models  # noqa: F401
from tasklist.infrastructure.persistence.database import Base

TEST_PASSWORD = "12345678"


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from tasklist.infrastructure.api.app import app
    from tasklist.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
def signup(client: AsyncClient):
    """Sign up users through the API.

    The returned coroutine function gives ``(user_id, access_token, refresh_token)``.
    """

    async def _signup(email: str, password: str = TEST_PASSWORD):
        response = await client.post("/users", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return (
            response.json()["_id"],
            response.headers["x-access-token"],
            response.headers["x-refresh-token"],
        )

    return _signup
