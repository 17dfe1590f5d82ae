"""Shared fixtures for API tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.infrastructure.config import settings
from app.infrastructure.database import get_session, get_session_factory
from app.main import app


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async client whose requests use the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def products_url() -> str:
    """Products collection URL under the global prefix."""
    return f"{settings.api_prefix}/products"


@pytest.fixture
def product_payload() -> dict:
    """Valid create payload."""
    return {
        "title": "Women's Cropped Puffer Jacket",
        "price": 225,
        "description": "Cropped silhouette for modern style.",
        "stock": 85,
        "sizes": ["XS", "S", "M"],
        "gender": "women",
        "tags": ["jacket"],
        "images": ["puffer-front.jpg", "puffer-back.jpg"],
    }
