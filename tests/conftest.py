"""Shared database fixtures.

Each test gets its own SQLite file so concurrent sessions (seeding)
behave like separate connections to a real store.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.catalog import models  # noqa: F401  registers tables on Base.metadata
from app.catalog.schemas import ProductCreate
from app.catalog.service import CatalogService
from app.infrastructure.database import Base


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a file-backed SQLite engine with the catalog schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session for the test."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def service(session: AsyncSession) -> CatalogService:
    """Create a catalog service on the test session."""
    return CatalogService(session)


@pytest.fixture
def sweatshirt() -> ProductCreate:
    """Sample product with two images."""
    return ProductCreate(
        title="Men's Chill Crew Neck Sweatshirt",
        price=75,
        description="Heavyweight exterior, soft fleece interior.",
        stock=7,
        sizes=["XS", "S", "M"],
        gender="men",
        tags=["sweatshirt"],
        images=["sweatshirt-front.jpg", "sweatshirt-back.jpg"],
    )
