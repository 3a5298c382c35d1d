"""Shared fixtures and settings for tests."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime
from pathlib import Path

import pytest
import pytest_asyncio

# Settings are read at import time; point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_LEVEL", "warning")

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from swiftwash.db import create_session_maker, engine_options, init_models  # noqa: E402
from swiftwash.models.address import UserAddress  # noqa: E402
from swiftwash.utils.retry import ConflictRetryConfig  # noqa: E402

AddAddress = Callable[..., Awaitable[UserAddress]]


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """SQLite database file unique to the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'swiftwash.db'}"


@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Engine with all tables created."""
    engine = create_async_engine(database_url, **engine_options(database_url))
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return create_session_maker(engine)


@pytest_asyncio.fixture
async def session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    """Session for arranging data and running services."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def fast_retry() -> ConflictRetryConfig:
    """Generous attempts with tiny waits so contention tests finish quickly."""
    return ConflictRetryConfig(max_attempts=200, multiplier=0.001, max_wait=0.02)


@pytest.fixture
def add_address(session_maker: async_sessionmaker[AsyncSession]) -> AddAddress:
    """Factory that stores an address for a user."""

    async def _add(
        user_id: str,
        *,
        postal_code: str | None = None,
        city_name: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
        created_at: datetime | None = None,
    ) -> UserAddress:
        address = UserAddress(
            user_id=user_id,
            postal_code=postal_code,
            city_name=city_name,
            latitude=latitude,
            longitude=longitude,
        )
        if created_at is not None:
            address.created_at = created_at
        async with session_maker() as session:
            session.add(address)
            await session.commit()
        return address

    return _add
