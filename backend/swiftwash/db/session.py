"""Database engine and session configuration."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

# Register all models with SQLModel metadata
import swiftwash.models  # noqa: F401
from swiftwash.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """Engine keyword arguments suitable for the given database URL.

    SQLite (tests, local tooling) uses SQLAlchemy's default pool; server
    databases get an explicit pool.
    """
    options: dict[str, Any] = {
        "echo": False,  # SQL logging controlled via structlog configuration
        "future": True,
        "pool_pre_ping": True,  # Verify connections before use
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=5,
            max_overflow=10,
            pool_recycle=300,  # Recycle connections after 5 minutes
        )
    return options


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

async_session_maker = create_session_maker(engine)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Dependency that provides an async database session."""
    async with async_session_maker() as session:
        yield session


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose of the engine and release all connections.

    Should be called during application shutdown.
    """
    await engine.dispose()
