"""Database package with engine and session management."""

from swiftwash.db.session import (
    async_session_maker,
    create_session_maker,
    dispose_engine,
    engine,
    engine_options,
    get_session,
    init_models,
)

__all__ = [
    "async_session_maker",
    "create_session_maker",
    "dispose_engine",
    "engine",
    "engine_options",
    "get_session",
    "init_models",
]
