"""Custom SQLAlchemy types for the application."""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import TypeDecorator
from ulid import ULID


class ULIDType(TypeDecorator[str]):
    """SQLAlchemy type that stores ULID as UUID.

    - Database: UUID on PostgreSQL, CHAR(32) elsewhere
    - Python: ULID object or string
    - API: 26-character string (via Pydantic serialization)
    """

    impl = Uuid
    cache_ok = True

    def process_bind_param(self, value: str | ULID | None, dialect: Any) -> UUID | None:
        """Convert ULID string/object to UUID for storage."""
        if value is None:
            return None
        if isinstance(value, str):
            value = ULID.from_str(value)
        if isinstance(value, ULID):
            return value.to_uuid()
        raise ValueError(f"Cannot convert {type(value)} to ULID")

    def process_result_value(self, value: UUID | None, dialect: Any) -> str | None:
        """Convert UUID back to ULID string."""
        if value is None:
            return None
        return str(ULID.from_uuid(value))


# JSONB on PostgreSQL, plain JSON on SQLite (tests, local tooling)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")
