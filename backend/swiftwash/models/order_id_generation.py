"""Audit trail of generated order IDs."""

from datetime import datetime
from typing import Any

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel
from ulid import ULID

from swiftwash.models.types import JSONDocument, ULIDType
from swiftwash.utils.datetime_utils import utc_now


def _ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


class OrderIdGeneration(SQLModel, table=True):
    """One row per issued order ID (append-only)."""

    __tablename__ = "order_id_generations"

    id: str = Field(
        default_factory=_ulid,
        max_length=26,
        sa_column=Column(ULIDType, primary_key=True),
    )
    # Not unique: IDs carry no date, so the same ID recurs on later days
    order_id: str = Field(index=True)
    user_id: str = Field(index=True)
    generated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))

    # {city_code, direction, postal_prefix, type_code, sequence_number, flags}
    components: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSONDocument, nullable=False))
    # {latitude, longitude, postal_code, city_name} of the address used
    location: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSONDocument, nullable=False))
