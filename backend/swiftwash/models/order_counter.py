"""Per-city, per-day order counter model."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from swiftwash.utils.datetime_utils import utc_now


class OrderCounter(SQLModel, table=True):
    """Daily sequence for order IDs of one city.

    Keyed by "{city_code}-{YYMMDD}". Rows are created lazily on the first
    allocation of the day and kept for audit. ``current_value`` doubles as
    the optimistic version: writers update only if it still holds the value
    they read.
    """

    __tablename__ = "order_counters"

    key: str = Field(primary_key=True, max_length=16)
    city_code: str = Field(max_length=3, index=True)
    date_key: str = Field(max_length=6, index=True)
    current_value: int = Field(default=0)
    last_updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
