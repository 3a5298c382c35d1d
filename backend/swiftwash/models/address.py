"""Customer address model."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from swiftwash.utils.datetime_utils import utc_now


class UserAddress(SQLModel, table=True):
    """Saved delivery address of a customer.

    Only the fields read by order ID generation are modelled; the mobile
    apps own the rest of the address book.
    """

    __tablename__ = "user_addresses"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    postal_code: str | None = None
    city_name: str | None = None
    street: str | None = None
    landmark: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
