"""API schemas for order ID and geo endpoints."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from swiftwash.models.order_id_generation import OrderIdGeneration
from swiftwash.services.geo.cities import CityRecord
from swiftwash.services.geo.resolver import Address, ResolvedLocation
from swiftwash.services.order_ids.composer import OrderIdComponents
from swiftwash.services.order_ids.order_id_service import GeneratedOrderId


def _serialize_utc(dt: datetime) -> str:
    """Serialize datetime as UTC ISO string (naive values are assumed UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat()


# =============================================================================
# Request Schemas
# =============================================================================


class GenerateOrderIdRequest(BaseModel):
    """Request to generate a smart order ID."""

    user_id: str = Field(min_length=1)
    order_type: str = Field(min_length=1)
    is_urgent: bool = False
    is_referred: bool = False
    is_student: bool = False


class ResolveLocationRequest(BaseModel):
    """Address fields to resolve to a city and direction."""

    postal_code: str | None = None
    city_name: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    def to_address(self) -> Address:
        return Address(
            postal_code=self.postal_code,
            city_name=self.city_name,
            latitude=self.latitude,
            longitude=self.longitude,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class OrderIdComponentsResponse(BaseModel):
    """Decomposed order ID."""

    city_code: str
    direction: str
    postal_prefix: str
    type_code: str
    sequence_number: str
    flags: list[str]

    @classmethod
    def from_components(cls, components: OrderIdComponents) -> "OrderIdComponentsResponse":
        """Create response from composer components."""
        return cls.model_validate(components.to_dict())


class GenerateOrderIdResponse(BaseModel):
    """Generated order ID with its components."""

    success: bool = True
    order_id: str
    components: OrderIdComponentsResponse
    generated_at: datetime

    @field_serializer("generated_at")
    def serialize_generated_at(self, dt: datetime) -> str:
        """Serialize datetime in UTC."""
        return _serialize_utc(dt)

    @classmethod
    def from_result(cls, result: GeneratedOrderId) -> "GenerateOrderIdResponse":
        """Create response from a generation result."""
        return cls(
            order_id=result.order_id,
            components=OrderIdComponentsResponse.from_components(result.components),
            generated_at=result.generated_at,
        )


class OrderIdRecordResponse(BaseModel):
    """Stored audit record of a generated order ID."""

    id: str
    order_id: str
    user_id: str
    generated_at: datetime
    components: OrderIdComponentsResponse
    location: dict[str, Any]

    @field_serializer("generated_at")
    def serialize_generated_at(self, dt: datetime) -> str:
        """Serialize datetime in UTC."""
        return _serialize_utc(dt)

    @classmethod
    def from_model(cls, entry: OrderIdGeneration) -> "OrderIdRecordResponse":
        """Create response from OrderIdGeneration model."""
        return cls(
            id=entry.id,
            order_id=entry.order_id,
            user_id=entry.user_id,
            generated_at=entry.generated_at,
            components=OrderIdComponentsResponse.model_validate(entry.components),
            location=entry.location,
        )


class CityResponse(BaseModel):
    """Service city as listed in the city table."""

    code: str
    display_name: str
    state: str
    center_latitude: float
    center_longitude: float
    postal_prefixes: list[str]
    is_catch_all: bool

    @classmethod
    def from_record(cls, city: CityRecord) -> "CityResponse":
        """Create response from a city record."""
        return cls(
            code=city.code,
            display_name=city.display_name,
            state=city.state,
            center_latitude=city.center_latitude,
            center_longitude=city.center_longitude,
            postal_prefixes=list(city.postal_prefixes),
            is_catch_all=city.is_catch_all,
        )


class CityListResponse(BaseModel):
    """City table in matching priority order."""

    cities: list[CityResponse]


class ResolvedLocationResponse(BaseModel):
    """City and direction resolved for an address."""

    city_code: str
    city_name: str
    direction: str

    @classmethod
    def from_location(cls, location: ResolvedLocation) -> "ResolvedLocationResponse":
        """Create response from a resolved location."""
        return cls(
            city_code=location.city.code,
            city_name=location.city.display_name,
            direction=str(location.direction),
        )
