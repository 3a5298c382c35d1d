"""Resolve an address to a service city and a compass direction.

Everything here is pure: no I/O, no shared state, never raises for
missing input. Unusable input degrades to the generic city and a
northern direction.
"""

import math
from dataclasses import dataclass

import structlog

from swiftwash.models.enums import Direction
from swiftwash.services.geo.cities import (
    CITY_ALIASES,
    CITY_TABLE,
    GENERIC_CITY,
    CityRecord,
    get_city,
    specific_cities,
)

logger = structlog.get_logger(__name__)

EARTH_RADIUS_KM = 6371.0

_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)
_SECTOR_DEGREES = 360.0 / len(_DIRECTIONS)

DEFAULT_DIRECTION = Direction.N


@dataclass(frozen=True)
class Address:
    """Location fields of a customer address used for resolution."""

    postal_code: str | None = None
    city_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class ResolvedLocation:
    """City and direction of an address."""

    city: CityRecord
    direction: Direction

    @property
    def city_code(self) -> str:
        return self.city.code


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push a past 1 near the antipode
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def nearest_city(latitude: float, longitude: float) -> CityRecord:
    """Return the city whose center is closest to the point.

    Every record takes part, the catch-all included. On equal distance the
    record listed first wins.
    """
    closest = CITY_TABLE[0]
    min_distance = math.inf

    for city in CITY_TABLE:
        distance = haversine_km(latitude, longitude, city.center_latitude, city.center_longitude)
        if distance < min_distance:
            min_distance = distance
            closest = city

    return closest


def match_postal_code(postal_code: str | None) -> CityRecord | None:
    """First specific city whose prefix matches the postal code."""
    if not postal_code:
        return None
    for city in specific_cities():
        if city.matches_postal_code(postal_code):
            return city
    return None


def match_city_name(city_name: str | None) -> CityRecord | None:
    """City whose alias occurs in the free-text city name."""
    if not city_name:
        return None
    lowered = city_name.lower()
    for alias, code in CITY_ALIASES:
        if alias in lowered:
            return get_city(code)
    return None


def resolve_city(
    postal_code: str | None = None,
    city_name: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> CityRecord:
    """Resolve address fields to a city record.

    Order: postal prefix, city name alias, nearest center by coordinates,
    generic city.
    """
    city = match_postal_code(postal_code)
    if city is not None:
        return city

    city = match_city_name(city_name)
    if city is not None:
        logger.debug("City resolved by name", city_name=city_name, city_code=city.code)
        return city

    if latitude is not None and longitude is not None:
        city = nearest_city(latitude, longitude)
        logger.debug(
            "City resolved by coordinates",
            latitude=latitude,
            longitude=longitude,
            city_code=city.code,
        )
        return city

    logger.debug("City not resolvable, using generic city", postal_code=postal_code, city_name=city_name)
    return GENERIC_CITY


def resolve_city_code(
    postal_code: str | None = None,
    city_name: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> str:
    """Resolve address fields to a 3-letter city code."""
    return resolve_city(postal_code, city_name, latitude, longitude).code


def direction_from(lat: float, lng: float, center_lat: float, center_lng: float) -> Direction:
    """Compass sector of a point relative to a center.

    Uses the planar bearing atan2(dLng, dLat), which is accurate enough at
    city scale. Sectors are 45 degrees wide with N centered on 0 degrees.
    A point exactly at the center is reported as N.
    """
    angle = math.degrees(math.atan2(lng - center_lng, lat - center_lat))
    if angle < 0:
        angle += 360

    sector = int((angle + _SECTOR_DEGREES / 2) // _SECTOR_DEGREES) % len(_DIRECTIONS)
    return _DIRECTIONS[sector]


def resolve_location(address: Address) -> ResolvedLocation:
    """Resolve an address to its city and direction from that city's center."""
    city = resolve_city(address.postal_code, address.city_name, address.latitude, address.longitude)

    if address.latitude is None or address.longitude is None:
        return ResolvedLocation(city=city, direction=DEFAULT_DIRECTION)

    direction = direction_from(address.latitude, address.longitude, city.center_latitude, city.center_longitude)
    return ResolvedLocation(city=city, direction=direction)
