"""Geo resolution: static city table and address-to-city/direction mapping."""

from swiftwash.services.geo.cities import (
    CITY_ALIASES,
    CITY_TABLE,
    GENERIC_CITY,
    GENERIC_CITY_CODE,
    CityRecord,
    city_center,
    get_city,
    specific_cities,
    validate_city_table,
)
from swiftwash.services.geo.resolver import (
    DEFAULT_DIRECTION,
    Address,
    ResolvedLocation,
    direction_from,
    haversine_km,
    nearest_city,
    resolve_city,
    resolve_city_code,
    resolve_location,
)

__all__ = [
    "CITY_ALIASES",
    "CITY_TABLE",
    "DEFAULT_DIRECTION",
    "GENERIC_CITY",
    "GENERIC_CITY_CODE",
    "Address",
    "CityRecord",
    "ResolvedLocation",
    "city_center",
    "direction_from",
    "get_city",
    "haversine_km",
    "nearest_city",
    "resolve_city",
    "resolve_city_code",
    "resolve_location",
    "specific_cities",
    "validate_city_table",
]
