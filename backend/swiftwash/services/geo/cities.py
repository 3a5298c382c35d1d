"""Static table of service cities.

The table is ordered and the order is part of the data: postal codes are
matched against records top to bottom and the first match wins. The last
record is the catch-all used when nothing more specific applies.
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class CityRecord:
    """A service city with its postal prefixes and reference center."""

    code: str
    display_name: str
    state: str
    center_latitude: float
    center_longitude: float
    # Empty tuple marks the catch-all record
    postal_prefixes: tuple[str, ...] = ()

    @property
    def is_catch_all(self) -> bool:
        return not self.postal_prefixes

    def matches_postal_code(self, postal_code: str | None) -> bool:
        """Check whether a postal code belongs to this city.

        The catch-all record matches everything, including a missing code.
        """
        if self.is_catch_all:
            return True
        if not postal_code:
            return False
        return postal_code.strip().startswith(self.postal_prefixes)


GENERIC_CITY_CODE = "GEN"

CITY_TABLE: tuple[CityRecord, ...] = (
    # Maharashtra
    CityRecord("NGP", "Nagpur", "MH", 21.1458, 79.0882, ("440",)),
    CityRecord("PUN", "Pune", "MH", 18.5204, 73.8567, ("411",)),
    CityRecord("MUM", "Mumbai", "MH", 19.0760, 72.8777, ("400",)),
    CityRecord("AUR", "Aurangabad", "MH", 19.8762, 75.3433, ("431",)),
    CityRecord("NSK", "Nashik", "MH", 19.9975, 73.7898, ("422",)),
    # Karnataka
    CityRecord("BLR", "Bangalore", "KA", 12.9716, 77.5946, ("560",)),
    CityRecord("HBL", "Hubli", "KA", 15.3647, 75.1240, ("580",)),
    # Telangana
    CityRecord("HYD", "Hyderabad", "TS", 17.3850, 78.4867, ("500",)),
    # Delhi NCR
    CityRecord("DEL", "Delhi", "DL", 28.7041, 77.1025, ("110",)),
    # Default for unknown areas, must stay last
    CityRecord(GENERIC_CITY_CODE, "General", "IN", 20.5937, 78.9629),
)

# Free-text city name fragments, checked in order (case-insensitive substring)
CITY_ALIASES: tuple[tuple[str, str], ...] = (
    ("nagpur", "NGP"),
    ("pune", "PUN"),
    ("mumbai", "MUM"),
    ("bangalore", "BLR"),
    ("bengaluru", "BLR"),
    ("hyderabad", "HYD"),
    ("delhi", "DEL"),
)


def validate_city_table(table: Iterable[CityRecord]) -> None:
    """Check the ordering invariants of a city table.

    Raises:
        ValueError: If codes repeat, or the table does not end with exactly
            one catch-all record.
    """
    records = list(table)
    if not records:
        raise ValueError("City table is empty")

    codes = [record.code for record in records]
    duplicates = sorted({code for code in codes if codes.count(code) > 1})
    if duplicates:
        raise ValueError(f"Duplicate city codes: {', '.join(duplicates)}")

    catch_all_positions = [i for i, record in enumerate(records) if record.is_catch_all]
    if catch_all_positions != [len(records) - 1]:
        raise ValueError("City table must end with exactly one catch-all record")


validate_city_table(CITY_TABLE)

_CITIES_BY_CODE: dict[str, CityRecord] = {record.code: record for record in CITY_TABLE}

GENERIC_CITY: CityRecord = CITY_TABLE[-1]


def specific_cities() -> tuple[CityRecord, ...]:
    """All records except the trailing catch-all, in priority order."""
    return CITY_TABLE[:-1]


def get_city(code: str) -> CityRecord:
    """Look up a city by code, falling back to the catch-all record."""
    return _CITIES_BY_CODE.get(code, GENERIC_CITY)


def city_center(code: str) -> tuple[float, float]:
    """(latitude, longitude) of a city's reference center."""
    city = get_city(code)
    return city.center_latitude, city.center_longitude
