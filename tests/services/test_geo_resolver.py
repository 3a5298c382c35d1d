"""Tests for address to city and direction resolution."""

import math

import pytest

from swiftwash.models.enums import Direction
from swiftwash.services.geo import resolver
from swiftwash.services.geo.cities import CITY_TABLE, GENERIC_CITY, CityRecord, get_city
from swiftwash.services.geo.resolver import (
    Address,
    direction_from,
    haversine_km,
    match_city_name,
    match_postal_code,
    nearest_city,
    resolve_city,
    resolve_city_code,
    resolve_location,
)


class TestHaversine:
    def test_zero_distance(self) -> None:
        assert haversine_km(21.1458, 79.0882, 21.1458, 79.0882) == 0.0

    def test_one_degree_of_latitude(self) -> None:
        assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.01)

    def test_mumbai_to_pune(self) -> None:
        mumbai, pune = get_city("MUM"), get_city("PUN")
        distance = haversine_km(
            mumbai.center_latitude, mumbai.center_longitude, pune.center_latitude, pune.center_longitude
        )
        assert 115 < distance < 125

    def test_antipode_of_city_center(self) -> None:
        distance = haversine_km(20.5937, 78.9629, -20.5937, -101.0371)
        assert distance == pytest.approx(math.pi * 6371.0, rel=1e-6)


class TestResolveCity:
    """Tests for the postal, name, coordinates, generic precedence."""

    def test_postal_prefix(self) -> None:
        assert resolve_city_code(postal_code="440001") == "NGP"
        assert resolve_city_code(postal_code="560034") == "BLR"
        assert resolve_city_code(postal_code="110092") == "DEL"

    def test_postal_beats_city_name(self) -> None:
        assert resolve_city_code(postal_code="411045", city_name="Mumbai") == "PUN"

    def test_postal_beats_coordinates(self) -> None:
        # Coordinates are in Delhi, postal code in Hyderabad
        assert resolve_city_code(postal_code="500081", latitude=28.61, longitude=77.21) == "HYD"

    def test_city_name_alias(self) -> None:
        assert resolve_city_code(city_name="Bengaluru Urban") == "BLR"
        assert resolve_city_code(city_name="NEW DELHI") == "DEL"
        assert resolve_city_code(city_name="Greater Hyderabad") == "HYD"

    def test_city_name_beats_coordinates(self) -> None:
        assert resolve_city_code(city_name="Nagpur", latitude=18.52, longitude=73.86) == "NGP"

    def test_unknown_postal_falls_through_to_coordinates(self) -> None:
        """An unmatched postal code still resolves by coordinates."""
        assert resolve_city_code(postal_code="999999", latitude=19.08, longitude=72.88) == "MUM"

    def test_coordinates_pick_nearest_center(self) -> None:
        assert resolve_city_code(latitude=28.61, longitude=77.21) == "DEL"
        assert resolve_city_code(latitude=15.35, longitude=75.14) == "HBL"

    def test_coordinates_near_generic_center(self) -> None:
        """The catch-all center takes part in the nearest-city search."""
        assert resolve_city_code(latitude=20.6, longitude=78.9) == "GEN"

    def test_nothing_usable_is_generic(self) -> None:
        assert resolve_city() is GENERIC_CITY
        assert resolve_city(postal_code="999999", city_name="Atlantis") is GENERIC_CITY

    def test_antipode_coordinates_resolve(self) -> None:
        """Points opposite a city center on the globe still resolve."""
        codes = {city.code for city in CITY_TABLE}
        assert resolve_city_code(None, None, -20.5937, -101.0371) in codes
        location = resolve_location(Address(latitude=-20.5937, longitude=-101.0371))
        assert location.city_code in codes

    def test_half_coordinates_ignored(self) -> None:
        assert resolve_city(latitude=19.08) is GENERIC_CITY

    def test_match_helpers(self) -> None:
        assert match_postal_code("431001") == get_city("AUR")
        assert match_postal_code("999999") is None
        assert match_postal_code(None) is None
        assert match_city_name("") is None
        assert match_city_name("Pune Cantonment") == get_city("PUN")


class TestNearestCity:
    def test_center_resolves_to_itself(self) -> None:
        for code in ("NGP", "PUN", "MUM", "BLR", "DEL"):
            city = get_city(code)
            assert nearest_city(city.center_latitude, city.center_longitude) == city

    def test_tie_goes_to_first_listed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = CityRecord("AAA", "First", "XX", 10.0, 10.0, ("1",))
        second = CityRecord("BBB", "Second", "XX", 10.0, 10.0, ("2",))
        monkeypatch.setattr(resolver, "CITY_TABLE", (first, second))

        assert nearest_city(11.0, 11.0) is first


class TestDirectionFrom:
    """Tests for the 8-sector compass bucketing."""

    @pytest.mark.parametrize(
        ("d_lat", "d_lng", "expected"),
        [
            (1.0, 0.0, Direction.N),
            (1.0, 1.0, Direction.NE),
            (0.0, 1.0, Direction.E),
            (-1.0, 1.0, Direction.SE),
            (-1.0, 0.0, Direction.S),
            (-1.0, -1.0, Direction.SW),
            (0.0, -1.0, Direction.W),
            (1.0, -1.0, Direction.NW),
        ],
    )
    def test_cardinal_and_intercardinal(self, d_lat: float, d_lng: float, expected: Direction) -> None:
        assert direction_from(d_lat, d_lng, 0.0, 0.0) == expected

    def test_center_is_north(self) -> None:
        assert direction_from(21.1458, 79.0882, 21.1458, 79.0882) == Direction.N

    def test_slightly_west_of_north_is_north(self) -> None:
        assert direction_from(1.0, -0.1, 0.0, 0.0) == Direction.N

    def test_sector_boundary(self) -> None:
        below = math.radians(22.4)
        above = math.radians(22.6)
        assert direction_from(math.cos(below), math.sin(below), 0.0, 0.0) == Direction.N
        assert direction_from(math.cos(above), math.sin(above), 0.0, 0.0) == Direction.NE

    @pytest.mark.parametrize("bearing", [10, 60, 100, 170, 200, 250, 290, 340])
    def test_independent_of_distance(self, bearing: int) -> None:
        """Scaling the offset from the center never changes the sector."""
        center = get_city("NGP")
        angle = math.radians(bearing)
        directions = {
            direction_from(
                center.center_latitude + scale * math.cos(angle),
                center.center_longitude + scale * math.sin(angle),
                center.center_latitude,
                center.center_longitude,
            )
            for scale in (0.001, 0.5, 3.0, 1000.0)
        }
        assert len(directions) == 1


class TestResolveLocation:
    def test_nagpur_address(self) -> None:
        location = resolve_location(Address(postal_code="440001", latitude=21.20, longitude=79.10))
        assert location.city_code == "NGP"
        assert location.direction == Direction.N

    def test_direction_relative_to_resolved_city(self) -> None:
        # South-west of the Pune center
        location = resolve_location(Address(postal_code="411001", latitude=18.45, longitude=73.78))
        assert location.city_code == "PUN"
        assert location.direction == Direction.SW

    def test_missing_coordinates_default_north(self) -> None:
        location = resolve_location(Address(postal_code="560001"))
        assert location.city_code == "BLR"
        assert location.direction == Direction.N

    def test_empty_address_is_generic_north(self) -> None:
        location = resolve_location(Address())
        assert location.city is GENERIC_CITY
        assert location.direction == Direction.N
