"""Tests for the static city table."""

import pytest

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


class TestCityTable:
    """Tests for the shipped table contents."""

    def test_codes_in_priority_order(self) -> None:
        """Postal matching order is part of the data."""
        codes = [city.code for city in CITY_TABLE]
        assert codes == ["NGP", "PUN", "MUM", "AUR", "NSK", "BLR", "HBL", "HYD", "DEL", "GEN"]

    def test_catch_all_is_last_and_unique(self) -> None:
        catch_alls = [city for city in CITY_TABLE if city.is_catch_all]
        assert catch_alls == [CITY_TABLE[-1]]
        assert GENERIC_CITY.code == GENERIC_CITY_CODE

    def test_specific_cities_excludes_catch_all(self) -> None:
        assert GENERIC_CITY not in specific_cities()
        assert len(specific_cities()) == len(CITY_TABLE) - 1

    def test_codes_are_three_uppercase_letters(self) -> None:
        for city in CITY_TABLE:
            assert len(city.code) == 3
            assert city.code.isalpha() and city.code.isupper()

    def test_aliases_point_to_known_cities(self) -> None:
        codes = {city.code for city in CITY_TABLE}
        for alias, code in CITY_ALIASES:
            assert alias == alias.lower()
            assert code in codes


class TestCityRecord:
    """Tests for CityRecord postal matching."""

    def test_matches_prefix(self) -> None:
        nagpur = get_city("NGP")
        assert nagpur.matches_postal_code("440001")
        assert nagpur.matches_postal_code(" 440010 ")
        assert not nagpur.matches_postal_code("411001")

    def test_missing_code_does_not_match_specific_city(self) -> None:
        assert not get_city("PUN").matches_postal_code(None)
        assert not get_city("PUN").matches_postal_code("")

    def test_catch_all_matches_everything(self) -> None:
        assert GENERIC_CITY.matches_postal_code("999999")
        assert GENERIC_CITY.matches_postal_code(None)


class TestGetCity:
    def test_known_code(self) -> None:
        assert get_city("HYD").display_name == "Hyderabad"

    def test_unknown_code_falls_back_to_generic(self) -> None:
        assert get_city("XYZ") is GENERIC_CITY

    def test_city_center(self) -> None:
        assert city_center("NGP") == (21.1458, 79.0882)
        assert city_center("XYZ") == (20.5937, 78.9629)


class TestValidateCityTable:
    """Tests for table invariant checks."""

    def _city(self, code: str, *prefixes: str) -> CityRecord:
        return CityRecord(code, code.title(), "XX", 0.0, 0.0, prefixes)

    def test_accepts_shipped_table(self) -> None:
        validate_city_table(CITY_TABLE)

    def test_rejects_empty_table(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            validate_city_table([])

    def test_rejects_duplicate_codes(self) -> None:
        table = [self._city("AAA", "1"), self._city("AAA", "2"), self._city("GEN")]
        with pytest.raises(ValueError, match="Duplicate city codes: AAA"):
            validate_city_table(table)

    def test_rejects_missing_catch_all(self) -> None:
        with pytest.raises(ValueError, match="catch-all"):
            validate_city_table([self._city("AAA", "1"), self._city("BBB", "2")])

    def test_rejects_catch_all_not_last(self) -> None:
        with pytest.raises(ValueError, match="catch-all"):
            validate_city_table([self._city("GEN"), self._city("AAA", "1")])

    def test_rejects_two_catch_alls(self) -> None:
        with pytest.raises(ValueError, match="catch-all"):
            validate_city_table([self._city("AAA", "1"), self._city("XXX"), self._city("GEN")])
