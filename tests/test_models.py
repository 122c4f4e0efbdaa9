"""Tests for domain models."""

import dataclasses

import pytest

from vies_parser.models import SUPPORTED_COUNTRY_CODES, CountryCode, ParsedAddress


class TestParsedAddress:
    """Tests for ParsedAddress."""

    def test_zero_value(self) -> None:
        parsed = ParsedAddress()
        assert parsed.street == ""
        assert parsed.city == ""
        assert parsed.zip == ""
        assert parsed.is_empty

    def test_not_empty_with_any_field(self) -> None:
        assert not ParsedAddress(zip="1000").is_empty
        assert not ParsedAddress(street="Ilica 1").is_empty

    def test_frozen(self) -> None:
        parsed = ParsedAddress(street="Hoofdstraat 1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            parsed.street = "Other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ParsedAddress("a", "b", "c") == ParsedAddress(street="a", city="b", zip="c")


class TestCountryCode:
    """Tests for CountryCode and the supported set."""

    def test_sixteen_supported_codes(self) -> None:
        assert len(SUPPORTED_COUNTRY_CODES) == 16
        assert set(SUPPORTED_COUNTRY_CODES) == {
            "CZ", "SK", "NL", "BE", "FR", "PT", "IT", "FI",
            "RO", "SI", "AT", "PL", "HR", "EL", "DK", "EE",
        }

    def test_greece_uses_vies_code(self) -> None:
        assert "EL" in SUPPORTED_COUNTRY_CODES
        assert "GR" not in SUPPORTED_COUNTRY_CODES

    def test_str_enum(self) -> None:
        assert CountryCode("NL") is CountryCode.NL
        assert CountryCode.NL == "NL"

    def test_supported_codes_are_immutable(self) -> None:
        assert isinstance(SUPPORTED_COUNTRY_CODES, tuple)
