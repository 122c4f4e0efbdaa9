"""Tests for ViesAddressFactory and round trips through the parser."""

import pytest

from vies_parser.generators.address import (
    LOCALE_MAP,
    RawAddress,
    ViesAddressFactory,
    _COUNTRY_LAYOUTS,
)
from vies_parser.models.enums import CountryCode
from vies_parser.parser import parse_address

COUNTRIES_WITH_RULES = [
    CountryCode.NL,
    CountryCode.BE,
    CountryCode.FR,
    CountryCode.FI,
    CountryCode.AT,
    CountryCode.PL,
    CountryCode.DK,
    CountryCode.SI,
    CountryCode.HR,
    CountryCode.SK,
    CountryCode.CZ,
    CountryCode.EL,
]


class TestViesAddressFactory:
    """Tests for ViesAddressFactory."""

    def test_locale_for_every_country(self) -> None:
        assert set(LOCALE_MAP) == set(CountryCode)

    def test_layout_overrides_are_known_countries(self) -> None:
        assert set(_COUNTRY_LAYOUTS) <= set(CountryCode)

    def test_generate_returns_raw_address(self, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate()
        assert isinstance(raw, RawAddress)
        assert raw.country in CountryCode
        assert raw.text

    def test_generate_specific_country(self, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate("NL")
        assert raw.country is CountryCode.NL

    def test_invalid_country(self, seed: int) -> None:
        with pytest.raises(ValueError):
            ViesAddressFactory(seed=seed).generate("XX")

    def test_postal_line_layout(self, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate(CountryCode.FR)
        assert raw.text.count("\n") == 1

    @pytest.mark.parametrize("country", [CountryCode.SI, CountryCode.HR])
    def test_comma_layout(self, country: CountryCode, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate(country)
        assert "\n" not in raw.text
        assert raw.text.count(",") == 1

    def test_greek_layout(self, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate(CountryCode.EL)
        assert " - " in raw.text.split("\n")[1]

    def test_text_is_upper_case(self, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate(CountryCode.AT)
        assert raw.text == raw.text.upper()

    def test_reproducible_with_seed(self, seed: int) -> None:
        first = [raw.text for raw in ViesAddressFactory(seed=seed).generate_all()]
        second = [raw.text for raw in ViesAddressFactory(seed=seed).generate_all()]
        assert first == second

    def test_generate_all_covers_every_country(self, seed: int) -> None:
        addresses = list(ViesAddressFactory(seed=seed).generate_all(per_country=2))
        assert len(addresses) == 2 * len(CountryCode)
        assert {raw.country for raw in addresses} == set(CountryCode)


class TestGeneratedAddressesParse:
    """Generated addresses parse into non-empty fields."""

    @pytest.mark.parametrize("country", COUNTRIES_WITH_RULES, ids=lambda c: c.value)
    def test_fields_not_empty(self, country: CountryCode, seed: int) -> None:
        factory = ViesAddressFactory(seed=seed)
        for _ in range(10):
            raw = factory.generate(country)
            parsed, error = parse_address(raw.country.value, raw.text)
            assert error is None, raw.text
            assert parsed.street, raw.text
            assert parsed.zip, raw.text
            assert parsed.city, raw.text

    @pytest.mark.parametrize(
        "country",
        [CountryCode.PT, CountryCode.IT, CountryCode.RO, CountryCode.EE],
        ids=lambda c: c.value,
    )
    def test_countries_without_rules_are_empty(self, country: CountryCode, seed: int) -> None:
        raw = ViesAddressFactory(seed=seed).generate(country)
        parsed, error = parse_address(raw.country.value, raw.text)
        assert error is None
        assert parsed.is_empty

    def test_padding_does_not_change_result(self, seed: int) -> None:
        for raw in ViesAddressFactory(seed=seed).generate_all():
            padded = parse_address(raw.country.value, f"  {raw.text}\n ")
            assert padded == parse_address(raw.country.value, raw.text)
