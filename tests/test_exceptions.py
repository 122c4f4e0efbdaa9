"""Tests for custom exception hierarchy."""

from vies_parser.exceptions import (
    ConfigurationError,
    InvalidOptionError,
    MissingAddressError,
    MissingCountryCodeError,
    UnsupportedCountryCodeError,
    ViesParserError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_vies_parser_error_is_exception(self) -> None:
        assert isinstance(ViesParserError("test"), Exception)

    def test_missing_country_code_is_vies_parser_error(self) -> None:
        assert isinstance(MissingCountryCodeError(), ViesParserError)

    def test_missing_address_is_vies_parser_error(self) -> None:
        assert isinstance(MissingAddressError(), ViesParserError)

    def test_unsupported_country_code_is_vies_parser_error(self) -> None:
        assert isinstance(UnsupportedCountryCodeError(), ViesParserError)

    def test_invalid_option_is_vies_parser_error(self) -> None:
        assert isinstance(InvalidOptionError(), ViesParserError)

    def test_configuration_error_is_vies_parser_error(self) -> None:
        assert isinstance(ConfigurationError("test"), ViesParserError)


class TestExceptionMessages:
    """Test message formatting."""

    def test_default_messages(self) -> None:
        assert str(MissingCountryCodeError()) == "missing country code"
        assert str(MissingAddressError()) == "missing address"
        assert str(UnsupportedCountryCodeError()) == "unsupported country code"
        assert str(InvalidOptionError()) == "invalid option"

    def test_message_with_detail(self) -> None:
        err = UnsupportedCountryCodeError("XX")
        assert str(err) == "unsupported country code: XX"
        assert err.detail == "XX"

    def test_detail_defaults_to_none(self) -> None:
        assert MissingAddressError().detail is None
