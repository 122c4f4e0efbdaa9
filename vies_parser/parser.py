"""Entry points for parsing VIES addresses."""

from __future__ import annotations

from vies_parser.config import ParsingConfig
from vies_parser.exceptions import (
    MissingAddressError,
    MissingCountryCodeError,
    UnsupportedCountryCodeError,
    ViesParserError,
)
from vies_parser.logging import get_logger
from vies_parser.models.base import ParsedAddress
from vies_parser.models.enums import SUPPORTED_COUNTRY_CODES, CountryCode
from vies_parser.splitters import split_address
from vies_parser.transliteration import transliterate

logger = get_logger(__name__)

_DEFAULT_CONFIG = ParsingConfig()


def validate_input(country_code: str, address: str) -> tuple[CountryCode, str]:
    """Trim and check the inputs of a parse call.

    Parameters
    ----------
    country_code : str
        Two-letter VIES country code, e.g. ``"NL"``. Case-sensitive.
    address : str
        Raw address text as returned by VIES.

    Returns
    -------
    tuple[CountryCode, str]
        The country code and the trimmed address.

    Raises
    ------
    MissingCountryCodeError
        Country code is empty after trimming.
    MissingAddressError
        Address is empty after trimming.
    UnsupportedCountryCodeError
        Country code is not one of ``SUPPORTED_COUNTRY_CODES``.
    """
    country_code = country_code.strip()
    address = address.strip()

    if not country_code:
        raise MissingCountryCodeError()
    if not address:
        raise MissingAddressError()
    if country_code not in SUPPORTED_COUNTRY_CODES:
        raise UnsupportedCountryCodeError(country_code)

    return CountryCode(country_code), address


def must_parse_address(
    country_code: str,
    address: str,
    config: ParsingConfig | None = None,
) -> ParsedAddress:
    """Parse a VIES address, raising on invalid input.

    Parameters
    ----------
    country_code : str
        Two-letter VIES country code.
    address : str
        Raw address text, possibly multi-line.
    config : ParsingConfig | None
        Parsing options. Defaults to ``ParsingConfig()``.

    Returns
    -------
    ParsedAddress
        Extracted street, city and zip.

    Raises
    ------
    ViesParserError
        One of the subclasses documented on ``validate_input`` or
        ``split_address``.
    """
    config = config or _DEFAULT_CONFIG
    country, address = validate_input(country_code, address)
    parsed = split_address(country, address)

    if country is CountryCode.EL and not config.ignore_greek:
        parsed = ParsedAddress(
            street=transliterate(parsed.street),
            city=transliterate(parsed.city),
            zip=transliterate(parsed.zip),
        )

    return parsed


def parse_address(
    country_code: str,
    address: str,
    config: ParsingConfig | None = None,
) -> tuple[ParsedAddress, ViesParserError | None]:
    """Parse a VIES address, returning the error instead of raising it.

    On failure the result is ``ParsedAddress()`` and the second element
    holds the error; on success the second element is ``None``.
    """
    try:
        return must_parse_address(country_code, address, config), None
    except ViesParserError as exc:
        logger.debug("Could not parse %r address: %s", country_code, exc)
        return ParsedAddress(), exc
