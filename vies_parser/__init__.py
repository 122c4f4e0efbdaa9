"""Split VIES postal addresses into street, zip and city."""

__version__ = "0.1.0"

from vies_parser.config import ParsingConfig, ViesParserConfig
from vies_parser.exceptions import (
    ConfigurationError,
    InvalidOptionError,
    MissingAddressError,
    MissingCountryCodeError,
    UnsupportedCountryCodeError,
    ViesParserError,
)
from vies_parser.models import SUPPORTED_COUNTRY_CODES, CountryCode, ParsedAddress
from vies_parser.parser import must_parse_address, parse_address, validate_input
from vies_parser.transliteration import transliterate

__all__ = [
    "__version__",
    "ConfigurationError",
    "CountryCode",
    "InvalidOptionError",
    "MissingAddressError",
    "MissingCountryCodeError",
    "ParsedAddress",
    "ParsingConfig",
    "SUPPORTED_COUNTRY_CODES",
    "UnsupportedCountryCodeError",
    "ViesParserConfig",
    "ViesParserError",
    "must_parse_address",
    "parse_address",
    "transliterate",
    "validate_input",
]
