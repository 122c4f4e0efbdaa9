"""Domain models for VIES address parsing."""

from vies_parser.models.base import ParsedAddress
from vies_parser.models.enums import SUPPORTED_COUNTRY_CODES, CountryCode

__all__ = ["CountryCode", "ParsedAddress", "SUPPORTED_COUNTRY_CODES"]
