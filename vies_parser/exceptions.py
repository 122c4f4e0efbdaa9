"""Custom exception hierarchy for vies-parser."""

from __future__ import annotations


class ViesParserError(Exception):
    """Base exception for all vies-parser errors.

    The string form is the class ``message``, followed by the optional
    ``detail`` after a colon.
    """

    message = "vies parser error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class MissingCountryCodeError(ViesParserError):
    """Raised when the country code is empty after trimming."""

    message = "missing country code"


class MissingAddressError(ViesParserError):
    """Raised when the address is empty after trimming."""

    message = "missing address"


class UnsupportedCountryCodeError(ViesParserError):
    """Raised when the country code is not in the supported set."""

    message = "unsupported country code"


class InvalidOptionError(ViesParserError):
    """Raised when an address does not match any shape its country expects."""

    message = "invalid option"


class ConfigurationError(ViesParserError):
    """Raised when configuration is invalid or missing."""

    message = "invalid configuration"
