"""Per-country rules that split a VIES address into street, zip and city.

VIES returns each member state's addresses in a fixed layout. The layout
is recognised by country code and by the number of line breaks in the
trimmed address; each country lists the shapes it understands in
``COUNTRY_RULES``. When no shape matches, the country decides between
raising and returning an empty ``ParsedAddress``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from vies_parser.exceptions import (
    InvalidOptionError,
    UnsupportedCountryCodeError,
    ViesParserError,
)
from vies_parser.logging import get_logger
from vies_parser.models.base import ParsedAddress
from vies_parser.models.enums import CountryCode

logger = get_logger(__name__)

SLOVAK_COUNTRY_LINE = "Slovensko"
SLOVAK_DISTRICT_PREFIXES: tuple[str, ...] = ("mestská časť ", "m. č. ")


@dataclass(frozen=True)
class ShapeRule:
    """Extraction for addresses with exactly ``newlines`` line breaks."""

    newlines: int
    extract: Callable[[list[str]], ParsedAddress]


@dataclass(frozen=True)
class CountryRules:
    """Shapes known for a country and what to do when none matches.

    Parameters
    ----------
    shapes : tuple[ShapeRule, ...]
        Checked in order; the first with a matching newline count wins.
    on_mismatch : type[ViesParserError] | None
        Error raised when no shape matches. ``None`` returns an empty
        ``ParsedAddress`` instead.
    """

    shapes: tuple[ShapeRule, ...] = ()
    on_mismatch: type[ViesParserError] | None = None


def split_address(country: CountryCode, address: str) -> ParsedAddress:
    """Apply the rule of ``country`` matching the shape of ``address``.

    Parameters
    ----------
    country : CountryCode
        Validated country code.
    address : str
        Trimmed, non-empty address text.

    Returns
    -------
    ParsedAddress
        Extracted fields, or an empty result for countries that have no
        rule for this shape and do not treat it as an error.

    Raises
    ------
    InvalidOptionError
        CZ address with a line break count other than 1 or 2.
    UnsupportedCountryCodeError
        SK address with a line break count other than 1 or 2.
    """
    newlines = address.count("\n")
    rules = COUNTRY_RULES[country]

    for shape in rules.shapes:
        if shape.newlines == newlines:
            logger.debug("Splitting %s address with %d line break(s)", country.value, newlines)
            return shape.extract(address.split("\n"))

    if rules.on_mismatch is not None:
        raise rules.on_mismatch(f"{country.value} address with {newlines} line break(s)")

    if rules.shapes:
        logger.warning(
            "No %s rule for addresses with %d line break(s), returning empty result",
            country.value,
            newlines,
        )
    else:
        logger.debug("No parsing rules for %s, returning empty result", country.value)
    return ParsedAddress()


def _token(tokens: list[str], index: int) -> str:
    return tokens[index] if index < len(tokens) else ""


def _split_postal_line(lines: list[str]) -> ParsedAddress:
    """``street\\nZIP CITY``; only the first word after the zip is the city."""
    tokens = lines[1].split(" ")
    return ParsedAddress(
        street=lines[0].strip(),
        zip=_token(tokens, 0).strip(),
        city=_token(tokens, 1).strip(),
    )


def _split_comma_separated(lines: list[str]) -> ParsedAddress:
    """``street[, part], ZIP CITY`` on a single line."""
    parts = lines[0].split(",")
    street = parts[0].strip()
    if len(parts) == 3:
        street = f"{street}, {parts[1].strip()}"
    tokens = parts[-1].strip().split(" ")
    return ParsedAddress(
        street=street,
        zip=_token(tokens, 0),
        city=_token(tokens, 1),
    )


def _split_slovak(lines: list[str]) -> ParsedAddress:
    street = lines[0]
    if lines[1] == SLOVAK_COUNTRY_LINE:
        # zip and city sit on the first line, there is no street
        tokens = lines[0].split(" ")
        street = ""
    else:
        tokens = lines[-1].split(" ")

    city = _token(tokens, 1)
    for prefix in SLOVAK_DISTRICT_PREFIXES:
        city = city.replace(prefix, "", 1)

    return ParsedAddress(
        street=street.strip(),
        city=city.strip(),
        zip=_token(tokens, 0).strip(),
    )


def _split_greek(lines: list[str]) -> ParsedAddress:
    """``street\\nZIP - CITY``; the city keeps all of its words."""
    zip_code, _, city = lines[1].strip().partition(" ")
    return ParsedAddress(
        street=lines[0].strip(),
        zip=zip_code.strip(),
        city=city.strip().lstrip("-").strip(),
    )


def _czech_zip(line: str) -> str:
    # "110 00 Praha 1" -> "11000"
    tokens = line.strip().split(" ")
    return "".join(tokens[:-2]).strip()


def _split_czech(lines: list[str]) -> ParsedAddress:
    tokens = lines[-1].strip().split(" ")
    return ParsedAddress(
        street=lines[0].strip(),
        city="".join(tokens[-2:-1]).strip(),
        zip=_czech_zip(lines[-1]),
    )


def _split_czech_with_city_line(lines: list[str]) -> ParsedAddress:
    return ParsedAddress(
        street=lines[0].strip(),
        city=lines[1].strip(),
        zip=_czech_zip(lines[-1]),
    )


_POSTAL_LINE = CountryRules(shapes=(ShapeRule(1, _split_postal_line),))
_COMMA_SEPARATED = CountryRules(shapes=(ShapeRule(0, _split_comma_separated),))
_NO_RULES = CountryRules()

COUNTRY_RULES: Mapping[CountryCode, CountryRules] = MappingProxyType(
    {
        CountryCode.NL: _POSTAL_LINE,
        CountryCode.BE: _POSTAL_LINE,
        CountryCode.FR: _POSTAL_LINE,
        CountryCode.FI: _POSTAL_LINE,
        CountryCode.AT: _POSTAL_LINE,
        CountryCode.PL: _POSTAL_LINE,
        CountryCode.DK: _POSTAL_LINE,
        CountryCode.SI: _COMMA_SEPARATED,
        CountryCode.HR: _COMMA_SEPARATED,
        CountryCode.SK: CountryRules(
            shapes=(ShapeRule(1, _split_slovak), ShapeRule(2, _split_slovak)),
            on_mismatch=UnsupportedCountryCodeError,
        ),
        CountryCode.CZ: CountryRules(
            shapes=(ShapeRule(1, _split_czech), ShapeRule(2, _split_czech_with_city_line)),
            on_mismatch=InvalidOptionError,
        ),
        CountryCode.PT: _NO_RULES,
        CountryCode.IT: _NO_RULES,
        CountryCode.RO: _NO_RULES,
        CountryCode.EL: CountryRules(shapes=(ShapeRule(1, _split_greek),)),
        CountryCode.EE: _NO_RULES,
    }
)
