"""Sample VIES address generation for every supported country."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterator

from faker import Faker

from vies_parser.models.enums import CountryCode


@dataclass(frozen=True)
class RawAddress:
    """An address as VIES would return it, tagged with its country."""

    country: CountryCode
    text: str


# Mapping of VIES country code -> Faker locale
LOCALE_MAP: dict[CountryCode, str] = {
    CountryCode.CZ: "cs_CZ",
    CountryCode.SK: "sk_SK",
    CountryCode.NL: "nl_NL",
    CountryCode.BE: "nl_BE",
    CountryCode.FR: "fr_FR",
    CountryCode.PT: "pt_PT",
    CountryCode.IT: "it_IT",
    CountryCode.FI: "fi_FI",
    CountryCode.RO: "ro_RO",
    CountryCode.SI: "sl_SI",
    CountryCode.AT: "de_AT",
    CountryCode.PL: "pl_PL",
    CountryCode.HR: "hr_HR",
    CountryCode.EL: "el_GR",
    CountryCode.DK: "da_DK",
    CountryCode.EE: "et_EE",
}


class ViesAddressFactory:
    """Generate raw addresses in the layout VIES uses per country.

    Each country gets a dedicated Faker instance so street names, cities
    and postcodes look local. Text is upper-cased like VIES output.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._fakers: dict[CountryCode, Faker] = {}
        for country, locale in LOCALE_MAP.items():
            faker_instance = Faker(locale)
            if seed is not None:
                faker_instance.seed_instance(seed)
            self._fakers[country] = faker_instance

    def generate(self, country: CountryCode | str | None = None) -> RawAddress:
        """Generate an address, optionally for a specific country.

        Parameters
        ----------
        country : CountryCode | str | None
            VIES country code. If ``None``, picks one uniformly.

        Returns
        -------
        RawAddress
            Generated address text and its country.
        """
        if country is None:
            country = self._random.choice(list(CountryCode))
        country = CountryCode(country)

        fake = self._fakers[country]
        render = _COUNTRY_LAYOUTS.get(country, _render_postal_line)
        return RawAddress(country=country, text=render(fake, self._random))

    def generate_all(self, per_country: int = 1) -> Iterator[RawAddress]:
        """Yield ``per_country`` addresses for every supported country."""
        for country in CountryCode:
            for _ in range(per_country):
                yield self.generate(country)


# ---------------------------------------------------------------------------
# Per-country layouts
# ---------------------------------------------------------------------------

def _street(fake: Faker) -> str:
    # commas would add parts to the SI/HR single-line layout
    name = fake.street_name().replace(",", " ").strip()
    return f"{name} {fake.building_number()}".upper()


def _city(fake: Faker) -> str:
    return fake.city().replace(",", " ").strip().upper()


def _render_postal_line(fake: Faker, rng: random.Random) -> str:
    """``STREET\\nZIP CITY``"""
    return f"{_street(fake)}\n{fake.postcode()} {_city(fake)}"


def _render_comma_separated(fake: Faker, rng: random.Random) -> str:
    """``STREET, ZIP CITY``"""
    return f"{_street(fake)}, {fake.postcode()} {_city(fake)}"


def _render_czech(fake: Faker, rng: random.Random) -> str:
    """``STREET\\nZIP CITY DISTRICT``"""
    return f"{_street(fake)}\n{fake.postcode()} {_city(fake)} {rng.randint(1, 10)}"


def _render_greek(fake: Faker, rng: random.Random) -> str:
    """``STREET\\nZIP - CITY``"""
    postcode = fake.postcode().replace(" ", "")
    return f"{_street(fake)}\n{postcode} - {_city(fake)}"


_COUNTRY_LAYOUTS: dict[CountryCode, Callable[[Faker, random.Random], str]] = {
    CountryCode.SI: _render_comma_separated,
    CountryCode.HR: _render_comma_separated,
    CountryCode.CZ: _render_czech,
    CountryCode.EL: _render_greek,
}
