"""Sample data generators."""

from vies_parser.generators.address import LOCALE_MAP, RawAddress, ViesAddressFactory

__all__ = ["LOCALE_MAP", "RawAddress", "ViesAddressFactory"]
