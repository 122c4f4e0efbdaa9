"""Country codes understood by the parser."""

from enum import Enum


class CountryCode(str, Enum):
    CZ = "CZ"
    SK = "SK"
    NL = "NL"
    BE = "BE"
    FR = "FR"
    PT = "PT"
    IT = "IT"
    FI = "FI"
    RO = "RO"
    SI = "SI"
    AT = "AT"
    PL = "PL"
    HR = "HR"
    EL = "EL"
    DK = "DK"
    EE = "EE"


SUPPORTED_COUNTRY_CODES: tuple[str, ...] = tuple(code.value for code in CountryCode)
