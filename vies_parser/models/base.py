"""Result model for parsed VIES addresses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedAddress:
    """Street, city and postal code extracted from a VIES address.

    Each field holds whatever the matching country rule extracted.
    Fields may be empty, e.g. the street of a Slovak address ending
    in the ``Slovensko`` line. ``ParsedAddress()`` is the zero value
    returned alongside errors.
    """

    street: str = ""
    city: str = ""
    zip: str = ""

    @property
    def is_empty(self) -> bool:
        """True when no field was extracted."""
        return not (self.street or self.city or self.zip)
