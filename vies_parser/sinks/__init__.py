"""Output helpers for exporting parse results."""

from vies_parser.sinks.serialization import dataclass_to_dict, serialize_value, to_dict

__all__ = ["dataclass_to_dict", "serialize_value", "to_dict"]
