"""Configuration management for vies-parser."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from vies_parser.exceptions import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class ParsingConfig:
    """Per-call parsing options.

    Parameters
    ----------
    ignore_greek : bool
        Skip Greek-to-Latin transliteration of ``EL`` addresses.
    """

    ignore_greek: bool = False


@dataclass
class ViesParserConfig:
    """Main configuration for applications using vies-parser."""

    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> ViesParserConfig:
        """Create config from environment variables."""
        parsing = ParsingConfig(
            ignore_greek=_env_bool("VIES_IGNORE_GREEK", default=False),
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            parsing=parsing,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
