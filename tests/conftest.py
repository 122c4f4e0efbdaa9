"""Pytest configuration and fixtures."""

import pytest

from vies_parser.config import ParsingConfig


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def keep_greek() -> ParsingConfig:
    """Config that disables Greek transliteration."""
    return ParsingConfig(ignore_greek=True)


@pytest.fixture
def dutch_address() -> str:
    """Two-line Dutch address as VIES returns it."""
    return "Hoofdstraat 1\n1234 AB Amsterdam"


@pytest.fixture
def greek_address() -> str:
    """Two-line Greek address as VIES returns it."""
    return "ΛΕΩΦΟΡΟΣ ΚΗΦΙΣΙΑΣ 100\n15125 - ΜΑΡΟΥΣΙ"
