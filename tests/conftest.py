"""Test configuration and fixtures for madcolor tests."""

import logging

import numpy as np
import pytest

from madcolor.color_table import ColorTable
from madcolor.logs import LOGGER_NAME


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible draws."""
    return np.random.default_rng(42)


@pytest.fixture
def small_table() -> ColorTable:
    """A handful of well-known colors."""
    return ColorTable(
        {
            "black": "#000000",
            "white": "#ffffff",
            "red": "#ff0000",
            "gray": "#808080",
            "navy": "#000080",
            "yellow": "#ffff00",
        }
    )


@pytest.fixture
def known_luminance_values() -> list[tuple[str, float]]:
    """Provide colors with known luminance values for testing."""
    return [
        ("#000000", 0.0),       # Black
        ("#ffffff", 1.0),       # White
        ("#ff0000", 0.2126),    # Red
        ("#00ff00", 0.7152),    # Green
        ("#0000ff", 0.0722),    # Blue
    ]


@pytest.fixture
def invalid_hex_colors() -> list[object]:
    """Values that are not 6-digit hex colors."""
    return [
        "notacolor",
        "#GG0000",      # Invalid hex characters
        "#FF00",        # Too short
        "#FF000000",    # Too long
        "#abc",         # Shorthand is not accepted where #RRGGBB is required
        "",             # Empty string
        "   ",          # Whitespace only
        None,
        0xFFFFFF,
    ]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by the CLI so tests stay independent."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
