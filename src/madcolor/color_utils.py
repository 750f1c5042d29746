"""Hex color parsing and formatting utilities for madcolor."""

import re

from .errors import MalformedHexError

__all__ = [
    "parse_hex_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "channel_sum",
]

RGB = tuple[int, int, int]

_HEX6 = re.compile(r"#?([0-9a-fA-F]{6})")
_HEX3 = re.compile(r"#?([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])")


def parse_hex_color(color_str: str) -> str | None:
    """Parse #RRGGBB, RRGGBB, #RGB or RGB into a lowercase ``#rrggbb``."""
    color_str = color_str.strip()

    match = _HEX6.fullmatch(color_str)
    if match:
        return "#" + match.group(1).lower()

    match = _HEX3.fullmatch(color_str)
    if match:
        return "#" + "".join(digit * 2 for digit in match.groups()).lower()

    return None


def hex_to_rgb(color: str) -> RGB:
    """Split a 6-digit hex color into its 0-255 channels.

    Raises:
        MalformedHexError: If ``color`` is not a 6-digit hex string.
    """
    if not isinstance(color, str):
        raise MalformedHexError(color)
    match = _HEX6.fullmatch(color.strip())
    if not match:
        raise MalformedHexError(color)

    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 0-255 channels as a lowercase ``#rrggbb``."""
    if not all(0 <= val <= 255 for val in (r, g, b)):
        raise ValueError(f"RGB channel out of range: ({r}, {g}, {b})")
    return f"#{r:02x}{g:02x}{b:02x}"


def channel_sum(color: str) -> int:
    """Crude brightness: the sum of the three channels (0-765)."""
    return sum(hex_to_rgb(color))
