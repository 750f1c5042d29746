"""Defaults and option types for color selection."""

import math
from dataclasses import dataclass

__all__ = [
    "MAX_ATTEMPTS",
    "MAX_CHANNEL_SUM",
    "MAX_DISTANCE",
    "DEFAULT_COLOR",
    "FALLBACK_FOREGROUND",
    "FALLBACK_BACKGROUND",
    "DEFAULT_MIN_CONTRAST_PCT",
    "DEFAULT_MIN_DISTANCE_PCT",
    "DEFAULT_MIN_BRIGHTNESS",
    "DEFAULT_MAX_BRIGHTNESS",
    "DEFAULT_LOG_FILE",
    "BrightnessRange",
    "SelectionOptions",
]

# Attempts made by the invention search before giving up
MAX_ATTEMPTS = 500

MAX_CHANNEL_SUM = 3 * 255
MAX_DISTANCE = math.sqrt(3) * 255

# Returned by parse_color for anything it cannot read
DEFAULT_COLOR = "#888888"

# Returned when no color meets the thresholds
FALLBACK_FOREGROUND = "#ffffff"
FALLBACK_BACKGROUND = "#000000"

# 0.36 contrast and a distance of 85 (of ~441.7) were tuned by hand
DEFAULT_MIN_CONTRAST_PCT = 36
DEFAULT_MIN_DISTANCE_PCT = 19

DEFAULT_MIN_BRIGHTNESS = 0
DEFAULT_MAX_BRIGHTNESS = 3 * 160

DEFAULT_LOG_FILE = "madcolor.log"


@dataclass(frozen=True)
class BrightnessRange:
    """Inclusive limits on the channel sum (r + g + b) of a random color."""

    minimum: int = DEFAULT_MIN_BRIGHTNESS
    maximum: int = DEFAULT_MAX_BRIGHTNESS

    def __post_init__(self) -> None:
        if not 0 <= self.minimum <= MAX_CHANNEL_SUM:
            raise ValueError(f"minimum brightness out of range: {self.minimum}")
        if not 0 <= self.maximum <= MAX_CHANNEL_SUM:
            raise ValueError(f"maximum brightness out of range: {self.maximum}")
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum brightness ({self.minimum}) is above "
                f"maximum brightness ({self.maximum})"
            )

    def __contains__(self, channel_sum: int) -> bool:
        return self.minimum <= channel_sum <= self.maximum

    @property
    def width(self) -> int:
        return self.maximum - self.minimum


@dataclass(frozen=True)
class SelectionOptions:
    """Thresholds and search settings for picking a contrasting color.

    Attributes:
        min_contrast_pct: Minimum contrast ratio as a percentage (0-100).
        min_distance_pct: Minimum RGB distance as a percentage of the largest
            possible distance (0-100).
        named_only: Search the color table before inventing colors.
        max_attempts: Random colors tried by the invention search.
    """

    min_contrast_pct: int = DEFAULT_MIN_CONTRAST_PCT
    min_distance_pct: int = DEFAULT_MIN_DISTANCE_PCT
    named_only: bool = True
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self) -> None:
        for field_name in ("min_contrast_pct", "min_distance_pct"):
            value = getattr(self, field_name)
            if not 0 <= value <= 100:
                raise ValueError(f"{field_name} must be between 0 and 100, got {value}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")

    @property
    def min_contrast(self) -> float:
        return self.min_contrast_pct / 100.0

    @property
    def min_distance(self) -> float:
        return self.min_distance_pct / 100.0 * MAX_DISTANCE
