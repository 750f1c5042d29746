"""madcolor - colorize text as HTML with readable, randomly chosen colors"""

__version__ = "0.1.0"

from .color_table import ColorTable, NamedColor, ParsedColor, get_color_table, parse_color
from .colorize import colorize
from .colors import (
    ColorMetrics,
    anti_color,
    color_metrics,
    contrast_ratio,
    euclidean_distance,
    relative_luminance,
)
from .config import BrightnessRange, SelectionOptions
from .errors import (
    ColorError,
    ColorNotFoundError,
    InvariantViolationError,
    MalformedHexError,
)
from .selector import (
    ColorSelector,
    Selection,
    invent_color,
    random_color,
    select_contrasting_color,
)

__all__ = [
    "ColorTable",
    "NamedColor",
    "ParsedColor",
    "get_color_table",
    "parse_color",
    "colorize",
    "ColorMetrics",
    "anti_color",
    "color_metrics",
    "contrast_ratio",
    "euclidean_distance",
    "relative_luminance",
    "BrightnessRange",
    "SelectionOptions",
    "ColorError",
    "ColorNotFoundError",
    "InvariantViolationError",
    "MalformedHexError",
    "ColorSelector",
    "Selection",
    "invent_color",
    "random_color",
    "select_contrasting_color",
]
