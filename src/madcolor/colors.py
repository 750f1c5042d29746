"""Color metrics for madcolor.

This module computes the numbers the selector compares against its
thresholds: WCAG relative luminance, the luminance ratio between two colors,
the Euclidean distance between two colors in RGB space, and the anti-color
(per-channel complement) of a color.

Contrast convention:
    ``contrast_ratio`` returns ``(L_dark + 0.05) / (L_light + 0.05)``, which
    lies in (0, 1] and equals 1.0 only for colors of equal luminance. This is
    the reciprocal of the familiar WCAG "4.5:1" figure. Every threshold check
    in madcolor uses this value with a meets-or-exceeds comparison.

Distance convention:
    ``euclidean_distance`` works on raw 0-255 channels and is compared after
    the square root, so the largest possible value is ``sqrt(3) * 255``.

Dependencies:
    - numpy: metric arrays over a whole color table, for the table scan

Example:
    >>> from madcolor.colors import color_metrics
    >>> color_metrics("#000000", "#ffffff")
    ColorMetrics(distance=441.6729559300637, contrast=0.047619047619047616)
"""

import math
from typing import NamedTuple

import numpy as np

from .color_utils import hex_to_rgb, rgb_to_hex

__all__ = [
    "ColorMetrics",
    "relative_luminance",
    "contrast_ratio",
    "euclidean_distance",
    "color_metrics",
    "anti_color",
]

# sRGB linearization constants (IEC 61966-2-1)
_LINEAR_THRESHOLD = 0.04045
_LINEAR_SLOPE = 12.92
_GAMMA_OFFSET = 0.055
_GAMMA = 2.4

_LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Keeps the ratio finite for pure black
_FLARE = 0.05


class ColorMetrics(NamedTuple):
    distance: float
    contrast: float


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= _LINEAR_THRESHOLD:
        return c / _LINEAR_SLOPE
    return ((c + _GAMMA_OFFSET) / (1 + _GAMMA_OFFSET)) ** _GAMMA


def _luminance_from_rgb(rgb: tuple[int, int, int]) -> float:
    r, g, b = (_linearize(c) for c in rgb)
    wr, wg, wb = _LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def relative_luminance(color: str) -> float:
    """Compute the WCAG 2.x relative luminance of a hex color.

    Each channel is scaled to [0, 1] and linearized:

    - ``c <= 0.04045``: ``c / 12.92``
    - otherwise: ``((c + 0.055) / 1.055) ** 2.4``

    and the linear channels are weighted by human sensitivity:
    ``L = 0.2126 R + 0.7152 G + 0.0722 B``.

    Args:
        color: A ``#RRGGBB`` color (the ``#`` is optional, case-insensitive).

    Returns:
        float: Luminance in [0.0, 1.0]; 0.0 for black, 1.0 for white.

    Raises:
        MalformedHexError: If ``color`` is not a 6-digit hex color.

    Examples:
        >>> relative_luminance("#000000")
        0.0
        >>> relative_luminance("#ffffff")
        1.0
        >>> round(relative_luminance("#ff0000"), 4)
        0.2126

    References:
        - WCAG 2.0: https://www.w3.org/TR/WCAG20/#relativeluminancedef
    """
    return _luminance_from_rgb(hex_to_rgb(color))


def _ratio(l1: float, l2: float) -> float:
    dark = min(l1, l2)
    light = max(l1, l2)
    return (dark + _FLARE) / (light + _FLARE)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Luminance ratio of the darker color over the lighter one.

    Computes ``(L_dark + 0.05) / (L_light + 0.05)``. The result is symmetric in
    its arguments, lies in (0, 1], and is 1.0 exactly when both colors have
    the same luminance. Black against white gives ``0.05 / 1.05``.

    Note that a *smaller* value means a *larger* difference in brightness;
    the WCAG ratio (1 to 21) is the reciprocal of this value.

    Raises:
        MalformedHexError: If either color is not a 6-digit hex color.
    """
    return _ratio(relative_luminance(color_a), relative_luminance(color_b))


def euclidean_distance(color_a: str, color_b: str) -> float:
    """Straight-line distance between two colors in 0-255 RGB space."""
    ra, ga, ba = hex_to_rgb(color_a)
    rb, gb, bb = hex_to_rgb(color_b)
    return math.sqrt((ra - rb) ** 2 + (ga - gb) ** 2 + (ba - bb) ** 2)


def color_metrics(color_a: str, color_b: str) -> ColorMetrics:
    """Distance and contrast between two colors, for logging and retry loops."""
    return ColorMetrics(
        distance=euclidean_distance(color_a, color_b),
        contrast=contrast_ratio(color_a, color_b),
    )


def anti_color(color: str) -> str:
    """Per-channel complement (255 - channel) of a hex color.

    Raises:
        MalformedHexError: If ``color`` is not a 6-digit hex color.
    """
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(255 - r, 255 - g, 255 - b)


def _table_metrics(rgb: np.ndarray, reference: str) -> tuple[np.ndarray, np.ndarray]:
    """Distance and contrast of every row of ``rgb`` against ``reference``.

    Row by row this is ``color_metrics``: the values are computed by the same
    scalar code, so threshold checks on the table agree exactly with checks on
    a single pair.
    """
    ref = hex_to_rgb(reference)
    ref_luminance = _luminance_from_rgb(ref)

    distances = np.empty(len(rgb), dtype=np.float64)
    contrasts = np.empty(len(rgb), dtype=np.float64)
    for i, row in enumerate(rgb):
        channels = (int(row[0]), int(row[1]), int(row[2]))
        distances[i] = math.sqrt(sum((a - b) ** 2 for a, b in zip(channels, ref)))
        contrasts[i] = _ratio(_luminance_from_rgb(channels), ref_luminance)
    return distances, contrasts
