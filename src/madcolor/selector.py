"""Search for colors that stand out against a reference color.

A candidate is accepted when both of these hold against the reference:

- ``contrast_ratio(candidate, reference) >= min_contrast_pct / 100``
- ``euclidean_distance(candidate, reference) >= min_distance_pct / 100 * MAX_DISTANCE``

Named search starts at a uniformly random index of the color table and walks
forward with wraparound. If it comes back to the start without a hit, the
search moves on to invented colors: fresh random RGB triples, at most
``max_attempts`` of them. When those run out too, the fixed white-on-black
pair is returned, so every call terminates with something readable.
"""

import logging
from typing import NamedTuple

import numpy as np

from .color_table import ColorTable, get_color_table
from .color_utils import hex_to_rgb, rgb_to_hex
from .colors import ColorMetrics, _table_metrics, color_metrics
from .config import (
    DEFAULT_MIN_CONTRAST_PCT,
    DEFAULT_MIN_DISTANCE_PCT,
    FALLBACK_BACKGROUND,
    FALLBACK_FOREGROUND,
    MAX_ATTEMPTS,
    BrightnessRange,
    SelectionOptions,
)
from .rng import draw_index, draw_rgb

__all__ = [
    "Selection",
    "ColorSelector",
    "random_color",
    "invent_color",
    "select_contrasting_color",
]

logger = logging.getLogger(__name__)

# Brightness ranges narrower than this are not worth sampling
_MIN_BRIGHTNESS_WIDTH = 20


class Selection(NamedTuple):
    """Result of a color search.

    ``name`` is the table name of a named hit, empty for invented colors.
    ``background`` is the reference color, except after a fallback, where it
    is black.
    """

    name: str
    foreground: str
    background: str
    fallback: bool = False


FALLBACK = Selection("", FALLBACK_FOREGROUND, FALLBACK_BACKGROUND, fallback=True)


def _normalize(color: str) -> str:
    return rgb_to_hex(*hex_to_rgb(color))


def _meets(metrics: ColorMetrics, options: SelectionOptions) -> bool:
    return (
        metrics.contrast >= options.min_contrast
        and metrics.distance >= options.min_distance
    )


def random_color(
    rng: np.random.Generator | None = None,
    brightness: BrightnessRange | None = None,
) -> str:
    """Invent a random color, optionally within a channel-sum range.

    A range narrower than 20 returns black, as does a range that no draw
    lands in within ``MAX_ATTEMPTS`` tries.
    """
    if brightness is None:
        return rgb_to_hex(*draw_rgb(rng))
    if brightness.width <= _MIN_BRIGHTNESS_WIDTH:
        return FALLBACK_BACKGROUND

    for _ in range(MAX_ATTEMPTS):
        r, g, b = draw_rgb(rng)
        if r + g + b in brightness:
            return rgb_to_hex(r, g, b)

    logger.debug(
        "No random color with brightness in [%d, %d], using black",
        brightness.minimum,
        brightness.maximum,
    )
    return FALLBACK_BACKGROUND


def _invent(
    background: str,
    options: SelectionOptions,
    rng: np.random.Generator | None,
) -> Selection:
    for attempt in range(1, options.max_attempts + 1):
        candidate = random_color(rng)
        metrics = color_metrics(candidate, background)
        if _meets(metrics, options):
            logger.debug(
                "Invented %s against %s after %d attempt(s)", candidate, background, attempt
            )
            return Selection("", candidate, background)
        logger.debug(
            "%s vs %s: distance %.2f contrast %.4f",
            candidate,
            background,
            metrics.distance,
            metrics.contrast,
        )

    logger.warning(
        "Could not invent a color with contrast >= %.2f and distance >= %.2f "
        "against %s (tried %d times), using %s on %s",
        options.min_contrast,
        options.min_distance,
        background,
        options.max_attempts,
        FALLBACK_FOREGROUND,
        FALLBACK_BACKGROUND,
    )
    return FALLBACK


def invent_color(
    reference: str | None,
    min_contrast_pct: int = DEFAULT_MIN_CONTRAST_PCT,
    min_distance_pct: int = DEFAULT_MIN_DISTANCE_PCT,
    *,
    rng: np.random.Generator | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> tuple[str, str]:
    """Invent a foreground for ``reference`` from random RGB triples.

    Args:
        reference: Background color; ``None`` invents a random one.
        min_contrast_pct: Minimum contrast ratio, 0-100.
        min_distance_pct: Minimum distance as a share of the maximum, 0-100.
        rng: Generator to draw from; the shared generator by default.
        max_attempts: Triples tried before falling back.

    Returns:
        tuple[str, str]: ``(foreground, background)``. After ``max_attempts``
        misses this is ``("#ffffff", "#000000")``.

    Raises:
        MalformedHexError: If ``reference`` is not a 6-digit hex color.
        ValueError: If a percentage is outside 0-100.
    """
    options = SelectionOptions(
        min_contrast_pct=min_contrast_pct,
        min_distance_pct=min_distance_pct,
        named_only=False,
        max_attempts=max_attempts,
    )
    background = _normalize(reference) if reference is not None else random_color(rng)
    selection = _invent(background, options, rng)
    return selection.foreground, selection.background


def _search_table(
    reference: str,
    options: SelectionOptions,
    table: ColorTable,
    rng: np.random.Generator | None,
) -> Selection | None:
    start = draw_index(len(table), rng)
    distances, contrasts = _table_metrics(table.rgb, reference)
    fits = (contrasts >= options.min_contrast) & (distances >= options.min_distance)

    # Table indices in scan order: start, start + 1, ..., wrapping around
    order = np.roll(np.arange(len(table)), -start)
    hits = order[fits[order]]
    if hits.size == 0:
        return None

    entry = table.entry(int(hits[0]))
    return Selection(entry.name, entry.hex, reference)


def select_contrasting_color(
    reference: str,
    min_contrast_pct: int = DEFAULT_MIN_CONTRAST_PCT,
    min_distance_pct: int = DEFAULT_MIN_DISTANCE_PCT,
    named_only: bool = True,
    *,
    table: ColorTable | None = None,
    rng: np.random.Generator | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Selection:
    """Pick a foreground color that meets both thresholds against ``reference``.

    With ``named_only`` the color table is searched first and invented colors
    are only used when no entry fits. Without it, colors are invented
    directly. The result is the white-on-black fallback when nothing fits.

    Raises:
        MalformedHexError: If ``reference`` is not a 6-digit hex color.
        ValueError: If a percentage is outside 0-100.
    """
    options = SelectionOptions(
        min_contrast_pct=min_contrast_pct,
        min_distance_pct=min_distance_pct,
        named_only=named_only,
        max_attempts=max_attempts,
    )
    return ColorSelector(options, table=table, rng=rng).select(reference)


class ColorSelector:
    """Color searches sharing one set of options, one table and one generator."""

    def __init__(
        self,
        options: SelectionOptions | None = None,
        *,
        table: ColorTable | None = None,
        rng: np.random.Generator | None = None,
        brightness: BrightnessRange | None = None,
    ) -> None:
        self.options = options if options is not None else SelectionOptions()
        self.table = table if table is not None else get_color_table()
        self.rng = rng
        self.brightness = brightness

    def select(self, reference: str) -> Selection:
        """See ``select_contrasting_color``."""
        reference = _normalize(reference)
        if self.options.named_only:
            found = _search_table(reference, self.options, self.table, self.rng)
            if found is not None:
                return found
            logger.info(
                "No named color has contrast >= %.2f and distance >= %.2f against %s, "
                "inventing one",
                self.options.min_contrast,
                self.options.min_distance,
                reference,
            )
        return _invent(reference, self.options, self.rng)

    def random_foreground(self) -> str:
        """A random color with no constraint other than the brightness range."""
        if self.options.named_only:
            max_brightness = self.brightness.maximum if self.brightness else None
            return self.table.random_named(self.rng, max_brightness).hex
        return random_color(self.rng, self.brightness)
