"""HTML rendering: one colored ``<span>`` per character."""

import html
import logging
from collections.abc import Iterable, Iterator

from .colors import anti_color, color_metrics
from .selector import ColorSelector, _meets

__all__ = ["render_span", "pick_colors", "iter_spans", "colorize"]

logger = logging.getLogger(__name__)


def render_span(char: str, foreground: str, background: str | None = None) -> str:
    """Wrap a single character in a span carrying its colors."""
    style = f"color:{foreground}"
    if background is not None:
        style += f";background-color:{background}"
    return f'<span style="{style}">{html.escape(char)}</span>'


def pick_colors(
    selector: ColorSelector,
    background: str | None = None,
    anti: bool = False,
) -> tuple[str, str | None]:
    """Choose the (foreground, background) pair for the next character.

    - ``anti``: a random foreground on its anti-color, or on a contrasting
      pick when the anti-color misses the thresholds.
    - ``background``: a foreground that contrasts with the given background.
    - otherwise: a random foreground and no background.
    """
    if anti:
        foreground = selector.random_foreground()
        candidate = anti_color(foreground)
        metrics = color_metrics(foreground, candidate)
        if _meets(metrics, selector.options):
            return foreground, candidate

        logger.debug(
            "%s vs anti-color %s: distance %.2f contrast %.4f, searching instead",
            foreground,
            candidate,
            metrics.distance,
            metrics.contrast,
        )
        selection = selector.select(foreground)
        if selection.fallback:
            return selection.foreground, selection.background
        return foreground, selection.foreground

    if background is not None:
        selection = selector.select(background)
        return selection.foreground, selection.background

    return selector.random_foreground(), None


def iter_spans(
    chars: Iterable[str],
    selector: ColorSelector,
    background: str | None = None,
    anti: bool = False,
) -> Iterator[str]:
    for char in chars:
        foreground, char_background = pick_colors(selector, background, anti)
        logger.debug("char %r color %s background %s", char, foreground, char_background)
        yield render_span(char, foreground, char_background)


def colorize(
    text: str,
    selector: ColorSelector | None = None,
    background: str | None = None,
    anti: bool = False,
) -> str:
    """Render ``text`` as a ``<div>`` of per-character colored spans."""
    if selector is None:
        selector = ColorSelector()
    spans = "".join(iter_spans(text, selector, background, anti))
    return f"<div>{spans}</div>\n"
