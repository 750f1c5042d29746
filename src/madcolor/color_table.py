"""The named color registry.

A ``ColorTable`` is an immutable, ordered mapping from lowercase color names to
``#rrggbb`` values. Position matters: the selector scans the table from a
random index with wraparound, so every table also exposes its entries by
index and as a read-only ``(n, 3)`` numpy array of channels.

The table shipped with the package is built lazily by ``get_color_table()``.
Construction happens at most once per process, even when several threads ask
for it at the same time; afterwards the table is only read.

Example:
    >>> from madcolor.color_table import get_color_table, parse_color
    >>> table = get_color_table()
    >>> table.lookup("Dark Gray") is None
    True
    >>> table.lookup("DarkGray")
    '#a9a9a9'
    >>> parse_color("abc")
    ParsedColor(hex='#aabbcc', ok=True)
"""

import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple

import numpy as np

from .color_names import COLOR_NAMES
from .color_utils import channel_sum, hex_to_rgb, parse_hex_color, rgb_to_hex
from .config import DEFAULT_COLOR
from .errors import ColorNotFoundError, InvariantViolationError, MalformedHexError
from .rng import draw_index

__all__ = [
    "NamedColor",
    "ParsedColor",
    "ColorTable",
    "get_color_table",
    "parse_color",
]

logger = logging.getLogger(__name__)

BLACK = ("black", "#000000")


class NamedColor(NamedTuple):
    name: str
    hex: str


class ParsedColor(NamedTuple):
    hex: str
    ok: bool


class ColorTable:
    """Read-only name -> hex registry."""

    def __init__(self, names: Mapping[str, str]) -> None:
        entries: list[NamedColor] = []
        for name, value in names.items():
            if not name or name != name.lower():
                raise InvariantViolationError(
                    f"color names must be non-empty and lowercase, got {name!r}"
                )
            try:
                rgb = hex_to_rgb(value)
            except MalformedHexError as e:
                raise InvariantViolationError(f"bad hex for color {name!r}: {e}") from e
            entries.append(NamedColor(name, rgb_to_hex(*rgb)))

        if not entries:
            raise InvariantViolationError("color table is empty")

        self._entries = tuple(entries)
        self._by_name = MappingProxyType({e.name: e.hex for e in self._entries})
        if len(self._by_name) != len(self._entries):
            raise InvariantViolationError(
                f"color table size mismatch: {len(self._by_name)} names "
                f"for {len(self._entries)} entries"
            )

        channels = np.array([hex_to_rgb(e.hex) for e in self._entries], dtype=np.int64)
        channels.setflags(write=False)
        self._rgb = channels

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __getitem__(self, name: str) -> str:
        found = self.lookup(name)
        if found is None:
            raise ColorNotFoundError(name)
        return found

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} colors)"

    @property
    def entries(self) -> tuple[NamedColor, ...]:
        return self._entries

    @property
    def rgb(self) -> np.ndarray:
        """Channels of every entry, in table order, shape ``(n, 3)``."""
        return self._rgb

    def entry(self, index: int) -> NamedColor:
        return self._entries[index]

    def lookup(self, name: str) -> str | None:
        """Hex value for ``name`` (case-insensitive), or None."""
        return self._by_name.get(name.strip().lower())

    def random_named(
        self,
        rng: np.random.Generator | None = None,
        max_brightness: int | None = None,
    ) -> NamedColor:
        """Pick an entry uniformly at random.

        With ``max_brightness``, the scan moves forward (wrapping around) from
        the random index to the first entry whose channel sum is at most the
        limit, the same inclusive bound ``BrightnessRange`` uses. When the
        limit is negative or no entry is dark enough, the result is
        ``("black", "#000000")``; that pair is a sentinel and need not be an
        entry of this table.
        """
        start = draw_index(len(self._entries), rng)
        if max_brightness is None:
            return self._entries[start]
        if max_brightness < 0:
            return NamedColor(*BLACK)

        for offset in range(len(self._entries)):
            candidate = self._entries[(start + offset) % len(self._entries)]
            if channel_sum(candidate.hex) <= max_brightness:
                return candidate

        logger.debug("No named color darker than %d, using black", max_brightness)
        return NamedColor(*BLACK)


_shared_table: ColorTable | None = None
_shared_table_lock = threading.Lock()


def get_color_table() -> ColorTable:
    """Return the shared table built from ``COLOR_NAMES``, building it once."""
    global _shared_table

    table = _shared_table
    if table is not None:
        return table

    with _shared_table_lock:
        if _shared_table is None:
            _shared_table = ColorTable(COLOR_NAMES)
            logger.debug("Color table initialized with %d colors", len(_shared_table))
        return _shared_table


def parse_color(color_str: str, table: ColorTable | None = None) -> ParsedColor:
    """Read a color given as hex, 3-digit shorthand or table name.

    Returns ``ParsedColor(hex, True)`` on success. Anything else yields the
    neutral default gray with ``ok=False``; the caller decides what to do.
    """
    parsed = parse_hex_color(color_str)
    if parsed is not None:
        return ParsedColor(parsed, True)

    if table is None:
        table = get_color_table()
    found = table.lookup(color_str)
    if found is not None:
        return ParsedColor(found, True)

    return ParsedColor(DEFAULT_COLOR, False)
