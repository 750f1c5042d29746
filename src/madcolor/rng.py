"""Random draws shared by the color table and the selector.

Every function takes an optional ``numpy.random.Generator``. Without one, the
draw comes from a process-wide generator; ``Generator`` objects are not
thread-safe, so those draws are serialized.
"""

import threading

import numpy as np

__all__ = ["draw_index", "draw_rgb"]

_default_rng = np.random.default_rng()
_default_rng_lock = threading.Lock()


def draw_index(size: int, rng: np.random.Generator | None = None) -> int:
    """Uniform integer in ``[0, size)``."""
    if size < 1:
        raise ValueError(f"cannot draw an index from an empty range (size={size})")
    if rng is not None:
        return int(rng.integers(size))
    with _default_rng_lock:
        return int(_default_rng.integers(size))


def draw_rgb(rng: np.random.Generator | None = None) -> tuple[int, int, int]:
    """Uniform random (r, g, b), each channel in ``[0, 255]``."""
    if rng is not None:
        channels = rng.integers(0, 256, size=3)
    else:
        with _default_rng_lock:
            channels = _default_rng.integers(0, 256, size=3)
    r, g, b = (int(c) for c in channels)
    return r, g, b
