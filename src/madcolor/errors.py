"""Exception types for madcolor."""

__all__ = [
    "ColorError",
    "MalformedHexError",
    "ColorNotFoundError",
    "InvariantViolationError",
]


class ColorError(ValueError):
    """Base class for color errors."""


class MalformedHexError(ColorError):
    """Raised when a value that must be ``#RRGGBB`` is not."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid hex color: {value!r} (expected #RRGGBB)")
        self.value = value


class ColorNotFoundError(ColorError):
    """Raised when a color name is not in the color table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown color name: {name!r}")
        self.name = name


class InvariantViolationError(ColorError):
    """Raised when internal data breaks an invariant (a programming error)."""
