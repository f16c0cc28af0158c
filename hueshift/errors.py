"""Exception types raised by hueshift.

All of them subclass ``ValueError`` so callers that already guard conversions
with ``except ValueError`` keep working.
"""

from __future__ import annotations
from typing import Any


def _label(space: Any) -> str:
    return repr(getattr(space, "value", space))


class UnsupportedConversion(ValueError):
    """Raised when a color is asked to convert to its own space or an unknown one."""

    def __init__(self, from_space: Any, to_space: Any) -> None:
        self.from_space = from_space
        self.to_space = to_space
        super().__init__(
            f"Unsupported color space conversion: {_label(from_space)} to {_label(to_space)}"
        )


class InvalidHue(ValueError):
    """Raised when an HSV hue does not fall in one of the six 60 degree sectors."""

    def __init__(self, hue: Any) -> None:
        self.hue = hue
        super().__init__(f"Invalid HSV hue {hue!r}: expected a value in [0, 360)")


class MalformedHexInput(ValueError):
    """Raised when a hex color code is not 3 or 6 hexadecimal digits."""

    def __init__(self, text: Any) -> None:
        self.text = text
        super().__init__(f"Malformed hex color code: {text!r}")
