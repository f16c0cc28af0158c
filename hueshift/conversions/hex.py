"""Hex color code parsing and serialization (``#rrggbb`` / ``#rgb``)."""

import re

from ..errors import MalformedHexInput
from ..types.color_types import RGB_MAX
from ..utils.num_utils import round_half_up

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


def parse_hex_components(text: str) -> tuple[int, int, int]:
    """
    Parse a hex color code into 0-255 RGB components.

    One leading ``#`` is optional; three-digit shorthand expands each digit
    to a pair (``"abc"`` -> ``"aabbcc"``).

    Raises:
        MalformedHexInput: if the digits are not 3 or 6 hex characters
    """
    if not isinstance(text, str):
        raise MalformedHexInput(text)

    digits = text[1:] if text.startswith("#") else text
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    if not _HEX_DIGITS.fullmatch(digits):
        raise MalformedHexInput(text)

    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Format RGB components as a lowercase ``#rrggbb`` string.

    Components are rounded half-up first. A channel that rounds outside
    0-255 cannot be written as two hex digits and raises ValueError.
    """
    channels = [round_half_up(c) for c in (r, g, b)]
    for c in channels:
        if not 0 <= c <= RGB_MAX:
            raise ValueError(f"RGB component {c} out of range for hex output")
    return "#" + "".join(f"{c:02x}" for c in channels)
