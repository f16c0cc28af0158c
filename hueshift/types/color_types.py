from __future__ import annotations
from enum import Enum
from typing import Any, Tuple, Union

Scalar = Union[int, float]
Triple = Tuple[Scalar, Scalar, Scalar]

HUE_MAX = 360
RGB_MAX = 255
SECTOR_DEGREES = 60


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"

    @classmethod
    def parse(cls, space: Any) -> ColorSpace | None:
        """
        Resolve a space identifier to a ColorSpace member.

        Accepts members and case-insensitive strings. Returns None for anything
        that does not name one of the three spaces.
        """
        if isinstance(space, cls):
            return space
        if isinstance(space, str):
            try:
                return cls(space.strip().lower())
            except ValueError:
                return None
        return None


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV}


def is_hue_space(color_space: Any) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: ColorSpace member or string
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace.parse(color_space) in HUE_SPACES
