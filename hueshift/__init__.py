"""Hueshift: RGB, HSL and HSV color values and conversions."""

from .errors import UnsupportedConversion, InvalidHue, MalformedHexInput
from .types.color_types import ColorSpace
from .colors import (
    ColorBase,
    ColorRGB,
    ColorHSL,
    ColorHSV,
    rgb,
    hsl,
    hsv,
    parse_hex,
    make_color,
    color_class,
)
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    np_hsl_to_hsv,
    np_hsv_to_hsl,
    parse_hex_components,
    rgb_to_hex,
    convert,
    np_convert,
)

__version__ = "0.1.0"

__all__ = [
    # errors
    "UnsupportedConversion",
    "InvalidHue",
    "MalformedHexInput",
    # color values
    "ColorSpace",
    "ColorBase",
    "ColorRGB",
    "ColorHSL",
    "ColorHSV",
    "rgb",
    "hsl",
    "hsv",
    "parse_hex",
    "make_color",
    "color_class",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "np_rgb_to_hsv",
    "np_hsv_to_rgb",
    "np_hsl_to_hsv",
    "np_hsv_to_hsl",
    "parse_hex_components",
    "rgb_to_hex",
    "convert",
    "np_convert",
]
