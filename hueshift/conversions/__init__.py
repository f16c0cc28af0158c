"""
Hueshift Color Space Conversions
================================

Scalar and vectorized (numpy) conversions between RGB, HSL and HSV.

Ranges
------
RGB: r, g, b in [0, 255]. RGB outputs are rounded half-up to integers.
HSL: h in [0, 360); s, l in [0, 1].
HSV: h in [0, 360); s, v in [0, 1].

Conversion Functions
-------------------

RGB -> HSL / HSV:
    rgb_to_hsl(r, g, b), np_rgb_to_hsl(r, g, b)
    rgb_to_hsv(r, g, b), np_rgb_to_hsv(r, g, b)

HSL / HSV -> RGB:
    hsl_to_rgb(h, s, l), np_hsl_to_rgb(h, s, l)
    hsv_to_rgb(h, s, v), np_hsv_to_rgb(h, s, v)   (raise InvalidHue outside [0, 360))

HSL <-> HSV (direct, hue passes through):
    hsl_to_hsv(h, s, l), np_hsl_to_hsv(h, s, l)
    hsv_to_hsl(h, s, v), np_hsv_to_hsl(h, s, v)

Hex:
    parse_hex_components(text), rgb_to_hex(r, g, b)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from hueshift.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(170, 187, 204)
(210.0, 0.25..., 0.733...)
>>> hsl_to_rgb(33, 0.22, 0.44)
(137, 115, 88)
"""

# RGB → HSL / HSV → HSL
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl

# RGB → HSV / HSL → HSV
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv

# HSL / HSV → RGB
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb, hsv_to_rgb, np_hsv_to_rgb

from .hex import parse_hex_components, rgb_to_hex

# High-level API
from .wrapper import convert, np_convert, resolve_spaces, get_converter, get_np_converter

from ..types.color_types import ColorSpace

__all__ = [
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsv_to_hsl',
    'np_hsv_to_hsl',

    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'hsl_to_hsv',
    'np_hsl_to_hsv',

    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    'parse_hex_components',
    'rgb_to_hex',

    'convert',
    'np_convert',
    'resolve_spaces',
    'get_converter',
    'get_np_converter',

    'ColorSpace',
]
