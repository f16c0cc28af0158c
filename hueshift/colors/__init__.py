"""
Hueshift Color Classes
======================

Immutable color values for the RGB, HSL and HSV color spaces.

Usage
-----
>>> from hueshift.colors import rgb, hsl, parse_hex
>>>
>>> color = rgb(170, 187, 204)
>>> color.r
170
>>> color.convert("hsl")
ColorHSL(h=210.0, s=0.25..., l=0.733...)
>>> parse_hex("#abc") == color
True
>>> color.to_hex()
'#aabbcc'

Notes
-----
- Values are frozen after construction; assignment raises AttributeError.
- convert() only accepts one of the two other spaces; anything else raises
  UnsupportedConversion.
- Only ColorRGB has to_hex().
- No clamping is performed on construction.
"""

from .color_base import ColorBase, ChannelDescriptor
from .rgb import ColorRGB
from .hsl import ColorHSL
from .hsv import ColorHSV
from .color import (
    color_convert,
    color_class,
    color_registry,
    rgb,
    hsl,
    hsv,
    parse_hex,
    make_color,
)

__all__ = [
    'ColorBase',
    'ChannelDescriptor',
    'ColorRGB',
    'ColorHSL',
    'ColorHSV',
    'color_convert',
    'color_class',
    'color_registry',
    'rgb',
    'hsl',
    'hsv',
    'parse_hex',
    'make_color',
]
