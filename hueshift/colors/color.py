from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from ..conversions import get_converter, parse_hex_components
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry
from .rgb import ColorRGB
from .hsl import ColorHSL
from .hsv import ColorHSV

color_registry: dict[ColorSpace, type[ColorBase]] = build_registry(ColorRGB, ColorHSL, ColorHSV)


def color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    space = ColorSpace.parse(color_space)
    if space is None:
        raise ValueError(f"Unsupported color space: {color_space!r}")
    return color_registry[space]


def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    """
    Convert this color to one of the other two color spaces.

    Args:
        to_space: Target color space ("rgb", "hsl", "hsv" or a ColorSpace),
            which must differ from this color's own space

    Returns:
        New ColorBase instance in the target space; self is left untouched

    Raises:
        UnsupportedConversion: for self-targets and unknown identifiers
    """
    converter = get_converter(self.mode, to_space)
    result = converter(*self.value)
    return color_class(to_space)(result)

ColorBase.convert = color_convert


def _components(cls: type[ColorBase], args: tuple, kwargs: dict) -> Any:
    if kwargs:
        if args:
            raise TypeError(f"{cls.mode.value}() takes either positional or keyword components, not both")
        return _from_mapping(cls, kwargs)
    if len(args) == 3:
        return args
    if len(args) == 1:
        source = args[0]
        if isinstance(source, ColorBase):
            if source.mode != cls.mode:
                raise TypeError(
                    f"{cls.mode.value}() got a {source.mode.value} color; use .convert({cls.mode.value!r})"
                )
            return source
        if isinstance(source, Mapping):
            return _from_mapping(cls, source)
        return source
    raise TypeError(f"{cls.mode.value}() expects 3 components or a mapping of {cls.channels}, got {len(args)} arguments")


def _from_mapping(cls: type[ColorBase], mapping: Mapping[str, Any]) -> tuple:
    missing = [name for name in cls.channels if name not in mapping]
    extra = [key for key in mapping if key not in cls.channels]
    if missing or extra:
        raise TypeError(
            f"{cls.mode.value}() expects keys {cls.channels}; missing {missing}, unexpected {extra}"
        )
    return tuple(mapping[name] for name in cls.channels)


def rgb(*args: Any, **kwargs: Any) -> ColorRGB:
    """
    Create an RGB color.

    Accepts ``rgb(r, g, b)``, ``rgb((r, g, b))``, ``rgb({"r": r, "g": g, "b": b})``
    or ``rgb(r=r, g=g, b=b)``.
    """
    return ColorRGB(_components(ColorRGB, args, kwargs))


def hsl(*args: Any, **kwargs: Any) -> ColorHSL:
    """Create an HSL color. Same call forms as :func:`rgb` with keys h, s, l."""
    return ColorHSL(_components(ColorHSL, args, kwargs))


def hsv(*args: Any, **kwargs: Any) -> ColorHSV:
    """Create an HSV color. Same call forms as :func:`rgb` with keys h, s, v."""
    return ColorHSV(_components(ColorHSV, args, kwargs))


def parse_hex(text: str) -> ColorRGB:
    """Parse ``#rrggbb``, ``#rgb`` (``#`` optional) into an RGB color."""
    return ColorRGB(parse_hex_components(text))


def make_color(color_space: ColorSpace | str, *args: Any, **kwargs: Any) -> ColorBase:
    """Create a color of the given space, e.g. ``make_color("hsl", 33, 0.22, 0.44)``."""
    cls = color_class(color_space)
    return cls(_components(cls, args, kwargs))
