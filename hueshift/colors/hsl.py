from typing import ClassVar, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelDescriptor


class ColorHSL(ColorBase):
    __slots__ = ()

    mode:     ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[str, str, str]] = ("h", "s", "l")

    h = ChannelDescriptor(0)
    s = ChannelDescriptor(1)
    l = ChannelDescriptor(2)


HSL = ColorHSL
