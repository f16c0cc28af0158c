from typing import ClassVar, Tuple

from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelDescriptor


class ColorHSV(ColorBase):
    __slots__ = ()

    mode:     ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[str, str, str]] = ("h", "s", "v")

    h = ChannelDescriptor(0)
    s = ChannelDescriptor(1)
    v = ChannelDescriptor(2)


HSV = ColorHSV
