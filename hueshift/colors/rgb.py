from typing import ClassVar, Tuple

from ..conversions.hex import rgb_to_hex
from ..types.color_types import ColorSpace
from .color_base import ColorBase, ChannelDescriptor


class ColorRGB(ColorBase):
    """RGB color, components in [0, 255]. The only variant with hex output."""

    __slots__ = ()

    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    r = ChannelDescriptor(0)
    g = ChannelDescriptor(1)
    b = ChannelDescriptor(2)

    def to_hex(self) -> str:
        """Return the color as a lowercase ``#rrggbb`` string."""
        return rgb_to_hex(self.r, self.g, self.b)


RGB = ColorRGB
