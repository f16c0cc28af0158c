from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple

import numpy as np

from ..types.color_types import ColorSpace, Scalar, HUE_SPACES
from ..utils import get_dimension, is_real_number


class ChannelDescriptor:
    """Read-only named access to one component of a color's value tuple.

    Example:
        class ColorRGB(ColorBase):
            r = ChannelDescriptor(0)
    """

    def __init__(self, index: int):
        self.index = index
        self.public_name: str = f"channel_{index}"  # May be overwritten by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.public_name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._value[self.index]

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"'{self.public_name}' is read-only on {obj.__class__.__name__}"
        )

    def __repr__(self) -> str:
        return f"ChannelDescriptor({self.public_name!r}, index={self.index})"


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, str, str]]
    convert:    Callable[[ColorBase, ColorSpace | str], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                value = value.convert(self.mode)
            value = value.value

        if get_dimension(value) != self.num_channels:
            raise ValueError(f"{self.mode.value} expects {self.num_channels} components, got {value!r}")

        components = []
        for name, v in zip(self.channels, value):
            if not is_real_number(v):
                raise TypeError(f"{self.mode.value} component {name!r} must be a real number, got {v!r}")
            components.append(v.item() if isinstance(v, np.generic) else v)

        self._value: Tuple[Scalar, Scalar, Scalar] = tuple(components)  # type: ignore[assignment]

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, Scalar, Scalar]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def as_dict(self) -> dict[str, Scalar]:
        return dict(zip(self.channels, self._value))

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
