import math
from numbers import Real
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_MAX


def is_real_number(value: Any) -> bool:
    """True for ints, floats and numpy scalars; bools are rejected."""
    return isinstance(value, (Real, np.number)) and not isinstance(value, (bool, np.bool_))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized: round_half_up over an array, returning an int64 array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(np.int64)


def wrap_hue(hue: float) -> float:
    """Fold a hue that landed on (or past) 360 back into [0, 360)."""
    if hue >= HUE_MAX or hue < 0:
        return hue % HUE_MAX
    return hue


def np_wrap_hue(hue: NDArray) -> NDArray:
    """Vectorized: Fold hues into [0, 360)."""
    return np.mod(np.asarray(hue, dtype=float), HUE_MAX)
