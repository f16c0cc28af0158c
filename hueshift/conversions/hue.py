"""Hue angle shared by the RGB -> HSL and RGB -> HSV conversions."""

import numpy as np
from numpy import ndarray as NDArray

from ..utils.num_utils import wrap_hue, np_wrap_hue


def rgb_hue(r: float, g: float, b: float, max_c: float, min_c: float) -> float:
    """
    Hue in degrees for unit RGB components whose max/min are already known.

    The dominant channel picks the sector of the hue wheel: red uses (g - b),
    green (b - r) + 120 and blue (r - g) + 240. Red-dominant colors with more
    blue than green get +360 so the result stays positive.
    """
    delta = max_c - min_c
    if delta == 0:
        return 0.0
    if max_c == r and g >= b:
        hue = 60 * (g - b) / delta
    elif max_c == r:
        hue = 60 * (g - b) / delta + 360
    elif max_c == g:
        hue = 60 * (b - r) / delta + 120
    else:
        hue = 60 * (r - g) / delta + 240
    return wrap_hue(hue)


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, min_c: NDArray) -> NDArray:
    """Vectorized: rgb_hue over broadcast arrays."""
    delta = max_c - min_c
    safe_delta = np.where(delta == 0, 1.0, delta)

    conditions = [
        delta == 0,
        (max_c == r) & (g >= b),
        max_c == r,
        max_c == g,
    ]
    choices = [
        np.zeros_like(delta),
        60 * (g - b) / safe_delta,
        60 * (g - b) / safe_delta + 360,
        60 * (b - r) / safe_delta + 120,
    ]
    hue = np.select(conditions, choices, default=60 * (r - g) / safe_delta + 240)
    return np_wrap_hue(hue)


def unit_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Scale 0-255 RGB components to [0, 1]."""
    return r / 255, g / 255, b / 255


def np_unit_rgb(r, g, b) -> tuple[NDArray, NDArray, NDArray]:
    """Vectorized: Scale 0-255 RGB components to [0, 1], broadcasting them together."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    return r / 255, g / 255, b / 255
