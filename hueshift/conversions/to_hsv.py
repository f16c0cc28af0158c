import numpy as np
from numpy import ndarray as NDArray

from .hue import rgb_hue, np_rgb_hue, unit_rgb, np_unit_rgb

## RGB to HSV conversions

def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = unit_rgb(r, g, b)
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    saturation = 0.0 if max_c == 0 else 1 - min_c / max_c

    return rgb_hue(r, g, b, max_c, min_c), saturation, max_c


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = np_unit_rgb(r, g, b)
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])

    safe_max = np.where(max_c == 0, 1.0, max_c)
    saturation = np.where(max_c == 0, 0.0, 1 - min_c / safe_max)

    hue = np_rgb_hue(r, g, b, max_c, min_c)
    return np.stack([hue, saturation, max_c], axis=-1)

## HSL to HSV conversions

def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to HSV directly, without going through RGB.

    The hue passes through unchanged.
    """
    value = l + s * min(l, 1 - l)
    saturation = 0.0 if value == 0 else 2 * (1 - l / value)
    return h, saturation, value


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV, returning an array of shape (..., 3)."""
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )
    value = l + s * np.minimum(l, 1 - l)
    safe_value = np.where(value == 0, 1.0, value)
    saturation = np.where(value == 0, 0.0, 2 * (1 - l / safe_value))
    return np.stack([h, saturation, value], axis=-1)
