import numpy as np
from numpy import ndarray as NDArray

from .hue import rgb_hue, np_rgb_hue, unit_rgb, np_unit_rgb

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = unit_rgb(r, g, b)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    if lightness == 0 or delta == 0:
        saturation = 0.0
    elif lightness <= 0.5:
        saturation = delta / (2 * lightness)
    else:
        saturation = delta / (2 - 2 * lightness)

    return rgb_hue(r, g, b, max_c, min_c), saturation, lightness


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = np_unit_rgb(r, g, b)
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(
            lightness <= 0.5,
            delta / (2 * lightness),
            delta / (2 - 2 * lightness),
        )
    saturation = np.where((lightness == 0) | (delta == 0), 0.0, saturation)

    hue = np_rgb_hue(r, g, b, max_c, min_c)
    return np.stack([hue, saturation, lightness], axis=-1)

## HSV to HSL conversions

def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to HSL. The hue passes through unchanged.

    Args:
        h: Hue in [0, 360)
        s: HSV saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue, HSL saturation [0,1], lightness [0,1])
    """
    lightness = v * (1 - s / 2)
    if lightness == 0 or lightness == 1:
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1 - lightness)
    return h, saturation, lightness


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL, returning an array of shape (..., 3)."""
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(v, dtype=float),
    )
    lightness = v * (1 - s / 2)
    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = (v - lightness) / np.minimum(lightness, 1 - lightness)
    saturation = np.where((lightness == 0) | (lightness == 1), 0.0, saturation)
    return np.stack([h, saturation, lightness], axis=-1)
