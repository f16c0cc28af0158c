import math

import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidHue
from ..types.color_types import HUE_MAX, RGB_MAX, SECTOR_DEGREES
from ..utils.num_utils import round_half_up, np_round_half_up

## HSL to RGB conversions

def _hsl_channel(p: float, q: float, t: float) -> float:
    # Walk the HSL hexagon: rise, plateau at q, fall, floor at p
    if t < 0:
        t += 1
    elif t > 1:
        t -= 1

    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * 6 * (2 / 3 - t)
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: RGB components in [0, 255], rounded half-up
    """
    if s == 0:
        gray = round_half_up(l * RGB_MAX)
        return gray, gray, gray

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    hk = h / HUE_MAX

    r = _hsl_channel(p, q, hk + 1 / 3)
    g = _hsl_channel(p, q, hk)
    b = _hsl_channel(p, q, hk - 1 / 3)
    return round_half_up(r * RGB_MAX), round_half_up(g * RGB_MAX), round_half_up(b * RGB_MAX)


def _np_hsl_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, np.where(t > 1, t - 1, t))
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * 6 * (2 / 3 - t)],
        default=p,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h, s, l: array-like or scalar; h in [0,360), s and l in [0,1]

    Returns:
        rgb: int64 array of shape (..., 3) in [0, 255]
    """
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    hk = h / HUE_MAX

    rgb = np.stack([
        _np_hsl_channel(p, q, hk + 1 / 3),
        _np_hsl_channel(p, q, hk),
        _np_hsl_channel(p, q, hk - 1 / 3),
    ], axis=-1)

    gray = np.repeat(l[..., None], 3, axis=-1)
    rgb = np.where((s == 0)[..., None], gray, rgb)
    return np_round_half_up(rgb * RGB_MAX)

## HSV to RGB conversions

def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[int, int, int]: RGB components in [0, 255], rounded half-up

    Raises:
        InvalidHue: if h does not fall in one of the six 60 degree sectors
    """
    if not math.isfinite(h):
        raise InvalidHue(h)
    sector = math.floor(h / SECTOR_DEGREES)
    if not 0 <= sector <= 5:
        raise InvalidHue(h)

    f = h / SECTOR_DEGREES - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    rgb = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector]
    return tuple(round_half_up(c * RGB_MAX) for c in rgb)  # type: ignore[return-value]


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        h, s, v: array-like or scalar; h in [0,360), s and v in [0,1]

    Returns:
        rgb: int64 array of shape (..., 3) in [0, 255]

    Raises:
        InvalidHue: if any hue falls outside the six sectors; the first
            offending hue is reported
    """
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(v, dtype=float),
    )
    with np.errstate(invalid="ignore"):
        sector = np.floor(h / SECTOR_DEGREES)
        invalid = ~np.isfinite(h) | (sector < 0) | (sector > 5)
    if invalid.any():
        raise InvalidHue(float(h[invalid].flat[0]))

    f = h / SECTOR_DEGREES - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    masks = [sector == i for i in range(6)]
    r = np.select(masks, [v, q, p, p, t, v])
    g = np.select(masks, [t, v, v, q, p, p])
    b = np.select(masks, [p, p, t, v, v, q])
    return np_round_half_up(np.stack([r, g, b], axis=-1) * RGB_MAX)
