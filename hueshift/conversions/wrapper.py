import logging
from typing import Any, Callable, Tuple

import numpy as np

from ..errors import UnsupportedConversion
from ..types.color_types import ColorSpace, Scalar
from ..utils.dimension import get_dimension

from .to_rgb import hsl_to_rgb, hsv_to_rgb, np_hsl_to_rgb, np_hsv_to_rgb
from .to_hsv import rgb_to_hsv, hsl_to_hsv, np_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import rgb_to_hsl, hsv_to_hsl, np_rgb_to_hsl, np_hsv_to_hsl

logger = logging.getLogger(__name__)

ScalarConversion = Callable[[Scalar, Scalar, Scalar], Tuple[Scalar, Scalar, Scalar]]
ArrayConversion = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

CONVERT_SCALAR: dict[tuple[ColorSpace, ColorSpace], ScalarConversion] = {
    (ColorSpace.RGB, ColorSpace.HSL): rgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_rgb,
    (ColorSpace.RGB, ColorSpace.HSV): rgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
}

CONVERT_NUMPY: dict[tuple[ColorSpace, ColorSpace], ArrayConversion] = {
    (ColorSpace.RGB, ColorSpace.HSL): np_rgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): np_hsl_to_rgb,
    (ColorSpace.RGB, ColorSpace.HSV): np_rgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.RGB): np_hsv_to_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
}


def resolve_spaces(from_space: Any, to_space: Any) -> tuple[ColorSpace, ColorSpace]:
    """
    Validate a (source, target) pair of space identifiers.

    Raises:
        UnsupportedConversion: if either side is unknown or both are the same
    """
    fs = ColorSpace.parse(from_space)
    ts = ColorSpace.parse(to_space)
    if fs is None or ts is None or fs == ts:
        raise UnsupportedConversion(from_space, to_space)
    return fs, ts


def get_converter(from_space: Any, to_space: Any) -> ScalarConversion:
    key = resolve_spaces(from_space, to_space)
    logger.debug("Dispatching %s -> %s to %s", key[0].value, key[1].value, CONVERT_SCALAR[key].__name__)
    return CONVERT_SCALAR[key]


def get_np_converter(from_space: Any, to_space: Any) -> ArrayConversion:
    key = resolve_spaces(from_space, to_space)
    logger.debug("Dispatching %s -> %s to %s", key[0].value, key[1].value, CONVERT_NUMPY[key].__name__)
    return CONVERT_NUMPY[key]


def convert(
    color: Tuple[Scalar, Scalar, Scalar],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> Tuple[Scalar, Scalar, Scalar]:
    """
    Convert a single three-component color between RGB, HSL and HSV.

    Args:
        color: Component triple in the source space
        from_space: Source space ("rgb", "hsl", "hsv" or a ColorSpace)
        to_space: Target space, different from the source

    Returns:
        Component triple in the target space
    """
    converter = get_converter(from_space, to_space)
    if get_dimension(color) != 3:
        raise ValueError(f"Expected a 3-component color, got {color!r}")
    a, b, c = color
    return converter(a, b, c)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """
    Vectorized: Convert an array of colors with shape (..., 3).

    RGB results come back as int64, HSL/HSV results as float64.
    """
    converter = get_np_converter(from_space, to_space)
    arr = np.asarray(color, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    return converter(arr[..., 0], arr[..., 1], arr[..., 2])
