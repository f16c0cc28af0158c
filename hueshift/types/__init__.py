from .color_types import ColorSpace, Scalar, Triple, HUE_SPACES, is_hue_space

__all__ = ["ColorSpace", "Scalar", "Triple", "HUE_SPACES", "is_hue_space"]
