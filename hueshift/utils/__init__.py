from .dimension import get_dimension
from .num_utils import round_half_up, np_round_half_up, wrap_hue, np_wrap_hue, is_real_number

__all__ = [
    "get_dimension",
    "round_half_up",
    "np_round_half_up",
    "wrap_hue",
    "np_wrap_hue",
    "is_real_number",
]
