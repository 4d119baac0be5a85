from .default import value_or_default, count_or_default
from .num_utils import round_half_up, format_number
from .stack import external_stacklevel

__all__ = ["value_or_default", "count_or_default", "round_half_up", "format_number", "external_stacklevel"]
