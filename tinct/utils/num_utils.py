import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Shortest text for a number, without a trailing ``.0`` on whole values."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
