from ..utils.num_utils import round_half_up


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels in [0, 255] to a 6-digit lowercase hex string.

    Each channel is rounded half up; there is no leading ``#``.

    >>> rgb_to_hex(255, 127.5, 0)
    'ff8000'
    """
    return "".join(f"{round_half_up(c):02x}" for c in (r, g, b))


def expand_hex(hex_value: str) -> str:
    """Expand a 3-digit hex string by doubling each digit; 6-digit input is returned as is."""
    hex_value = hex_value.lstrip("#").lower()
    if len(hex_value) == 3:
        return "".join(c * 2 for c in hex_value)
    return hex_value
