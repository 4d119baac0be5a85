from __future__ import annotations
from typing import Literal, Mapping, Tuple, Union

Scalar = int | float
ChannelValue = Union[int, float, str]
ColorRecord = Mapping[str, ChannelValue]
UnitTriple = Tuple[float, float, float]
# r, g, b in [0, 255]
RGBTriple = Tuple[float, float, float]
ColorSpace = Literal["rgb", "hsv", "hsl"]

# Checked in this order; the first complete key set wins
SPACE_KEYS: Tuple[Tuple[ColorSpace, Tuple[str, str, str]], ...] = (
    ("rgb", ("r", "g", "b")),
    ("hsv", ("h", "s", "v")),
    ("hsl", ("h", "s", "l")),
)


def detect_space(record: ColorRecord) -> ColorSpace | None:
    """
    Return the color space whose three keys are all present in ``record``.

    Args:
        record: Structured color record

    Returns:
        "rgb", "hsv" or "hsl", or None when no key set is complete
    """
    for space, keys in SPACE_KEYS:
        if all(key in record for key in keys):
            return space
    return None
