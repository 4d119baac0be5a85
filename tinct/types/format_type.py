# No dependencies
from enum import Enum


class FormatType(str, Enum):
    """Explicit scale of the channel values in a structured record."""
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


RGB_255 = 255
HUE_360 = 360
PERCENT_100 = 100
ALPHA_1 = 1

# Absolute maximum of every record key, used for bounding and FormatType.INT
channel_maxima = {
    "r": RGB_255,
    "g": RGB_255,
    "b": RGB_255,
    "h": HUE_360,
    "s": PERCENT_100,
    "l": PERCENT_100,
    "v": PERCENT_100,
    "a": ALPHA_1,
}
