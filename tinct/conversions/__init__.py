"""
Tinct Color Space Conversions
=============================

Pure conversion math between RGB, HSL and HSV plus the bounding rules that
turn raw channel input into [0, 1] fractions.

Features
--------
- Bidirectional conversions: RGB ↔ HSL, RGB ↔ HSV
- Scalar functions for single color conversions
- Vectorized numpy functions for batch processing
- CSS bounding of numbers and percentages (``bound01``)

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        r, g, b in [0, 1] → (h, s, l) in [0, 1]
    np_unit_rgb_to_hsl(r, g, b)

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        r, g, b in [0, 1] → (h, s, v) in [0, 1]
    np_unit_rgb_to_hsv(r, g, b)

HSL → RGB:
    hsl_to_rgb(h, s, l)
        h, s, l in [0, 1] → (r, g, b) in [0, 255]
    np_hsl_to_rgb(h, s, l)

HSV → RGB:
    hsv_to_rgb(h, s, v)
        h, s, v in [0, 1] → (r, g, b) in [0, 255]
    np_hsv_to_rgb(h, s, v)

RGB → Hex:
    rgb_to_hex(r, g, b)
        r, g, b in [0, 255] → "rrggbb"

Bounding
--------
    bound01(value, maximum)
        CSS number/percentage → [0, 1]
    scale_channel(value, maximum, format_type)
        Same, with an explicit FormatType scale

Examples
--------
>>> from tinct.conversions import unit_rgb_to_hsl, hsl_to_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.0, 0.0)
>>> hsl_to_rgb(h, s, l)
(255.0, 0.0, 0.0)
"""

from .numbers import bound01, scale_channel, parse_number, is_percentage

# RGB → HSL conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# RGB → HSV conversions
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

# HSL/HSV → RGB conversions
from .to_rgb import hsl_to_rgb, hsv_to_rgb, np_hsl_to_rgb, np_hsv_to_rgb

# RGB → Hex
from .to_hex import rgb_to_hex, expand_hex

from ..types.format_type import FormatType

__all__ = [
    # Bounding
    'bound01',
    'scale_channel',
    'parse_number',
    'is_percentage',

    # RGB → HSL / HSV
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSL / HSV → RGB
    'hsl_to_rgb',
    'hsv_to_rgb',
    'np_hsl_to_rgb',
    'np_hsv_to_rgb',

    # Hex
    'rgb_to_hex',
    'expand_hex',

    # Types
    'FormatType',
]
