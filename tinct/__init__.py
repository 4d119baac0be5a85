"""Tinct: color parsing, conversion and derived-color utilities."""

from .colors import (
    Color,
    make_color,
    NAMES,
    HEX_NAMES,
    parse_color_string,
    desaturate,
    saturate,
    greyscale,
    lighten,
    darken,
    complement,
    triad,
    tetrad,
    splitcomplement,
    analogous,
    monochromatic,
    equals,
    readable,
)
from .conversions import (
    bound01,
    scale_channel,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_hex,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_hsl_to_rgb,
    np_hsv_to_rgb,
)
from .types.format_type import FormatType
from .exceptions import ColorParseError, InvalidChannelError, AmbiguousRatioWarning

__version__ = "0.4.3"

__all__ = [
    # color object
    "Color",
    "make_color",
    "FormatType",
    # named colors and parsing
    "NAMES",
    "HEX_NAMES",
    "parse_color_string",
    # derived colors
    "desaturate",
    "saturate",
    "greyscale",
    "lighten",
    "darken",
    "complement",
    "triad",
    "tetrad",
    "splitcomplement",
    "analogous",
    "monochromatic",
    "equals",
    "readable",
    # conversions
    "bound01",
    "scale_channel",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hex",
    "np_unit_rgb_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_hsl_to_rgb",
    "np_hsv_to_rgb",
    # errors
    "ColorParseError",
    "InvalidChannelError",
    "AmbiguousRatioWarning",
    "__version__",
]
