"""Single-color adjustments in HSL space (saturation, lightness, hue)."""

from __future__ import annotations

from boundednumbers import clamp01
from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import FormatType, PERCENT_100
from .color import make_color
from .color_base import Color

DEFAULT_AMOUNT = 10


def from_unit_hsl(h: float, s: float, l: float, alpha: float) -> Color:
    """Build a Color from [0, 1] HSL fractions, keeping ``alpha``."""
    return make_color({"h": h, "s": s, "l": l, "a": alpha}, format_type=FormatType.FLOAT)


def _shift(color, channel: str, delta: float) -> Color:
    base = make_color(color)
    hsl = base.to_hsl()
    hsl[channel] = clamp01(hsl[channel] + delta)
    return from_unit_hsl(hsl["h"], hsl["s"], hsl["l"], base.alpha)


def desaturate(color, amount: float = DEFAULT_AMOUNT) -> Color:
    """Lower HSL saturation by ``amount`` percent points."""
    return _shift(color, "s", -amount / PERCENT_100)


def saturate(color, amount: float = DEFAULT_AMOUNT) -> Color:
    """Raise HSL saturation by ``amount`` percent points."""
    return _shift(color, "s", amount / PERCENT_100)


def greyscale(color) -> Color:
    return desaturate(color, PERCENT_100)


def lighten(color, amount: float = DEFAULT_AMOUNT) -> Color:
    """Raise HSL lightness by ``amount`` percent points."""
    return _shift(color, "l", amount / PERCENT_100)


def darken(color, amount: float = DEFAULT_AMOUNT) -> Color:
    """Lower HSL lightness by ``amount`` percent points."""
    return _shift(color, "l", -amount / PERCENT_100)


def complement(color) -> Color:
    """Rotate the hue by half a turn."""
    base = make_color(color)
    hsl = base.to_hsl()
    return from_unit_hsl(cyclic_wrap_float(hsl["h"] + 0.5, 0, 1), hsl["s"], hsl["l"], base.alpha)
