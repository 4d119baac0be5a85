"""
Color schemes built by rotating hue (triad, tetrad, ...) or stepping value
(monochromatic). Every function returns a new list starting from the input
color where the scheme includes it.
"""

from __future__ import annotations

from typing import List, Optional

from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import FormatType, HUE_360
from ..utils.default import count_or_default
from .adjust import from_unit_hsl
from .color import make_color
from .color_base import Color

MONOCHROMATIC_STEP = 0.2


def rotations(color, degrees: List[float]) -> List[Color]:
    """
    The input color followed by copies with the hue rotated by each of ``degrees``.

    Saturation, lightness and alpha are kept.
    """
    base = make_color(color)
    hsl = base.to_hsl()
    h = hsl["h"] * HUE_360
    return [base] + [
        from_unit_hsl(cyclic_wrap_float(h + d, 0, HUE_360) / HUE_360, hsl["s"], hsl["l"], base.alpha)
        for d in degrees
    ]


def triad(color) -> List[Color]:
    return rotations(color, [120, 240])


def tetrad(color) -> List[Color]:
    return rotations(color, [90, 180, 270])


def splitcomplement(color) -> List[Color]:
    return rotations(color, [72, 216])


def analogous(color, results: Optional[int] = 6, slices: Optional[int] = 30) -> List[Color]:
    """
    ``results`` colors with neighbouring hues, ``360 / slices`` degrees apart.

    The first entry is the input color. The remaining hues start half a
    ``results``-wide window below the input hue so the input sits near the
    middle of the run.
    """
    results = count_or_default(results, 6, "results")
    slices = count_or_default(slices, 30, "slices")

    base = make_color(color)
    hsl = base.to_hsl()
    part = HUE_360 / slices

    h = (hsl["h"] * HUE_360 - (int(part * results) >> 1) + 720) % HUE_360
    ret = [base]
    for _ in range(results - 1):
        h = (h + part) % HUE_360
        ret.append(from_unit_hsl(h / HUE_360, hsl["s"], hsl["l"], base.alpha))
    return ret


def monochromatic(color, results: Optional[int] = 6) -> List[Color]:
    """``results`` colors sharing hue and saturation, value stepping by 0.2 (mod 1)."""
    results = count_or_default(results, 6, "results")

    base = make_color(color)
    hsv = base.to_hsv()
    h, s, v = hsv["h"], hsv["s"], hsv["v"]

    ret = []
    for _ in range(results):
        ret.append(make_color({"h": h, "s": s, "v": v, "a": base.alpha}, format_type=FormatType.FLOAT))
        v = (v + MONOCHROMATIC_STEP) % 1
    return ret
