from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from numbers import Real
from typing import Any, Dict, Optional, Tuple, Union

from boundednumbers import clamp

from ..conversions import scale_channel, hsl_to_rgb, hsv_to_rgb
from ..exceptions import AmbiguousRatioWarning, InvalidChannelError
from ..types.color_types import ChannelValue, ColorRecord, detect_space
from ..types.format_type import FormatType, RGB_255, channel_maxima
from ..utils.num_utils import round_half_up
from ..utils.stack import external_stacklevel
from .color_base import Color
from .parser import parse_color_string

logger = logging.getLogger(__name__)

ColorInput = Union[str, ColorRecord, Color]

# Opaque white, used when the input cannot be interpreted
DEFAULT_RGB = (255.0, 255.0, 255.0)
FULL_SCALE = "1.0"
# Record keys the full-scale rewrite applies to; alpha reads the same either way
RATIO_KEYS = frozenset("rgbhslv")


def mark_full_scale(record: ColorRecord) -> Dict[str, ChannelValue]:
    """
    Copy ``record`` with every color channel equal to the number 1 replaced by ``"1.0"``.

    Numeric records cannot tell "1 out of 255" from "1.0 as a fraction"; the
    decimal string makes the bounding step read the value as 100%. Alpha and
    unknown keys are left alone. Issues AmbiguousRatioWarning naming the
    rewritten keys.
    """
    marked = dict(record)
    rewritten = [
        key for key, value in record.items()
        if key in RATIO_KEYS and isinstance(value, Real) and not isinstance(value, bool) and value == 1
    ]
    for key in rewritten:
        marked[key] = FULL_SCALE

    if rewritten:
        warnings.warn(
            f"Channel(s) {', '.join(rewritten)} equal to 1 were read as 100%. "
            "Pass format_type=FormatType.INT/FLOAT/PERCENTAGE for an explicit scale, "
            "or skip_ratio=True to read them as the absolute value 1.",
            AmbiguousRatioWarning,
            stacklevel=external_stacklevel(),
        )
    return marked


def record_to_rgb(
    record: ColorRecord,
    format_type: Optional[FormatType] = None,
) -> Tuple[Optional[Tuple[float, float, float]], float]:
    """
    Resolve a structured record to RGB in [0, 255] and an alpha fraction.

    Returns:
        ((r, g, b) or None if no key set is complete, alpha)

    Raises:
        InvalidChannelError: if a channel is not a finite number.
    """
    def unit(key: str) -> float:
        return scale_channel(record[key], channel_maxima[key], format_type)

    space = detect_space(record)
    if space == "rgb":
        rgb = (unit("r") * RGB_255, unit("g") * RGB_255, unit("b") * RGB_255)
    elif space == "hsv":
        rgb = hsv_to_rgb(unit("h"), unit("s"), unit("v"))
    elif space == "hsl":
        rgb = hsl_to_rgb(unit("h"), unit("s"), unit("l"))
    else:
        rgb = None

    alpha = unit("a") if "a" in record else 1.0
    return rgb, alpha


def input_to_rgb(
    color: Any,
    format_type: Optional[FormatType] = None,
) -> Tuple[Tuple[float, float, float], float, bool]:
    """
    Resolve any supported input to clamped RGB, alpha and the ok flag.

    Unrecognized input resolves to opaque white with ok set to False.
    """
    record: Any = color
    if isinstance(color, str):
        record = parse_color_string(color)
        # String numbers carry their own units
        format_type = None
        if record is None:
            logger.debug("Unrecognized color string %r", color)
            return DEFAULT_RGB, 1.0, False

    if not isinstance(record, Mapping):
        logger.debug("Unsupported color input type %s", type(color).__name__)
        return DEFAULT_RGB, 1.0, False

    try:
        rgb, alpha = record_to_rgb(record, format_type)
    except InvalidChannelError as exc:
        logger.debug("Invalid channel in color input %r: %s", color, exc)
        return DEFAULT_RGB, 1.0, False

    ok = rgb is not None
    if rgb is None:
        logger.debug("No complete r/g/b, h/s/v or h/s/l key set in %r", color)
        rgb = DEFAULT_RGB

    r, g, b = (clamp(c, 0.0, float(RGB_255)) for c in rgb)
    return (r, g, b), alpha, ok


def make_color(
    color: ColorInput,
    *,
    skip_ratio: bool = False,
    format_type: Optional[Union[FormatType, str]] = None,
) -> Color:
    """
    Build a :class:`Color` from a string, a structured record or another Color.

    Args:
        color: Color text (``"red"``, ``"#f00"``, ``"rgba(255, 0, 0, .5)"``...),
            a mapping with r/g/b, h/s/v or h/s/l keys (plus optional ``a``),
            or an existing Color, which is returned unchanged.
        skip_ratio: For records read without ``format_type``, keep a literal 1
            as the absolute value 1 instead of reading it as 100%.
        format_type: Explicit scale of record channels. FLOAT means every
            channel (hue included) is a [0, 1] fraction, INT means r/g/b in
            [0, 255], h in [0, 360] and s/l/v in [0, 100], PERCENTAGE means
            every channel is in [0, 100]. Alpha is always a [0, 1] fraction
            under FLOAT and INT. Ignored for string input.

    Returns:
        Color; check ``ok`` to tell parsed input from the white fallback.
    """
    if isinstance(color, Color):
        return color

    if format_type is not None:
        format_type = FormatType(format_type)
    elif isinstance(color, Mapping) and not skip_ratio:
        color = mark_full_scale(color)

    (r, g, b), alpha, ok = input_to_rgb(color, format_type)

    # Keep [0, 255] channels from being read back as [0, 1] fractions
    r, g, b = (round_half_up(c) if c < 1 else c for c in (r, g, b))

    return Color(r, g, b, alpha, ok=ok)
