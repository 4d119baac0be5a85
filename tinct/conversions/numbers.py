import math
import re
from numbers import Real
from typing import Optional

from boundednumbers import clamp, clamp01

from ..exceptions import InvalidChannelError
from ..types.color_types import ChannelValue
from ..types.format_type import FormatType, PERCENT_100

# Distance from the maximum under which a value snaps to exactly 1
FULL_SCALE_TOLERANCE = 1e-6

# Optional sign, integer or decimal, optional percent sign
NUMBER_PATTERN = r"[-+]?(?:\d*\.\d+|\d+)%?"
_NUMBER_RE = re.compile(NUMBER_PATTERN)


def is_percentage(value: ChannelValue) -> bool:
    """Check if a channel value is a percentage string such as ``"50%"``."""
    return isinstance(value, str) and "%" in value


def parse_number(value: ChannelValue) -> float:
    """
    Parse a channel value into a finite float.

    Strings may carry surrounding whitespace and must otherwise match
    ``NUMBER_PATTERN``; the trailing ``%`` sign is dropped here and callers
    decide what the percentage means.

    Raises:
        InvalidChannelError: if the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidChannelError(value)
    if isinstance(value, str):
        token = value.strip()
        if _NUMBER_RE.fullmatch(token) is None:
            raise InvalidChannelError(value)
        number = float(token.rstrip("%"))
    elif isinstance(value, Real):
        number = float(value)
    else:
        raise InvalidChannelError(value)

    if not math.isfinite(number):
        raise InvalidChannelError(value)
    return number


def bound01(value: ChannelValue, maximum: float) -> float:
    """
    Normalize a raw channel value into a fraction of ``maximum``.

    Follows the CSS bounding rules:
        - ``"50%"`` is a percentage of ``maximum``
        - ``"1.0"`` (a decimal string equal to one) means ``"100%"``
        - other values are absolute in ``[0, maximum]``; values below one
          are taken to be fractions already

    Args:
        value: Number or numeric string, optionally ``%``-suffixed
        maximum: Context maximum (255, 100, 360 or 1)

    Returns:
        float in [0, 1]
    """
    if isinstance(value, str) and "." in value and parse_number(value) == 1:
        value = "100%"

    process_percent = is_percentage(value)
    number = clamp(parse_number(value), 0.0, float(maximum))

    if process_percent:
        number = number * (maximum / 100)

    # Handle floating point drift at full scale
    if abs(number - maximum) < FULL_SCALE_TOLERANCE:
        return 1.0
    if number >= 1:
        return (number % maximum) / float(maximum)
    return number


def scale_channel(
    value: ChannelValue,
    maximum: float,
    format_type: Optional[FormatType] = None,
) -> float:
    """
    Normalize a channel value using an explicit scale.

    Args:
        value: Number or numeric string
        maximum: Absolute maximum of the channel (used by ``FormatType.INT``)
        format_type: FLOAT for [0, 1] fractions, INT for absolute values in
            [0, maximum], PERCENTAGE for [0, 100]. None falls back to
            :func:`bound01` and its inference rules.

    Returns:
        float in [0, 1]
    """
    if format_type is None:
        return bound01(value, maximum)

    number = parse_number(value)
    format_type = FormatType(format_type)
    if format_type == FormatType.FLOAT:
        return float(clamp01(number))
    if format_type == FormatType.INT:
        return clamp(number, 0.0, float(maximum)) / maximum
    return clamp(number, 0.0, float(PERCENT_100)) / PERCENT_100
