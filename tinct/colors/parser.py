"""
String color parser.

Turns CSS-like color text into an unnormalized structured record. Numbers are
kept as the strings the caller wrote ("50%", "0.5", "255") so that string and
record inputs go through the same bounding rules later on.

Accepted forms (case-insensitive)::

    red  transparent  #f00  #ff0000  f00  ff0000
    rgb(255, 0, 0)   rgba(255, 0, 0, .5)   rgb 255 0 0
    hsl(0, 100%, 50%)   hsla(0, 100%, 50%, .5)   hsv(0, 100%, 100%)

Parentheses are optional and commas and whitespace are interchangeable as
separators.
"""

from __future__ import annotations

import re
import string
from typing import Dict, Iterator, List, NamedTuple, Optional

from ..conversions.numbers import NUMBER_PATTERN
from ..types.color_types import ChannelValue
from .names import NAMES

ColorRecordDict = Dict[str, ChannelValue]

# Characters stripped before parsing
LEADING_JUNK = string.whitespace + ",#"

# Function name → record keys, in order
FUNCTIONS: Dict[str, tuple] = {
    "rgb": ("r", "g", "b"),
    "rgba": ("r", "g", "b", "a"),
    "hsl": ("h", "s", "l"),
    "hsla": ("h", "s", "l", "a"),
    "hsv": ("h", "s", "v"),
}

HEX_DIGITS = frozenset(string.hexdigits.lower())


class Token(NamedTuple):
    kind: str
    text: str


_TOKEN_SPEC = [
    ("NUMBER", NUMBER_PATTERN),
    ("NAME", r"[a-z]+"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("COMMA", r","),
    ("WS", r"\s+"),
]
_TOKEN_RE = re.compile("|".join(f"(?P<{kind}>{pattern})" for kind, pattern in _TOKEN_SPEC))


class TokenizeError(Exception):
    """Raised internally when the text holds a character no token accepts."""


def tokenize(text: str) -> Iterator[Token]:
    """Split color text into tokens; raises TokenizeError on stray characters."""
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise TokenizeError(f"Unexpected character {text[pos]!r} at {pos}")
        yield Token(match.lastgroup, match.group())
        pos = match.end()


def normalize_input(text: str) -> str:
    """Trim leading whitespace/commas/``#`` and trailing whitespace, then lower-case."""
    return text.lstrip(LEADING_JUNK).rstrip().lower()


def parse_functional(text: str) -> Optional[ColorRecordDict]:
    """
    Parse ``name opener number (separator number)* [ws] [")"]``.

    The opener is one or more whitespace or ``(`` tokens, separators are one
    or more whitespace or comma tokens, and the count of numbers must match
    the function's arity.
    """
    try:
        tokens: List[Token] = list(tokenize(text))
    except TokenizeError:
        return None

    if not tokens or tokens[0].kind != "NAME" or tokens[0].text not in FUNCTIONS:
        return None
    keys = FUNCTIONS[tokens[0].text]

    pos = 1
    opener_end = pos
    while opener_end < len(tokens) and tokens[opener_end].kind in ("WS", "LPAREN"):
        opener_end += 1
    if opener_end == pos:
        return None
    pos = opener_end

    numbers: List[str] = []
    while pos < len(tokens) and tokens[pos].kind == "NUMBER":
        numbers.append(tokens[pos].text)
        pos += 1
        if len(numbers) == len(keys):
            break
        separator_end = pos
        while separator_end < len(tokens) and tokens[separator_end].kind in ("WS", "COMMA"):
            separator_end += 1
        if separator_end == pos:
            return None
        pos = separator_end

    if len(numbers) != len(keys):
        return None

    # Optional trailing whitespace and closing parenthesis, then nothing else
    if pos < len(tokens) and tokens[pos].kind == "WS":
        pos += 1
    if pos < len(tokens) and tokens[pos].kind == "RPAREN":
        pos += 1
    if pos != len(tokens):
        return None

    return dict(zip(keys, numbers))


def parse_hex(text: str) -> Optional[ColorRecordDict]:
    """Parse a bare 6- or 3-digit hex code (the ``#`` is already stripped)."""
    if not text or not set(text) <= HEX_DIGITS:
        return None
    if len(text) == 6:
        pairs = (text[0:2], text[2:4], text[4:6])
    elif len(text) == 3:
        pairs = tuple(c * 2 for c in text)
    else:
        return None
    return dict(zip("rgb", (int(pair, 16) for pair in pairs)))


def parse_color_string(text: str) -> Optional[ColorRecordDict]:
    """
    Decompose color text into a structured record.

    Args:
        text: Color text such as ``"red"``, ``"#f00"`` or ``"hsl(0, 100%, 50%)"``

    Returns:
        dict with keys r/g/b, h/s/l or h/s/v (plus ``a`` where given), or
        None when the text matches no supported form
    """
    color = normalize_input(text)
    color = NAMES.get(color, color)

    if color == "transparent":
        return {"r": 0, "g": 0, "b": 0, "a": 0}

    record = parse_functional(color)
    if record is not None:
        return record
    return parse_hex(color)
