"""
Tinct Color Objects
===================

Parsing, the immutable :class:`Color` value and the operations that derive
new colors from existing ones.

Usage
-----
>>> from tinct.colors import make_color, lighten, triad
>>> red = make_color("red")
>>> red.to_hex_string()
'#ff0000'
>>> red.ok
True
>>> lighten(red, 20).to_hsl_string()
'hsl(0, 100%, 70%)'
>>> [c.to_hex() for c in triad("#ff0000")]
['ff0000', '00ff00', '0000ff']

Invalid input never raises; it resolves to white with ``ok`` set to False:

>>> make_color("not a color").ok
False

Notes
-----
- Records (mappings) may use r/g/b, h/s/v or h/s/l keys plus optional ``a``.
- A literal 1 in a record is read as 100% unless ``skip_ratio=True`` or an
  explicit ``format_type`` is passed; see :class:`tinct.FormatType`.
- Derived colors keep the alpha of their source.
"""

from .color_base import Color
from .color import make_color
from .names import NAMES, HEX_NAMES
from .parser import parse_color_string
from .adjust import desaturate, saturate, greyscale, lighten, darken, complement
from .harmony import triad, tetrad, splitcomplement, analogous, monochromatic
from .compare import equals, readable

__all__ = [
    'Color',
    'make_color',
    'NAMES',
    'HEX_NAMES',
    'parse_color_string',
    'desaturate',
    'saturate',
    'greyscale',
    'lighten',
    'darken',
    'complement',
    'triad',
    'tetrad',
    'splitcomplement',
    'analogous',
    'monochromatic',
    'equals',
    'readable',
]
