from __future__ import annotations
from typing import Dict, Tuple, Union

from ..conversions import unit_rgb_to_hsl, unit_rgb_to_hsv, rgb_to_hex
from ..types.format_type import HUE_360, PERCENT_100, RGB_255
from ..utils.num_utils import round_half_up, format_number
from .names import HEX_NAMES


class Color:
    """
    An immutable color: canonical RGB channels in [0, 255] plus alpha in [0, 1].

    Instances are built by :func:`tinct.make_color`; every ``to_*`` view is
    computed from the stored channels on each call.
    """
    __slots__ = ('_r', '_g', '_b', '_alpha', '_ok', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, alpha: float = 1.0, ok: bool = True) -> None:
        self._r = r
        self._g = g
        self._b = b
        self._alpha = alpha
        self._ok = ok

        # no more writes after this point
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def ok(self) -> bool:
        """True if the input was recognized; False means it fell back to white."""
        return self._ok

    @property
    def value(self) -> Tuple[float, float, float, float]:
        return self._r, self._g, self._b, self._alpha

    def _unit_rgb(self) -> Tuple[float, float, float]:
        return self._r / RGB_255, self._g / RGB_255, self._b / RGB_255

    # ------------------ VIEWS ------------------
    def to_hsv(self) -> Dict[str, float]:
        """HSV record with h, s and v as [0, 1] fractions."""
        h, s, v = unit_rgb_to_hsv(*self._unit_rgb())
        return {"h": h, "s": s, "v": v}

    def to_hsv_string(self) -> str:
        h, s, v = unit_rgb_to_hsv(*self._unit_rgb())
        return "hsv({}, {}%, {}%)".format(
            round_half_up(h * HUE_360), round_half_up(s * PERCENT_100), round_half_up(v * PERCENT_100)
        )

    def to_hsl(self) -> Dict[str, float]:
        """HSL record with h, s and l as [0, 1] fractions."""
        h, s, l = unit_rgb_to_hsl(*self._unit_rgb())
        return {"h": h, "s": s, "l": l}

    def to_hsl_string(self) -> str:
        h, s, l = unit_rgb_to_hsl(*self._unit_rgb())
        h, s, l = round_half_up(h * HUE_360), round_half_up(s * PERCENT_100), round_half_up(l * PERCENT_100)
        if self._alpha == 1:
            return f"hsl({h}, {s}%, {l}%)"
        return f"hsla({h}, {s}%, {l}%, {format_number(self._alpha)})"

    def to_hex(self) -> str:
        return rgb_to_hex(self._r, self._g, self._b)

    def to_hex_string(self) -> str:
        return "#" + self.to_hex()

    def to_rgb(self) -> Dict[str, int]:
        """RGB record with channels rounded to integers in [0, 255]."""
        return {
            "r": round_half_up(self._r),
            "g": round_half_up(self._g),
            "b": round_half_up(self._b),
        }

    def to_rgb_string(self) -> str:
        rgb = self.to_rgb()
        if self._alpha == 1:
            return f"rgb({rgb['r']}, {rgb['g']}, {rgb['b']})"
        return f"rgba({rgb['r']}, {rgb['g']}, {rgb['b']}, {format_number(self._alpha)})"

    def to_name(self) -> Union[str, bool]:
        """CSS keyword for this exact hex code, or False if there is none."""
        return HEX_NAMES.get(self.to_hex(), False)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_rgb_string()!r}, ok={self._ok})"
