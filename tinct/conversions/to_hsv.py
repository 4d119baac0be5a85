import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitTriple
from .to_hsl import unit_hue, np_unit_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> UnitTriple:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue, saturation, value), each in [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    saturation = 0.0 if max_c == 0 else delta / max_c
    hue = 0.0 if max_c == min_c else unit_hue(r, g, b, max_c, delta)
    return hue, saturation, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue, saturation, value) in [0, 1]
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    saturation = np.zeros_like(max_c)
    mask = max_c > 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = np_unit_hue(r, g, b, max_c, delta)
    return np.stack([hue, saturation, max_c], axis=-1)
