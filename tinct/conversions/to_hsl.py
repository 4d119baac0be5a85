import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import UnitTriple


def unit_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue of a chromatic color as a fraction of a full turn.

    Shared by the HSL and HSV conversions; ``delta`` must be non-zero.
    """
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6


def unit_rgb_to_hsl(r: float, g: float, b: float) -> UnitTriple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue, saturation, lightness), each in [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        # achromatic
        return 0.0, 0.0, lightness

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    return unit_hue(r, g, b, max_c, delta), saturation, lightness


def np_unit_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized :func:`unit_hue`; entries with zero delta get hue 0."""
    hue = np.zeros_like(max_c)
    chromatic = delta > 0
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & (max_c == g) & ~mask_r
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_r] += np.where(g[mask_r] < b[mask_r], 6, 0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    return hue / 6


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsl: array of shape (..., 3): (hue, saturation, lightness) in [0, 1]
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

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    high = (delta > 0) & (lightness > 0.5)
    low = (delta > 0) & ~high
    saturation[high] = delta[high] / (2 - max_c[high] - min_c[high])
    saturation[low] = delta[low] / (max_c[low] + min_c[low])

    hue = np_unit_hue(r, g, b, max_c, delta)
    return np.stack([hue, saturation, lightness], axis=-1)
