import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTriple
from ..types.format_type import RGB_255

## HSL to RGB conversions

def hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise HSL channel value for hue offset ``t`` between anchors ``p`` and ``q``."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTriple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in [0, 1]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255], unrounded
    """
    if s == 0:
        # achromatic
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)

    return r * RGB_255, g * RGB_255, b * RGB_255


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    """Vectorized :func:`hue_to_channel`."""
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h, s, l: array-like or scalar, [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    achromatic = s == 0
    r = np.where(achromatic, l, np_hue_to_channel(p, q, h + 1 / 3))
    g = np.where(achromatic, l, np_hue_to_channel(p, q, h))
    b = np.where(achromatic, l, np_hue_to_channel(p, q, h - 1 / 3))

    return np.stack([r, g, b], axis=-1) * RGB_255

## HSV to RGB conversions

def hsv_to_rgb(h: float, s: float, v: float) -> RGBTriple:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in [0, 1]
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255], unrounded
    """
    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sextant = i % 6
    if sextant == 0:
        r, g, b = v, t, p
    elif sextant == 1:
        r, g, b = q, v, p
    elif sextant == 2:
        r, g, b = p, v, t
    elif sextant == 3:
        r, g, b = p, q, v
    elif sextant == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return r * RGB_255, g * RGB_255, b * RGB_255


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        h, s, v: array-like or scalar, [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    i = np.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sextant = i.astype(int) % 6
    masks = [sextant == k for k in range(6)]
    r = np.select(masks, [v, q, p, p, t, v])
    g = np.select(masks, [t, v, v, q, p, p])
    b = np.select(masks, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1) * RGB_255
