from .color import make_color

# Minimum squared RGB distance for two colors to count as readable together
READABLE_THRESHOLD = 0x28A4


def equals(color1, color2) -> bool:
    """True if both inputs resolve to the same hex code; alpha is ignored."""
    return make_color(color1).to_hex() == make_color(color2).to_hex()


def readable(color1, color2) -> bool:
    """
    Rough contrast check: squared Euclidean distance between the rounded RGB
    triples must exceed ``READABLE_THRESHOLD``. Not a luminance formula.
    """
    a = make_color(color1).to_rgb()
    b = make_color(color2).to_rgb()
    distance = sum((b[k] - a[k]) ** 2 for k in ("r", "g", "b"))
    return distance > READABLE_THRESHOLD
