"""Hue-coded colours for fibers."""
from __future__ import annotations

from math import floor

RGB = tuple[float, float, float]

SATURATION: float = 0.65
LIGHTNESS: float = 0.6


def hue_color(h: float) -> RGB:
    """
    Convert a hue to RGB using fixed saturation and lightness (HSL).

    Args:
        h: Hue in [0, 1].

    Returns:
        (r, g, b) with components in [0, 1].
    """
    a = SATURATION * min(LIGHTNESS, 1.0 - LIGHTNESS)

    def channel(n: int) -> float:
        k = (n + h * 12.0) % 12.0
        return LIGHTNESS - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return channel(0), channel(8), channel(4)


def to_rgb255(color: RGB) -> tuple[int, int, int]:
    """Scale a [0, 1] colour to 0..255 integers (floored)."""
    r, g, b = color
    return floor(r * 255), floor(g * 255), floor(b * 255)
