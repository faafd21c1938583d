"""
Color Adjuster.

Derives a displayed color from a base color plus lightness and brightness
deltas. Every call starts from the base color, so repeated slider events
with the same deltas always produce the same result.

Usage:
    apply_lightness_brightness("#336699", 20, -10)  # -> "#587ca1"
"""

import math
import string
from typing import Optional, Tuple


RGB = Tuple[int, int, int]

_HEX_DIGITS = set(string.hexdigits)


def clamp_channel(value: float) -> float:
    """Clamp a channel value to [0, 255]."""
    return max(0, min(255, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: Optional[str]) -> Optional[RGB]:
    """
    Decode "#rgb" / "#rrggbb" (leading "#" optional) to an (r, g, b) triple.

    Returns:
        The triple, or None for missing, wrong-length or non-hex input
    """
    if not hex_color:
        return None
    h = hex_color.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6 or not set(h) <= _HEX_DIGITS:
        return None
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode channels as lowercase "#rrggbb"."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def normalize_hex(hex_color: str) -> str:
    """Expand and lowercase a valid hex color; invalid input is returned unchanged."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    return rgb_to_hex(*rgb)


def apply_lightness_brightness(base_hex: str, lightness_delta: float,
                               brightness_delta: float) -> str:
    """
    Apply brightness, then lightness, to a base color.

    Brightness scales every channel by (100 + brightness) / 100. Positive
    lightness blends toward white by lightness / 100; negative lightness
    scales toward black by 1 + lightness / 100.

    Args:
        base_hex: Base color ("#rgb" or "#rrggbb")
        lightness_delta: -100..100
        brightness_delta: Percentage change in intensity

    Returns:
        Adjusted "#rrggbb" color, or ``base_hex`` unchanged if it does not
        parse. Zero deltas return a valid 6-digit ``base_hex`` as given.
    """
    rgb = hex_to_rgb(base_hex)
    if rgb is None:
        return base_hex
    if lightness_delta == 0 and brightness_delta == 0 and len(base_hex.strip().lstrip("#")) == 6:
        return base_hex

    b_factor = (100 + brightness_delta) / 100
    channels = [c * b_factor for c in rgb]

    l_factor = lightness_delta / 100
    if l_factor > 0:
        channels = [c + (255 - c) * l_factor for c in channels]
    elif l_factor < 0:
        f = 1 + l_factor
        channels = [c * f for c in channels]

    r, g, b = (clamp_channel(_round_half_up(c)) for c in channels)
    return rgb_to_hex(r, g, b)
