"""HSL, RGB and hex conversions plus color distance.

All functions are pure. Channel values are floats in [0, 1]; hue is in
degrees. Hex strings are the lossy 8-bit form and are never compared for
equality during inversion: distances are taken on continuous RGB.
"""

import math
import re

from chromaseq.exceptions import MalformedColorError
from chromaseq.models import HSL, RGB

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")

MAX_DISTANCE = math.sqrt(3.0)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB using the six 60-degree hue sectors.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation (0.0-1.0)
        l: Lightness (0.0-1.0)

    Returns:
        RGB color with channels clamped to [0, 1]
    """
    h = h % 360.0
    c = (1 - abs(2 * l - 1)) * s
    hp = h / 60
    x = c * (1 - abs((hp % 2) - 1))

    if hp < 1:
        r1, g1, b1 = c, x, 0.0
    elif hp < 2:
        r1, g1, b1 = x, c, 0.0
    elif hp < 3:
        r1, g1, b1 = 0.0, c, x
    elif hp < 4:
        r1, g1, b1 = 0.0, x, c
    elif hp < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    m = l - c / 2
    return RGB(r=_clamp(r1 + m), g=_clamp(g1 + m), b=_clamp(b1 + m))


def rgb_to_hsl(color: RGB) -> HSL:
    """Convert RGB to HSL. Achromatic colors get hue 0 and saturation 0."""
    r, g, b = color.to_tuple()
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    h = 0.0
    if delta != 0:
        if high == r:
            h = 60 * (((g - b) / delta) % 6)
        elif high == g:
            h = 60 * ((b - r) / delta + 2)
        else:
            h = 60 * ((r - g) / delta + 4)
    h = h % 360.0

    l = (high + low) / 2
    s = 0.0 if delta == 0 else delta / (1 - abs(2 * l - 1))
    return HSL(h=h, s=_clamp(s), l=l)


def rgb_to_hex(color: RGB) -> str:
    """Quantize to '#RRGGBB' (uppercase, halves round up)."""
    return color.to_hex()


def hex_to_rgb(value: str) -> RGB:
    """
    Parse '#RRGGBB' (or 'RRGGBB', any case) into RGB.

    Raises:
        MalformedColorError: On wrong length, non-hex characters or non-string input

    Example:
        >>> hex_to_rgb("#851BE4").to_8bit()
        (133, 27, 228)
    """
    if not isinstance(value, str):
        raise MalformedColorError(value, "expected a string")

    text = value.strip()
    match = _HEX_PATTERN.fullmatch(text)
    if match is None:
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise MalformedColorError(value, f"expected 6 hex digits, got {len(digits)}")
        raise MalformedColorError(value, "contains non-hex characters")

    digits = match.group(1)
    return RGB(
        r=int(digits[0:2], 16) / 255,
        g=int(digits[2:4], 16) / 255,
        b=int(digits[4:6], 16) / 255,
    )


def color_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance in the unit RGB cube, in [0, sqrt(3)]."""
    return math.sqrt((a.r - b.r) ** 2 + (a.g - b.g) ** 2 + (a.b - b.b) ** 2)
