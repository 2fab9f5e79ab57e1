"""Color-space conversions.

Three representations are used:

1. Continuous RGB (`RGB(r=0.52, g=0.11, b=0.89)`): what generators emit and
   what inversion compares.
2. HSL (`HSL(h=271.8, s=0.78, l=0.5)`): the intermediate most generators map
   their coordinates into.
3. Hex (`"#851BE4"`): the 8-bit wire format. Lossy; `hex_to_rgb` followed by
   `rgb_to_hex` is idempotent, the reverse is not.
"""

from .conversions import MAX_DISTANCE, color_distance, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

__all__ = [
    "MAX_DISTANCE",
    "color_distance",
    "hex_to_rgb",
    "hsl_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
]
