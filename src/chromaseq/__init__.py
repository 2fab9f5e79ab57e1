"""chromaseq: deterministic low-discrepancy color sequences with index recovery."""

__version__ = "0.1.0"

# Color conversions
from .colors import color_distance, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

# Forward and reverse paths
from .core import check_prediction, compare_sequences, invert, invert_hex, invert_parallel
from .models import RGB, build_method
from .sequences import generate_color, generate_hex, generate_hex_sequence, generate_sequence

__all__ = [
    "RGB",
    "build_method",
    "check_prediction",
    "color_distance",
    "compare_sequences",
    "generate_color",
    "generate_hex",
    "generate_hex_sequence",
    "generate_sequence",
    "hex_to_rgb",
    "hsl_to_rgb",
    "invert",
    "invert_hex",
    "invert_parallel",
    "rgb_to_hex",
    "rgb_to_hsl",
]
