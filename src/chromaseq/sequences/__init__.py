"""Low-discrepancy sequence generators and their color mappings."""

from .generators import (
    generate_color,
    generate_hex,
    generate_hex_sequence,
    generate_sequence,
    primary_coordinate,
    start_index,
)
from .points import frac, gray_code, seeded_frac, sobol_point, van_der_corput
from .roots import continued_fraction_coefficients, continued_fraction_convergent, golden_ratio_cf, r_sequence_root

__all__ = [
    # Generators
    "generate_color",
    "generate_hex",
    "generate_hex_sequence",
    "generate_sequence",
    "primary_coordinate",
    "start_index",
    # Points
    "frac",
    "gray_code",
    "seeded_frac",
    "sobol_point",
    "van_der_corput",
    # Roots
    "continued_fraction_coefficients",
    "continued_fraction_convergent",
    "golden_ratio_cf",
    "r_sequence_root",
]
