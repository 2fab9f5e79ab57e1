"""Low-discrepancy sequence points in [0, 1)^d.

Every function here is pure and returns plain floats. The seed enters the
irrational-rotation sequences additively before the modulo-1 reduction,
evaluated as ``frac(frac(seed) + value)`` so that integer seeds of any
magnitude never swallow the index term. The digit-reversal sequences
(Halton, Sobol) add floor(seed) to the index and the seed's fractional part
to each coordinate; a shifted index below 1 gives the origin point.
"""

import math
from functools import lru_cache

from chromaseq.constants import PHI, PHI2, SOBOL_BITS
from chromaseq.models import ContinuedFractionKind

from .roots import continued_fraction_coefficients, continued_fraction_convergent, r_sequence_root

# Largest exponent for which theta ** n is still a finite float
_LOG_FLOAT_MAX = math.log(1.7976931348623157e308)

# (degree, recurrence coefficients) per Sobol dimension
_SOBOL_POLYNOMIALS = [
    (1, (1,)),           # x
    (2, (1, 1)),         # x^2 + x + 1
    (3, (1, 0, 1)),      # x^3 + x + 1
    (4, (1, 1, 0, 1)),   # x^4 + x + 1
    (5, (1, 0, 1, 0, 1)),  # x^5 + x^2 + 1
]


def frac(x: float) -> float:
    """Fractional part x - floor(x), always in [0, 1)."""
    return x - math.floor(x)


def seed_fraction(seed: int | float) -> float:
    """Fractional part of the seed; exactly 0.0 for integer seeds."""
    return float(seed - math.floor(seed))


def seeded_frac(seed: int | float, value: float) -> float:
    """frac(seed + value), with the seed reduced first."""
    result = frac(seed_fraction(seed) + value)
    # 1 - 2**-60 + small can round up to exactly 1.0
    return 0.0 if result >= 1.0 else result


def seed_shifted_index(n: int, seed: int | float) -> int:
    """
    n + floor(seed), clamped at 0.

    Negative seeds can push the index below zero; those positions all map to
    index 0, whose van der Corput and Sobol values are 0.0.
    """
    return max(n + math.floor(seed), 0)


def van_der_corput(n: int, base: int) -> float:
    """
    Reflect the base-``base`` digits of n around the radix point.

    Example: n=5 in base 2 is 101, reflected 0.101 = 0.625.
    """
    result = 0.0
    f = 1.0 / base
    i = n
    while i > 0:
        result += (i % base) * f
        i //= base
        f /= base
    return result


def gray_code(n: int) -> int:
    """Binary reflected Gray code n XOR (n >> 1)."""
    return n ^ (n >> 1)


@lru_cache(maxsize=16)
def sobol_direction_numbers(dim: int, bits: int = SOBOL_BITS) -> tuple[int, ...]:
    """
    Direction numbers for a Sobol dimension from a small primitive-polynomial table.

    Dimensions past the table reuse its last polynomial. The first ``degree``
    numbers are powers of two; the rest follow the polynomial recurrence.
    """
    if dim < 1:
        raise ValueError(f"Sobol dimension must be >= 1, got {dim}")

    degree, coeffs = _SOBOL_POLYNOMIALS[min(dim, len(_SOBOL_POLYNOMIALS)) - 1]
    v = [0] * bits

    for i in range(min(degree, bits)):
        v[i] = 1 << (bits - 1 - i)

    for i in range(degree, bits):
        value = v[i - degree]
        for j, c in enumerate(coeffs, start=1):
            if c == 1:
                value ^= v[i - j] >> j
        v[i] = value

    return tuple(v)


def sobol_point(n: int, dim: int) -> float:
    """n-th Sobol value in one dimension, in [0, 1). Index 0 maps to 0.0."""
    g = gray_code(n)
    x = 0
    for i, direction in enumerate(sobol_direction_numbers(dim)):
        if (g >> i) & 1:
            x ^= direction
    return x / (1 << SOBOL_BITS)


# -----------------------------------------------------------------------------
# Per-method coordinates
# -----------------------------------------------------------------------------

def golden_point(n: int, seed: int | float = 0) -> tuple[float]:
    """(frac(seed + n/phi),)"""
    return (seeded_frac(seed, n / PHI),)


def plastic_point(n: int, seed: int | float = 0) -> tuple[float, float]:
    """(frac(seed + n/p), frac(seed + n/p^2)) for the plastic constant p."""
    return (seeded_frac(seed, n / PHI2), seeded_frac(seed, n / (PHI2 * PHI2)))


def r_sequence_point(n: int, seed: int | float = 0, dim: int = 3) -> tuple[float, ...]:
    """
    R-sequence coordinates frac(seed + n/phi_d^k).

    Two coordinates when dim == 2 (then phi_d is the plastic constant),
    three otherwise.
    """
    phi_d = r_sequence_root(dim)
    powers = 2 if dim == 2 else 3
    return tuple(seeded_frac(seed, n / phi_d ** k) for k in range(1, powers + 1))


def halton_point(n: int, seed: int | float = 0, bases: tuple[int, ...] = (2, 3, 5)) -> tuple[float, ...]:
    """Halton coordinates for index n shifted by the seed."""
    shifted = seed_shifted_index(n, seed)
    offset = seed_fraction(seed)
    return tuple(seeded_frac(offset, van_der_corput(shifted, b)) for b in bases)


def kronecker_point(n: int, seed: int | float = 0, alpha: float = math.sqrt(2.0)) -> tuple[float]:
    """(frac(seed + n*alpha),)"""
    return (seeded_frac(seed, n * alpha),)


def sobol_coordinates(n: int, seed: int | float = 0, dims: int = 3) -> tuple[float, ...]:
    """First ``dims`` Sobol dimensions for index n shifted by the seed."""
    shifted = seed_shifted_index(n, seed)
    offset = seed_fraction(seed)
    return tuple(seeded_frac(offset, sobol_point(shifted, d)) for d in range(1, dims + 1))


def pisot_point(n: int, seed: int | float = 0, theta: float = PHI) -> tuple[float]:
    """
    (frac(seed + round(theta^n)),)

    round(theta^n) is an integer, so only the seed's fractional part
    survives the reduction. Beyond the float range the power is not formed.
    """
    nearest = round(theta ** n) if n * math.log(theta) < _LOG_FLOAT_MAX else 0
    return (seeded_frac(seed, nearest),)


def continued_fraction_point(
    n: int, seed: int | float = 0, kind: ContinuedFractionKind = ContinuedFractionKind.GOLDEN
) -> tuple[float]:
    """(frac(seed + p/q),) for the n-th convergent p/q of the chosen expansion."""
    p, q = continued_fraction_convergent(continued_fraction_coefficients(kind, n), n)
    return (seeded_frac(seed, p / q),)
