"""Metallic-constant roots and continued-fraction convergents."""

from functools import lru_cache

from chromaseq.exceptions import NonConvergentRootError
from chromaseq.models import ContinuedFractionKind

NEWTON_INITIAL_GUESS = 1.5
NEWTON_TOLERANCE = 1e-10
NEWTON_MAX_ITERATIONS = 20


@lru_cache(maxsize=64)
def r_sequence_root(d: int) -> float:
    """
    Generalized golden ratio: the real root > 1 of x^(d+1) = x + 1.

    For d=1 this is the golden ratio (1.618...), for d=2 the plastic
    constant (1.3247...), for d=3 about 1.2207.

    Newton's method from 1.5 until the step is below 1e-10. f is convex on
    (1, 2) so the iteration is monotone once it is right of the root.

    Raises:
        NonConvergentRootError: If d < 1 or the iteration cap is reached
    """
    if d < 1:
        raise NonConvergentRootError(d, 0)

    x = NEWTON_INITIAL_GUESS
    for _ in range(NEWTON_MAX_ITERATIONS):
        f = x ** (d + 1) - x - 1
        df = (d + 1) * x ** d - 1
        x_new = x - f / df
        if abs(x_new - x) < NEWTON_TOLERANCE:
            return x_new
        x = x_new

    raise NonConvergentRootError(d, NEWTON_MAX_ITERATIONS, last_estimate=x)


def continued_fraction_convergent(coeffs: list[int], k: int) -> tuple[int, int]:
    """
    k-th convergent p/q of the continued fraction [a0; a1, a2, ...].

    Uses p_i = a_i*p_(i-1) + p_(i-2) and q_i = a_i*q_(i-1) + q_(i-2) seeded
    with p_-1 = 1, q_-1 = 0. Exact integer arithmetic. ``k`` beyond the
    available coefficients returns the last convergent.

    Example:
        >>> continued_fraction_convergent([1, 1, 1, 1, 1], 4)
        (8, 5)
    """
    if not coeffs:
        raise ValueError("continued fraction needs at least one coefficient")
    if k < 0:
        raise ValueError(f"convergent index must be non-negative, got {k}")

    p_prev2, p_prev1 = 1, coeffs[0]
    q_prev2, q_prev1 = 0, 1

    for a in coeffs[1:k + 1]:
        p_prev2, p_prev1 = p_prev1, a * p_prev1 + p_prev2
        q_prev2, q_prev1 = q_prev1, a * q_prev1 + q_prev2

    return p_prev1, q_prev1


def continued_fraction_coefficients(kind: ContinuedFractionKind, n: int) -> list[int]:
    """First n+1 coefficients [a0; a1, ..., an] of the chosen expansion."""
    if kind == ContinuedFractionKind.GOLDEN:
        return [1] * (n + 1)
    if kind == ContinuedFractionKind.SQRT2:
        return [1] + [2] * n
    if kind == ContinuedFractionKind.E:
        # e = [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]: blocks of (1, 2k, 1)
        coeffs = [2]
        k = 1
        while len(coeffs) < n + 1:
            coeffs.extend((1, 2 * k, 1))
            k += 1
        return coeffs[:n + 1]
    raise ValueError(f"Unknown continued fraction kind: {kind!r}")


def golden_ratio_cf(k: int) -> tuple[int, int]:
    """k-th convergent of the golden ratio, a ratio of consecutive Fibonacci numbers."""
    return continued_fraction_convergent(continued_fraction_coefficients(ContinuedFractionKind.GOLDEN, k), k)
