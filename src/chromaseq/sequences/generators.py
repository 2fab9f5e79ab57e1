"""Map sequence points to colors.

One dispatch table keyed by Method variant class backs generation, the
primary-coordinate stream used by the analyzer and the inversion scan, so
all three agree on what a method means.
"""

import math
from typing import Callable

from chromaseq.colors import hsl_to_rgb
from chromaseq.exceptions import InvalidParameterError, UnknownMethodError
from chromaseq.models import (
    RGB,
    ColorMode,
    ContinuedFractionMethod,
    GoldenMethod,
    HaltonMethod,
    KroneckerMethod,
    Method,
    PisotMethod,
    PlasticMethod,
    RSequenceMethod,
    SobolMethod,
)

from .points import (
    continued_fraction_point,
    golden_point,
    halton_point,
    kronecker_point,
    pisot_point,
    plastic_point,
    r_sequence_point,
    sobol_coordinates,
)

Seed = int | float


def _cube_to_color(x1: float, x2: float, x3: float, mode: ColorMode) -> RGB:
    """Three unit coordinates to a color, directly or through the HSL mapping."""
    if mode == ColorMode.RGB:
        return RGB(r=x1, g=x2, b=x3)
    return hsl_to_rgb(x1 * 360, x2 * 0.5 + 0.5, x3 * 0.3 + 0.4)


def golden_color(method: GoldenMethod, n: int, seed: Seed = 0) -> RGB:
    (h,) = golden_point(n, seed)
    return hsl_to_rgb(h * 360, method.saturation, method.lightness)


def plastic_color(method: PlasticMethod, n: int, seed: Seed = 0) -> RGB:
    """
    Hue from n/p and saturation from n/p^2, p the plastic constant.

    Example:
        >>> plastic_color(PlasticMethod(), 1, seed=42).to_hex()
        '#851BE4'
    """
    h, s = plastic_point(n, seed)
    return hsl_to_rgb(h * 360, s * 0.5 + 0.5, method.lightness)


def halton_color(method: HaltonMethod, n: int, seed: Seed = 0) -> RGB:
    x1, x2, x3 = halton_point(n, seed, method.bases)
    return _cube_to_color(x1, x2, x3, method.mode)


def r_sequence_color(method: RSequenceMethod, n: int, seed: Seed = 0) -> RGB:
    coords = r_sequence_point(n, seed, method.dim)
    h = coords[0] * 360
    s = coords[1] * 0.5 + 0.5
    l = coords[2] * 0.3 + 0.4 if len(coords) > 2 else method.lightness
    return hsl_to_rgb(h, s, l)


def kronecker_color(method: KroneckerMethod, n: int, seed: Seed = 0) -> RGB:
    (h,) = kronecker_point(n, seed, method.alpha)
    return hsl_to_rgb(h * 360, method.saturation, method.lightness)


def sobol_color(method: SobolMethod, n: int, seed: Seed = 0) -> RGB:
    x1, x2, x3 = sobol_coordinates(n, seed, 3)
    return _cube_to_color(x1, x2, x3, method.mode)


def pisot_color(method: PisotMethod, n: int, seed: Seed = 0) -> RGB:
    (v,) = pisot_point(n, seed, method.theta)
    return hsl_to_rgb(v * 360, method.saturation, method.lightness)


def continued_fraction_color(method: ContinuedFractionMethod, n: int, seed: Seed = 0) -> RGB:
    (h,) = continued_fraction_point(n, seed, method.cf)
    return hsl_to_rgb(h * 360, method.saturation, method.lightness)


# variant class -> (color function, primary coordinate, natural start index)
_DISPATCH: dict[type, tuple[Callable[..., RGB], Callable[..., float], int]] = {
    GoldenMethod: (golden_color, lambda m, n, s: golden_point(n, s)[0], 1),
    PlasticMethod: (plastic_color, lambda m, n, s: plastic_point(n, s)[0], 1),
    HaltonMethod: (halton_color, lambda m, n, s: halton_point(n, s, m.bases)[0], 1),
    RSequenceMethod: (r_sequence_color, lambda m, n, s: r_sequence_point(n, s, m.dim)[0], 1),
    KroneckerMethod: (kronecker_color, lambda m, n, s: kronecker_point(n, s, m.alpha)[0], 1),
    SobolMethod: (sobol_color, lambda m, n, s: sobol_coordinates(n, s, 1)[0], 0),
    PisotMethod: (pisot_color, lambda m, n, s: pisot_point(n, s, m.theta)[0], 1),
    ContinuedFractionMethod: (continued_fraction_color, lambda m, n, s: continued_fraction_point(n, s, m.cf)[0], 0),
}


def _lookup(method: Method) -> tuple[Callable[..., RGB], Callable[..., float], int]:
    entry = _DISPATCH.get(type(method))
    if entry is None:
        raise UnknownMethodError(repr(method), available=[cls.model_fields["kind"].default for cls in _DISPATCH])
    return entry


def _check_index(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidParameterError("n", n, "index must be an integer")
    if n < 0:
        raise InvalidParameterError("n", n, "index must be non-negative")


def _check_seed(seed: Seed) -> None:
    if isinstance(seed, float) and not math.isfinite(seed):
        raise InvalidParameterError("seed", seed, "seed must be a finite number")


def start_index(method: Method) -> int:
    """Natural first index: 0 for sobol and continued_fraction, 1 otherwise."""
    return _lookup(method)[2]


def generate_color(method: Method, n: int, seed: Seed = 0) -> RGB:
    """
    Color at index n of the method's sequence.

    Args:
        method: Method variant (see chromaseq.models.methods)
        n: Non-negative index
        seed: Integer (any size) or float seed

    Raises:
        UnknownMethodError: If ``method`` is not a known variant
        InvalidParameterError: If n is negative or not an integer, or the seed is NaN or infinite
    """
    color_fn = _lookup(method)[0]
    _check_index(n)
    _check_seed(seed)
    return color_fn(method, n, seed)


def generate_hex(method: Method, n: int, seed: Seed = 0) -> str:
    return generate_color(method, n, seed).to_hex()


def primary_coordinate(method: Method, n: int, seed: Seed = 0) -> float:
    """First coordinate of point n, in [0, 1). Feeds the discrepancy analyzer."""
    coord_fn = _lookup(method)[1]
    _check_index(n)
    _check_seed(seed)
    return coord_fn(method, n, seed)


def generate_sequence(method: Method, count: int, seed: Seed = 0, start: int | None = None) -> list[RGB]:
    """
    A run of ``count`` consecutive colors (a color thread).

    Starts at the method's natural start index unless ``start`` is given.
    """
    if count < 0:
        raise InvalidParameterError("count", count, "count must be non-negative")
    first = start_index(method) if start is None else start
    _check_index(first)
    _check_seed(seed)
    color_fn = _lookup(method)[0]
    return [color_fn(method, n, seed) for n in range(first, first + count)]


def generate_hex_sequence(method: Method, count: int, seed: Seed = 0, start: int | None = None) -> list[str]:
    return [color.to_hex() for color in generate_sequence(method, count, seed, start)]
