"""Uniformity statistics for sequence point sets.

Dispersion here is the standard deviation of the gaps between sorted points
on [0, 1), with 0 and 1 added as sentinels. Perfectly evenly spaced points
have dispersion 0.
"""

from typing import Iterable, Sequence

import numpy as np
import numpy.typing as npt

from chromaseq.exceptions import InvalidParameterError
from chromaseq.models import (
    RGB,
    DiscrepancyEntry,
    DiscrepancyReport,
    GoldenMethod,
    HaltonMethod,
    KroneckerMethod,
    Method,
    PlasticMethod,
    SobolMethod,
    build_method,
)
from chromaseq.sequences import primary_coordinate, start_index

DEFAULT_COMPARE_METHODS: tuple[Method, ...] = (
    GoldenMethod(),
    PlasticMethod(),
    HaltonMethod(),
    KroneckerMethod(),
    SobolMethod(),
)

# Comparisons sample indices 1..n for every method
COMPARE_START = 1


def discrepancy(points: Iterable[float]) -> float:
    """
    Gap dispersion of a 1-D point set in [0, 1).

    Raises:
        InvalidParameterError: If any point lies outside [0, 1)

    Example:
        >>> discrepancy([0.25, 0.5, 0.75])
        0.0
    """
    values = np.asarray(list(points), dtype=np.float64)
    if values.size and (np.any(values < 0.0) or np.any(values >= 1.0) or not np.all(np.isfinite(values))):
        raise InvalidParameterError("points", None, "all points must lie in [0, 1)")

    gaps = np.diff(np.concatenate(([0.0], np.sort(values), [1.0])))
    return float(np.std(gaps))


def primary_stream(
    method: Method, count: int, seed: int | float = 0, start: int | None = None
) -> npt.NDArray[np.float64]:
    """First coordinate for indices start..start+count-1 (start defaults to the method's start index)."""
    if count < 0:
        raise InvalidParameterError("count", count, "count must be non-negative")
    first = start_index(method) if start is None else start
    return np.fromiter(
        (primary_coordinate(method, n, seed) for n in range(first, first + count)),
        dtype=np.float64,
        count=count,
    )


def _resolve(method: Method | str) -> Method:
    return build_method(method) if isinstance(method, str) else method


def compare_sequences(
    n: int = 1000,
    methods: Sequence[Method | str] | None = None,
    seed: int | float = 0,
) -> DiscrepancyReport:
    """
    Rank methods by the dispersion of their primary coordinates at indices 1..n.

    Every method is sampled from index 1, including those whose natural
    start is 0, so all streams cover the same positions.

    Args:
        n: Points per method
        methods: Method variants or tags (default: golden, plastic, halton,
            kronecker, sobol)
        seed: Seed passed to every generator

    Returns:
        DiscrepancyReport with one entry per method, labelled by tag
    """
    if n < 1:
        raise InvalidParameterError("n", n, "n must be at least 1")

    resolved = [_resolve(m) for m in (DEFAULT_COMPARE_METHODS if methods is None else methods)]
    entries = [
        DiscrepancyEntry(method_name=method.label, dispersion=discrepancy(primary_stream(method, n, seed, start=COMPARE_START)))
        for method in resolved
    ]
    return DiscrepancyReport(n=n, entries=entries)


def mean_pairwise_distance(colors: Sequence[RGB]) -> float:
    """Average RGB distance over all unordered pairs; 0.0 for fewer than two colors."""
    if len(colors) < 2:
        return 0.0
    points = np.array([c.to_tuple() for c in colors], dtype=np.float64)
    diffs = points[:, None, :] - points[None, :, :]
    distances = np.sqrt(np.sum(diffs ** 2, axis=-1))
    upper = np.triu_indices(len(points), k=1)
    return float(np.mean(distances[upper]))


def hex_collisions(hexes: Iterable[str]) -> int:
    """Number of hex strings that repeat one seen earlier."""
    seen: set[str] = set()
    collisions = 0
    for value in hexes:
        key = value.upper()
        if key in seen:
            collisions += 1
        seen.add(key)
    return collisions
