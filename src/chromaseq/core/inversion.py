"""Recover the index that generated a color.

The generators are not monotone in n, so inversion is a plain bounded scan:
regenerate each candidate and compare continuous RGB distances against a
tolerance. Running out of candidates is a normal outcome and is reported as
an InversionResult with ``found=False``.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from chromaseq.colors import MAX_DISTANCE, color_distance, hex_to_rgb
from chromaseq.exceptions import InvalidParameterError
from chromaseq.models import RGB, InversionResult, InversionStrategy, Method, PredictionCheck
from chromaseq.sequences import generate_color, start_index

DEFAULT_MAX_SEARCH = 10000
DEFAULT_TOLERANCE = 0.01


@dataclass
class _ScanOutcome:
    """Best match and closest candidate within one index range."""

    index: Optional[int] = None
    distance: float = MAX_DISTANCE
    closest: float = MAX_DISTANCE
    searched: int = 0


def _validate_bounds(max_search: int, tolerance: float) -> None:
    if tolerance <= 0:
        raise InvalidParameterError("tolerance", tolerance, "tolerance must be positive")
    if max_search < 0:
        raise InvalidParameterError("max_search", max_search, "max_search must be non-negative")


def _scan(
    target: RGB, method: Method, seed: int | float, first: int, last: int,
    tolerance: float, strategy: InversionStrategy,
) -> _ScanOutcome:
    """Scan indices first..last inclusive."""
    outcome = _ScanOutcome()
    for n in range(first, last + 1):
        distance = color_distance(target, generate_color(method, n, seed))
        outcome.searched += 1
        if distance < outcome.closest:
            outcome.closest = distance
        if distance < tolerance:
            if strategy == InversionStrategy.FIRST:
                outcome.index, outcome.distance = n, distance
                return outcome
            # Strict comparison keeps the lowest index on ties
            if outcome.index is None or distance < outcome.distance:
                outcome.index, outcome.distance = n, distance
    return outcome


def _to_result(outcome: _ScanOutcome) -> InversionResult:
    if outcome.index is None:
        return InversionResult.not_found(outcome.closest, outcome.searched)
    return InversionResult(found=True, index=outcome.index, distance=outcome.distance, searched=outcome.searched)


def invert(
    color: RGB,
    method: Method,
    seed: int | float = 0,
    max_search: int = DEFAULT_MAX_SEARCH,
    tolerance: float = DEFAULT_TOLERANCE,
    strategy: InversionStrategy = InversionStrategy.FIRST,
) -> InversionResult:
    """
    Find the index n for which the method produces ``color``.

    Scans from the method's start index through ``max_search`` inclusive.
    With ``strategy=FIRST`` the first candidate closer than ``tolerance``
    wins. With ``NEAREST`` the whole range is scanned and the closest
    candidate under the tolerance wins, ties going to the lower index.

    Args:
        color: Target color (continuous RGB)
        method: Method variant that generated the color
        seed: Seed used at generation time
        max_search: Highest index to try
        tolerance: RGB distance below which a candidate matches
        strategy: FIRST or NEAREST

    Returns:
        InversionResult; ``found=False`` carries the closest distance seen

    Raises:
        UnknownMethodError: If ``method`` is not a known variant
        InvalidParameterError: If tolerance <= 0 or max_search < 0

    Example:
        >>> invert(hex_to_rgb("#851BE4"), PlasticMethod(), seed=42).index
        1
    """
    _validate_bounds(max_search, tolerance)
    first = start_index(method)
    strategy = InversionStrategy(strategy)
    return _to_result(_scan(color, method, seed, first, max_search, tolerance, strategy))


def invert_hex(
    hex_color: str,
    method: Method,
    seed: int | float = 0,
    max_search: int = DEFAULT_MAX_SEARCH,
    tolerance: float = DEFAULT_TOLERANCE,
    strategy: InversionStrategy = InversionStrategy.FIRST,
) -> InversionResult:
    """Parse a '#RRGGBB' string, then invert it (raises MalformedColorError before any search)."""
    return invert(hex_to_rgb(hex_color), method, seed, max_search, tolerance, strategy)


def _partition(first: int, last: int, parts: int) -> list[tuple[int, int]]:
    """Split first..last inclusive into at most ``parts`` contiguous ranges."""
    total = last - first + 1
    if total <= 0:
        return []
    parts = max(1, min(parts, total))
    size, extra = divmod(total, parts)
    ranges = []
    lo = first
    for i in range(parts):
        hi = lo + size + (1 if i < extra else 0) - 1
        ranges.append((lo, hi))
        lo = hi + 1
    return ranges


def invert_parallel(
    color: RGB,
    method: Method,
    seed: int | float = 0,
    max_search: int = DEFAULT_MAX_SEARCH,
    tolerance: float = DEFAULT_TOLERANCE,
    strategy: InversionStrategy = InversionStrategy.FIRST,
    workers: int = 4,
) -> InversionResult:
    """
    Invert with the index range split across a thread pool.

    Each worker scans a disjoint contiguous sub-range. The result is the
    same index ``invert`` would report: the lowest matching index for FIRST,
    the closest (then lowest) for NEAREST. ``searched`` is the total number
    of candidates generated by all workers.
    """
    _validate_bounds(max_search, tolerance)
    if workers < 1:
        raise InvalidParameterError("workers", workers, "workers must be at least 1")

    strategy = InversionStrategy(strategy)
    ranges = _partition(start_index(method), max_search, workers)
    if len(ranges) <= 1:
        return invert(color, method, seed, max_search, tolerance, strategy)

    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [
            pool.submit(_scan, color, method, seed, lo, hi, tolerance, strategy)
            for lo, hi in ranges
        ]
        # Ordered by range, so the first hit has the lowest index
        outcomes = [future.result() for future in futures]

    merged = _ScanOutcome(
        closest=min(o.closest for o in outcomes),
        searched=sum(o.searched for o in outcomes),
    )
    for outcome in outcomes:
        if outcome.index is None:
            continue
        if merged.index is None or outcome.distance < merged.distance:
            merged.index, merged.distance = outcome.index, outcome.distance
        if strategy == InversionStrategy.FIRST:
            break
    return _to_result(merged)


def check_prediction(
    index: int,
    observed: RGB | str,
    method: Method,
    seed: int | float = 0,
    tolerance: float = DEFAULT_TOLERANCE,
) -> PredictionCheck:
    """
    Compare an observed color with the color the method predicts at ``index``.

    Args:
        index: Index whose color is predicted
        observed: Observed color, as RGB or '#RRGGBB'
        method: Method variant
        seed: Seed used at generation time
        tolerance: Distance below which the observation matches

    Raises:
        MalformedColorError: If ``observed`` is an unparsable hex string
        InvalidParameterError: If index < 0 or tolerance <= 0
    """
    if tolerance <= 0:
        raise InvalidParameterError("tolerance", tolerance, "tolerance must be positive")

    observed_rgb = hex_to_rgb(observed) if isinstance(observed, str) else observed
    predicted = generate_color(method, index, seed)
    distance = color_distance(predicted, observed_rgb)
    return PredictionCheck(
        index=index,
        matches=distance < tolerance,
        predicted=predicted.to_hex(),
        observed=observed_rgb.to_hex(),
        distance=distance,
        tolerance=tolerance,
    )
