"""Request and response models for the JSON request/response contract.

Fields left as ``None`` are filled from the caller's AppConfig by
SequenceService; the models themselves carry no defaults for seed, method
or search bounds.
"""

import math
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field

from .enums import InversionStrategy


def _finite_seed(seed: int | float | None) -> int | float | None:
    if isinstance(seed, float) and not math.isfinite(seed):
        raise ValueError("seed must be a finite number")
    return seed


# JSON readers accept Infinity and NaN; no generator does
RequestSeed = Annotated[int | float | None, AfterValidator(_finite_seed)]


class GenerateRequest(BaseModel):
    """Produce ``count`` consecutive colors."""

    method: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)
    seed: RequestSeed = None
    count: int = Field(default=10, ge=0, le=1_000_000)
    start: int | None = Field(default=None, ge=0, description="First index (default: method's start index)")


class InvertRequest(BaseModel):
    """Recover the index that produced a hex color."""

    hex: str
    method: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)
    seed: RequestSeed = None
    max_search: int | None = Field(default=None, ge=0)
    tolerance: float | None = Field(default=None, gt=0.0)
    strategy: InversionStrategy | None = None
    workers: int | None = Field(default=None, ge=1, le=64)


class CompareRequest(BaseModel):
    """Rank methods by the dispersion of their primary coordinate."""

    n: int | None = Field(default=None, ge=1)
    methods: list[str] | None = None
    seed: RequestSeed = None


class CheckRequest(BaseModel):
    """Compare an observed color with the color predicted for an index."""

    index: int = Field(ge=0)
    hex: str
    method: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)
    seed: RequestSeed = None
    tolerance: float | None = Field(default=None, gt=0.0)


class GenerateResponse(BaseModel):
    """Colors produced by a generate request."""

    method: str
    seed: int | float
    start: int
    colors: list[str]


class InvertResponse(BaseModel):
    """Outcome of an invert request."""

    hex: str
    method: str
    seed: int | float
    found: bool
    index: int | None = None
    distance: float
    searched: int
    verification: str | None = Field(default=None, description="Hex regenerated at the recovered index")


class CompareResponse(BaseModel):
    """Discrepancy per method with ranking."""

    n: int
    discrepancy: dict[str, float]
    ranking: list[str]
    best: str | None = None
    worst: str | None = None
    metric: str = "Standard deviation of gaps in [0,1)"
