"""Result models returned by the inversion engine and the discrepancy analyzer."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InversionResult(BaseModel):
    """Outcome of a single inversion call.

    A search that exhausts its range is a valid outcome, reported with
    ``found=False`` and ``index=None``. ``None`` keeps "not found" apart from
    a recovered index of 0, which is a real answer for methods that start
    at 0 (Sobol, continued fractions).
    """

    model_config = ConfigDict(frozen=True)

    found: bool
    index: int | None = Field(default=None, ge=0)
    distance: float = Field(
        ge=0.0,
        description="Distance of the match, or the closest candidate seen when not found",
    )
    searched: int = Field(default=0, ge=0, description="Number of candidate indices generated")

    @model_validator(mode="after")
    def check_index_matches_found(self) -> "InversionResult":
        """An index is present exactly when the search succeeded."""
        if self.found and self.index is None:
            raise ValueError("found result must carry an index")
        if not self.found and self.index is not None:
            raise ValueError("not-found result cannot carry an index")
        return self

    @classmethod
    def not_found(cls, closest: float, searched: int) -> "InversionResult":
        """Create a search-exhausted result."""
        return cls(found=False, index=None, distance=closest, searched=searched)


class PredictionCheck(BaseModel):
    """Comparison of an observed color against the color predicted for an index."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    matches: bool
    predicted: str = Field(description="Predicted color as #RRGGBB")
    observed: str = Field(description="Observed color as #RRGGBB")
    distance: float = Field(ge=0.0)
    tolerance: float = Field(gt=0.0)


class DiscrepancyEntry(BaseModel):
    """Dispersion of one method's primary coordinate stream."""

    model_config = ConfigDict(frozen=True)

    method_name: str
    dispersion: float = Field(ge=0.0, description="Standard deviation of gaps (lower = more uniform)")


class DiscrepancyReport(BaseModel):
    """Uniformity comparison across several methods, most uniform first."""

    n: int = Field(ge=0, description="Points generated per method")
    entries: list[DiscrepancyEntry] = Field(default_factory=list)

    @property
    def ranking(self) -> list[str]:
        """Method names sorted by ascending dispersion."""
        return [entry.method_name for entry in sorted(self.entries, key=lambda e: e.dispersion)]

    @property
    def best(self) -> str | None:
        """Most uniform method."""
        ranking = self.ranking
        return ranking[0] if ranking else None

    @property
    def worst(self) -> str | None:
        """Least uniform method."""
        ranking = self.ranking
        return ranking[-1] if ranking else None

    def as_dict(self) -> dict[str, float]:
        """Map method name to dispersion."""
        return {entry.method_name: entry.dispersion for entry in self.entries}
