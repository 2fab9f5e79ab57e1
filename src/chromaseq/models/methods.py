"""Sequence method models.

A Method is a closed tagged union: each variant is a frozen pydantic model
carrying its own parameters, discriminated on the ``kind`` field. Generation,
inversion and discrepancy analysis all dispatch on the variant class, so an
unrecognized object can never be silently treated as some default sequence.

Parameters that belong to another variant are ignored when a method is built
from a dict (pydantic's default ``extra="ignore"``), so ``bases`` supplied for
``golden`` is harmless.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from chromaseq.constants import PHI, SQRT2
from chromaseq.exceptions import UnknownMethodError, wrap_request_error

from .enums import ColorMode, ContinuedFractionKind


class _MethodBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        """Short name used in reports: the kind, plus parameters when non-default."""
        changed = {
            name: value
            for name, value in self.model_dump(exclude={"kind"}).items()
            if value != type(self).model_fields[name].default
        }
        if not changed:
            return self.kind
        params = ", ".join(f"{name}={_format_param(value)}" for name, value in changed.items())
        return f"{self.kind}({params})"


def _format_param(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, tuple):
        return "/".join(str(v) for v in value)
    return str(value)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    factor = 2
    while factor * factor <= n:
        if n % factor == 0:
            return False
        factor += 1
    return True


class GoldenMethod(_MethodBase):
    """Golden-angle hue spiral (1-D)."""

    kind: Literal["golden"] = "golden"
    saturation: float = Field(default=0.7, ge=0.0, le=1.0)
    lightness: float = Field(default=0.5, ge=0.0, le=1.0)


class PlasticMethod(_MethodBase):
    """Plastic-constant hue and saturation (2-D)."""

    kind: Literal["plastic"] = "plastic"
    lightness: float = Field(default=0.5, ge=0.0, le=1.0)


class HaltonMethod(_MethodBase):
    """Halton sequence over three prime bases."""

    kind: Literal["halton"] = "halton"
    bases: tuple[int, int, int] = (2, 3, 5)
    mode: ColorMode = ColorMode.RGB

    @field_validator("bases")
    @classmethod
    def validate_bases(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Bases must be distinct primes."""
        if not all(_is_prime(b) for b in v):
            raise ValueError("Halton bases must be prime numbers")
        if len(set(v)) != len(v):
            raise ValueError("Halton bases must be distinct")
        return v


class RSequenceMethod(_MethodBase):
    """Recursive generalized golden ratio sequence."""

    kind: Literal["r_sequence"] = "r_sequence"
    dim: int = Field(default=3, ge=1, le=16)
    lightness: float = Field(default=0.5, ge=0.0, le=1.0, description="Used when dim == 2")


class KroneckerMethod(_MethodBase):
    """Kronecker rotation by an irrational alpha."""

    kind: Literal["kronecker"] = "kronecker"
    alpha: float = Field(default=SQRT2, gt=0.0, allow_inf_nan=False)
    saturation: float = Field(default=0.7, ge=0.0, le=1.0)
    lightness: float = Field(default=0.5, ge=0.0, le=1.0)


class SobolMethod(_MethodBase):
    """Sobol sequence via Gray code, three dimensions."""

    kind: Literal["sobol"] = "sobol"
    mode: ColorMode = ColorMode.HSL


class PisotMethod(_MethodBase):
    """Quasiperiodic sequence from powers of a Pisot number."""

    kind: Literal["pisot"] = "pisot"
    theta: float = Field(default=PHI, gt=1.0, allow_inf_nan=False)
    saturation: float = Field(default=0.7, ge=0.0, le=1.0)
    lightness: float = Field(default=0.5, ge=0.0, le=1.0)


class ContinuedFractionMethod(_MethodBase):
    """Hue from successive continued-fraction convergents."""

    kind: Literal["continued_fraction"] = "continued_fraction"
    cf: ContinuedFractionKind = ContinuedFractionKind.GOLDEN
    saturation: float = Field(default=0.7, ge=0.0, le=1.0)
    lightness: float = Field(default=0.5, ge=0.0, le=1.0)


Method = Annotated[
    Union[
        GoldenMethod,
        PlasticMethod,
        HaltonMethod,
        RSequenceMethod,
        KroneckerMethod,
        SobolMethod,
        PisotMethod,
        ContinuedFractionMethod,
    ],
    Field(discriminator="kind"),
]

METHOD_TYPES: dict[str, type[_MethodBase]] = {
    "golden": GoldenMethod,
    "plastic": PlasticMethod,
    "halton": HaltonMethod,
    "r_sequence": RSequenceMethod,
    "kronecker": KroneckerMethod,
    "sobol": SobolMethod,
    "pisot": PisotMethod,
    "continued_fraction": ContinuedFractionMethod,
}

METHOD_ALIASES = {
    "cf": "continued_fraction",
    "golden_angle": "golden",
    "r": "r_sequence",
}

_method_adapter: TypeAdapter = TypeAdapter(Method)


def normalize_method_name(name: str) -> str:
    """Resolve aliases and case; raise UnknownMethodError for anything else."""
    key = str(name).strip().lower().replace("-", "_")
    key = METHOD_ALIASES.get(key, key)
    if key not in METHOD_TYPES:
        raise UnknownMethodError(name, available=METHOD_TYPES)
    return key


def build_method(name: str, params: dict[str, Any] | None = None) -> Method:
    """
    Build a Method variant from a tag and a parameter dict.

    Args:
        name: Method tag (``plastic``, ``halton``, ``cf``, ...)
        params: Method parameters; keys owned by other variants are ignored

    Raises:
        UnknownMethodError: If the tag is not recognized
        InvalidParameterError: If an owned parameter fails validation

    Example:
        >>> build_method("halton", {"bases": [2, 3, 7], "alpha": 1.5})
        HaltonMethod(kind='halton', bases=(2, 3, 7), mode=<ColorMode.RGB: 'rgb'>)
    """
    kind = normalize_method_name(name)
    payload = {key: value for key, value in (params or {}).items() if key != "kind"}
    payload["kind"] = kind
    try:
        return _method_adapter.validate_python(payload)
    except ValidationError as e:
        raise wrap_request_error(e, kind) from e
