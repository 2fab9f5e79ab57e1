"""Data models for chromaseq."""

from .color import HSL, RGB, quantize_channel
from .config import AppConfig
from .enums import ColorMode, ContinuedFractionKind, InversionStrategy
from .methods import (
    METHOD_TYPES,
    ContinuedFractionMethod,
    GoldenMethod,
    HaltonMethod,
    KroneckerMethod,
    Method,
    PisotMethod,
    PlasticMethod,
    RSequenceMethod,
    SobolMethod,
    build_method,
    normalize_method_name,
)
from .requests import (
    CheckRequest,
    CompareRequest,
    CompareResponse,
    GenerateRequest,
    GenerateResponse,
    InvertRequest,
    InvertResponse,
)
from .results import DiscrepancyEntry, DiscrepancyReport, InversionResult, PredictionCheck

__all__ = [
    "AppConfig",
    # Colors
    "HSL",
    "RGB",
    "quantize_channel",
    # Enums
    "ColorMode",
    "ContinuedFractionKind",
    "InversionStrategy",
    # Methods
    "METHOD_TYPES",
    "ContinuedFractionMethod",
    "GoldenMethod",
    "HaltonMethod",
    "KroneckerMethod",
    "Method",
    "PisotMethod",
    "PlasticMethod",
    "RSequenceMethod",
    "SobolMethod",
    "build_method",
    "normalize_method_name",
    # Requests
    "CheckRequest",
    "CompareRequest",
    "CompareResponse",
    "GenerateRequest",
    "GenerateResponse",
    "InvertRequest",
    "InvertResponse",
    # Results
    "DiscrepancyEntry",
    "DiscrepancyReport",
    "InversionResult",
    "PredictionCheck",
]
