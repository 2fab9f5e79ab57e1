"""Enumerations for sequence generation and inversion."""

from enum import Enum


class ColorMode(str, Enum):
    """How a multi-dimensional point becomes a color."""

    RGB = "rgb"  # Coordinates are the red, green, blue channels
    HSL = "hsl"  # Coordinates scaled into hue, saturation, lightness


class ContinuedFractionKind(str, Enum):
    """Continued-fraction expansions available to the convergent generator."""

    GOLDEN = "golden"  # [1; 1, 1, 1, ...]
    SQRT2 = "sqrt2"  # [1; 2, 2, 2, ...]
    E = "e"  # [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]


class InversionStrategy(str, Enum):
    """Which candidate the inversion scan reports."""

    FIRST = "first"  # Lowest index within tolerance, stops early
    NEAREST = "nearest"  # Closest candidate within tolerance over the whole range
