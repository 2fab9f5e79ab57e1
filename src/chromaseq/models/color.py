"""Color models for generated sequence points."""

import math

from pydantic import BaseModel, ConfigDict, Field


def quantize_channel(value: float) -> int:
    """Round a unit channel to the nearest of 256 levels (halves round up)."""
    return min(255, max(0, int(math.floor(value * 255 + 0.5))))


class RGB(BaseModel):
    """Continuous RGB color with each channel in [0, 1].

    This is the representation the generators produce and the inversion
    engine compares. The 8-bit hex form is a lossy quantization of it, so
    distances are always measured on this model.

    The model is frozen so colors are hashable and safe to share.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=1.0, description="Red (0.0-1.0)")
    g: float = Field(ge=0.0, le=1.0, description="Green (0.0-1.0)")
    b: float = Field(ge=0.0, le=1.0, description="Blue (0.0-1.0)")

    @classmethod
    def black(cls) -> "RGB":
        """Create black."""
        return cls(r=0.0, g=0.0, b=0.0)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def to_8bit(self) -> tuple[int, int, int]:
        """Quantize to 8-bit channels (0-255).

        Example:
            >>> RGB(r=1.0, g=0.5, b=0.0).to_8bit()
            (255, 128, 0)
        """
        return (quantize_channel(self.r), quantize_channel(self.g), quantize_channel(self.b))

    def to_hex(self) -> str:
        """Convert to uppercase hex color string (e.g., '#851BE4').

        Returns:
            str: Hex color string in format '#RRGGBB'
        """
        r, g, b = self.to_8bit()
        return f"#{r:02X}{g:02X}{b:02X}"


class HSL(BaseModel):
    """Hue/saturation/lightness color."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0.0, lt=360.0, description="Hue in degrees (0-360)")
    s: float = Field(ge=0.0, le=1.0, description="Saturation (0.0-1.0)")
    l: float = Field(ge=0.0, le=1.0, description="Lightness (0.0-1.0)")

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (h, s, l) tuple."""
        return (self.h, self.s, self.l)
