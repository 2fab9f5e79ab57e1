"""Application configuration model.

These are the command-line caller's defaults. The core never reads them:
every generation and inversion call receives its seed and bounds
explicitly, and the CLI fills in whatever the user left out from here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from chromaseq.exceptions import UnknownMethodError
from chromaseq.utils.persistence import PydanticPersistence

from .enums import InversionStrategy
from .methods import normalize_method_name

DEFAULT_CONFIG_PATH = Path.home() / ".chromaseq" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    default_method: str = Field(default="plastic", description="Method used when none is given")
    default_seed: int = Field(default=0, description="Seed used when none is given")

    # Inversion defaults
    max_search: int = Field(default=10000, ge=0, description="Highest index scanned by invert")
    tolerance: float = Field(
        default=0.01, gt=0.0, le=2.0, description="RGB distance below which a candidate matches"
    )
    inversion_strategy: InversionStrategy = Field(
        default=InversionStrategy.FIRST, description="Report the first or the nearest match"
    )
    workers: int = Field(default=1, ge=1, le=64, description="Threads used to partition inversion scans")

    # Analysis defaults
    compare_length: int = Field(default=1000, ge=1, description="Points per method for compare")

    @field_validator("default_method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        """Store the canonical method tag."""
        try:
            return normalize_method_name(v)
        except UnknownMethodError as e:
            raise ValueError(e.get_full_message()) from e

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.chromaseq/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (keeps a .bak of the previous version)."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)
