"""Configuration service for managing the caller's settings file."""

import logging
from pathlib import Path
from threading import Lock
from typing import Any, Optional

from pydantic import ValidationError

from chromaseq.exceptions import ConfigValidationError
from chromaseq.models import AppConfig
from chromaseq.models.config import DEFAULT_CONFIG_PATH
from chromaseq.utils import PydanticPersistence

logger = logging.getLogger(__name__)


class ConfigService:
    """
    Get/set access to AppConfig with validation and persistence.

    Values are validated by rebuilding the whole model, so an invalid
    ``set`` leaves the current configuration untouched.

    The lock guards the in-memory model only; file I/O runs outside it.

    Usage Example:
        ```python
        service = ConfigService(AppConfig.load_or_default(path), path)
        service.set("default_seed", 42)
        service.save()
        ```
    """

    def __init__(self, initial_config: Optional[AppConfig] = None, default_path: Optional[Path] = None):
        """``default_path`` is used by load/save when they get no path."""
        self._config = initial_config or AppConfig()
        self._path = Path(default_path) if default_path else DEFAULT_CONFIG_PATH
        self._lock = Lock()

    @property
    def path(self) -> Path:
        """Settings file this service reads and writes."""
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return getattr(self._config, key, default)

    def get_all(self) -> dict[str, Any]:
        """Snapshot of all configuration values (JSON-ready)."""
        with self._lock:
            return self._config.model_dump(mode="json")

    def get_config(self) -> AppConfig:
        """Copy of the entire configuration object."""
        with self._lock:
            return self._config.model_copy(deep=True)

    def set(self, key: str, value: Any) -> None:
        """
        Validate and store one setting.

        Raises:
            ConfigValidationError: unknown key or rejected value

        Example:
            ```python
            service.set("tolerance", 0.005)
            service.set("default_method", "cf")  # stored as "continued_fraction"
            ```
        """
        with self._lock:
            if key not in AppConfig.model_fields:
                raise ConfigValidationError(
                    field=key,
                    value=value,
                    error_msg=f"unknown setting, expected one of: {', '.join(AppConfig.model_fields)}",
                )

            # model_copy(update=...) skips validation
            try:
                self._config = AppConfig.model_validate({**self._config.model_dump(), key: value})
            except ValidationError as e:
                message = e.errors()[0].get("msg", str(e))
                logger.warning(f"Rejected setting {key}={value!r}: {message}")
                raise ConfigValidationError(field=key, value=value, error_msg=message) from e

        logger.debug(f"Setting {key} = {value!r}")

    def reset(self) -> None:
        """Reset configuration to default values."""
        with self._lock:
            self._config = AppConfig()
        logger.info("Settings reset to defaults")

    def load(self, path: Optional[Path] = None) -> None:
        """Replace the in-memory settings with the file contents (errors as PydanticPersistence.load_json)."""
        file_path = Path(path) if path else self._path
        loaded = PydanticPersistence.load_json(file_path, AppConfig)
        with self._lock:
            self._config = loaded
        logger.info(f"Settings loaded from {file_path}")

    def save(self, path: Optional[Path] = None) -> None:
        """Write the current settings (with .bak backup of the previous file)."""
        file_path = Path(path) if path else self._path
        with self._lock:
            snapshot = self._config.model_copy(deep=True)
        PydanticPersistence.save_json(snapshot, file_path)
        logger.info(f"Settings saved to {file_path}")
