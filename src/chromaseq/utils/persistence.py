"""JSON files for pydantic models.

Only the CLI settings file goes through here; the sequence core keeps no
state on disk. Writes keep the previous file as ``<name>.bak`` and go
through ``<name>.tmp`` so a crash never leaves a half-written file.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from chromaseq.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _sibling(path: Path, extra_suffix: str) -> Path:
    return path.with_suffix(path.suffix + extra_suffix)


def _replace_atomically(path: Path, text: str) -> None:
    staging = _sibling(path, ".tmp")
    try:
        staging.write_text(text, encoding="utf-8")
        staging.replace(path)
    finally:
        staging.unlink(missing_ok=True)


class PydanticPersistence:
    """
    Load and save pydantic models as JSON.

    Example:
        ```python
        settings = PydanticPersistence.load_json_or_default(path, AppConfig)
        PydanticPersistence.save_json(settings.model_copy(update={"default_seed": 7}), path)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[ModelT]) -> ModelT:
        """
        Read ``path`` and validate it as ``model_type``.

        Raises:
            FileNotFoundError: ``path`` does not exist
            ConfigFileInvalidError: empty file or broken JSON
            ConfigValidationError: JSON is well formed but values are rejected
        """
        name = model_type.__name__
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} is not a valid {name}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {name} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Write ``data`` to ``path``.

        Args:
            data: Model to serialize
            path: Destination file
            indent: JSON indentation
            create_parents: Create missing directories
            backup: Copy an existing file to ``<name>.bak`` first

        Raises:
            OSError: The file system refused the write
            ConfigurationError: The model could not be serialized
        """
        name = type(data).__name__
        try:
            text = data.model_dump_json(indent=indent)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Cannot serialize {name}: {e}",
                recovery_hint="Check the values being saved",
            ) from e

        try:
            if create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)
            if backup and path.exists():
                shutil.copy2(path, _sibling(path, ".bak"))
                logger.debug(f"Backed up {path}")
            _replace_atomically(path, text)
        except OSError as e:
            logger.error(f"Could not write {name} to {path}: {e}")
            raise

        logger.debug(f"Saved {name} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path,
        model_type: type[ModelT],
        default_factory: Optional[Callable[[], ModelT]] = None,
    ) -> ModelT:
        """
        Like load_json, but a missing file yields a default instead.

        Broken files still raise. Nothing is written to disk.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No file at {path}, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
