"""
Centralized error handling utilities.

The pure core (converter, generators, inversion, analyzer) only raises.
Everything here belongs to the outer layers, which translate low-level
errors into ChromaSeqError instances and log them:

| Scenario | Use This |
|----------|----------|
| Settings file fails pydantic validation | `wrap_pydantic_error(e, path)` |
| Request payload fails pydantic validation | `wrap_request_error(e, tool)` |
| Log and re-raise around a service call | `@handle_errors(operation_name="invert")` |
| Show an error on the command line | `format_error_for_display(e)` |

## Architecture

```
┌─────────────────────────────────────┐
│  CLI (click)                        │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑  ChromaSeqError
┌─────────────────────────────────────┐
│  SequenceService / persistence      │
│  - Converts pydantic errors         │
│  - Logs technical details           │
└─────────────────────────────────────┘
                  ↑  ChromaSeqError, ValidationError
┌─────────────────────────────────────┐
│  Core (colors, sequences, core)     │
│  - Raises, never logs               │
└─────────────────────────────────────┘
```
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import ChromaSeqError
from .config import ConfigFileInvalidError, ConfigValidationError
from .sequence import InvalidParameterError


logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error logging.

    Args:
        operation_name: Name of the operation for logging (e.g., "invert color")
        fallback_value: Value to return if an error occurs and re_raise=False
        re_raise: Whether to re-raise the exception after logging
        log_level: Logging level for the error (default: ERROR)

    Example:
        ```python
        @handle_errors(operation_name="generate colors")
        def generate(self, request):
            ...
        ```
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except ChromaSeqError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


def _field_name(err: dict) -> str:
    return ".".join(str(loc) for loc in err.get('loc', ('unknown',))) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> ChromaSeqError:
    """
    Turn a ValidationError from loading the settings file into a ConfigurationError.

    Broken JSON becomes ConfigFileInvalidError; rejected values become
    ConfigValidationError, naming the field when only one failed.
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError) or not error.errors():
        return ConfigValidationError(field="unknown", value=None, error_msg=str(error), file_path=file_path)

    errors = error.errors()
    if errors[0].get('type') == 'json_invalid':
        parse_error = errors[0].get('ctx', {}).get('error') or errors[0].get('msg', str(error))
        return ConfigFileInvalidError(file_path, str(parse_error))

    if len(errors) == 1:
        return ConfigValidationError(
            field=_field_name(errors[0]),
            value=errors[0].get('input'),
            error_msg=errors[0].get('msg', 'validation failed'),
            file_path=file_path,
        )

    details = "\n".join(f"  - {_field_name(err)}: {err.get('msg', 'validation failed')}" for err in errors)
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n{details}",
        file_path=file_path,
    )


def wrap_request_error(error: Exception, tool: str) -> InvalidParameterError:
    """
    Convert a Pydantic ValidationError raised while parsing a request payload.

    Only the first failing field is reported; the technical message keeps
    the full pydantic text.
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError) and error.errors():
        first_error = error.errors()[0]
        loc = tuple(first_error.get('loc', ()))
        # Discriminated unions prefix the location with the variant tag
        if len(loc) > 1 and loc[0] == tool:
            first_error = {**first_error, 'loc': loc[1:]}
        wrapped = InvalidParameterError(
            field=_field_name(first_error),
            value=first_error.get('input', None),
            error_msg=first_error.get('msg', 'validation failed'),
        )
    else:
        wrapped = InvalidParameterError(field=tool, value=None, error_msg=str(error))

    wrapped.technical_message = f"Request '{tool}' rejected: {error}"
    return wrapped


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ChromaSeqError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
