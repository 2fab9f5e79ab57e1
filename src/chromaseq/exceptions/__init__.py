"""
Custom exception hierarchy for chromaseq.

## Exception Hierarchy

```
ChromaSeqError (base)
├── MalformedColorError
├── UnknownMethodError
├── InvalidParameterError
├── NonConvergentRootError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

A search that exhausts its range is not an error: `invert` returns an
InversionResult with `found=False`.

## Usage

```python
from chromaseq.colors import hex_to_rgb
from chromaseq.exceptions import MalformedColorError

try:
    color = hex_to_rgb("#12345")
except MalformedColorError as e:
    print(e.get_full_message())
```

See `chromaseq.exceptions.handlers` for utilities that convert and log
errors in the service and CLI layers.
"""

from .base import ChromaSeqError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
    wrap_request_error,
)
from .sequence import (
    InvalidParameterError,
    MalformedColorError,
    NonConvergentRootError,
    UnknownMethodError,
)

__all__ = [
    # Base
    "ChromaSeqError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Sequence
    "InvalidParameterError",
    "MalformedColorError",
    "NonConvergentRootError",
    "UnknownMethodError",
    # Handlers
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
    "wrap_request_error",
]
