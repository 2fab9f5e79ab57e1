"""Errors raised by the color converter, the generators and the inversion engine.

- MalformedColorError: Hex input could not be parsed
- UnknownMethodError: Method tag or object is not one of the known sequences
- InvalidParameterError: A numeric parameter or request field is out of range
- NonConvergentRootError: Newton iteration for a metallic constant failed
"""

from typing import Any, Iterable, Optional

from .base import ChromaSeqError


class MalformedColorError(ChromaSeqError):
    """Hex color string is not of the form #RRGGBB."""

    def __init__(self, value: Any, reason: str):
        """
        Initialize malformed color error.

        Args:
            value: The rejected input
            reason: Why it was rejected (length, characters, type)
        """
        super().__init__(
            user_message=f"Malformed color {value!r}: {reason}",
            technical_message=f"hex_to_rgb rejected {value!r} ({reason})",
            recoverable=True,
            recovery_hint="Colors must be six hex digits, optionally prefixed with '#', e.g. #851BE4",
        )
        self.value = value
        self.reason = reason


class UnknownMethodError(ChromaSeqError):
    """Sequence method tag is not recognized."""

    def __init__(self, method: Any, available: Optional[Iterable[str]] = None):
        """
        Initialize unknown method error.

        Args:
            method: The tag or object that could not be dispatched
            available: Method tags that would have been accepted
        """
        names = sorted(available) if available else []
        recovery = None
        if names:
            recovery = f"Available methods: {', '.join(names)}"

        super().__init__(
            user_message=f"Unknown sequence method: {method!r}",
            technical_message=f"No generator registered for {method!r} ({type(method).__name__})",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.method = method
        self.available = names


class InvalidParameterError(ChromaSeqError):
    """A parameter or request field failed validation."""

    def __init__(self, field: str, value: Any, error_msg: str):
        """
        Initialize invalid parameter error.

        Args:
            field: Name of the offending parameter
            value: The rejected value
            error_msg: Why the value is invalid
        """
        super().__init__(
            user_message=f"Invalid value for '{field}': {error_msg}",
            technical_message=f"Parameter validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=f"Check the '{field}' value and try again",
        )
        self.field = field
        self.value = value


class NonConvergentRootError(ChromaSeqError):
    """Newton's method did not converge for an R-sequence constant.

    This signals a programming error (invalid dimension or broken initial
    guess) rather than bad user input, so it is never recoverable.
    """

    def __init__(self, dimension: int, iterations: int, last_estimate: Optional[float] = None):
        """
        Initialize non-convergent root error.

        Args:
            dimension: The R-sequence dimension d
            iterations: Iterations performed before giving up
            last_estimate: Last Newton iterate, if any
        """
        super().__init__(
            user_message=f"Could not compute the R-sequence constant for dimension {dimension}",
            technical_message=(
                f"Newton iteration for x^{dimension + 1} = x + 1 did not converge "
                f"after {iterations} iterations (last estimate: {last_estimate})"
            ),
            recoverable=False,
        )
        self.dimension = dimension
        self.iterations = iterations
        self.last_estimate = last_estimate
