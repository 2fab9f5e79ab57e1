"""Root of the chromaseq exception hierarchy.

Every error carries two messages: `user_message` for the CLI or a JSON
response, and `technical_message` for the log. `recoverable` tells the
caller whether the same call can succeed with corrected input.
"""

from typing import Any, Optional


class ChromaSeqError(Exception):
    """
    Base class for errors raised by chromaseq.

    Attributes:
        user_message: Short description of what went wrong
        technical_message: Details for logs (defaults to user_message)
        recoverable: True when corrected input would succeed
        recovery_hint: What to change, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"

    def to_response(self, tool: Optional[str]) -> dict[str, Any]:
        """Error dictionary returned by tool calls instead of raising."""
        response: dict[str, Any] = {
            "error": self.user_message,
            "error_type": type(self).__name__,
            "tool": tool,
        }
        if self.recovery_hint:
            response["recovery_hint"] = self.recovery_hint
        return response
