"""Errors in the settings file (``~/.chromaseq/config.json``).

Only the CLI and the config service raise these; the sequence core never
reads settings.
"""

from typing import Any, Optional

from .base import ChromaSeqError

# Extra hint lines for settings whose valid values are not obvious
_FIELD_HINTS = {
    "default_method": "Run 'chromaseq generate --help' to see the available methods",
    "tolerance": "Tolerance is a distance in the unit RGB cube; 0.01 is the usual value",
    "inversion_strategy": "Use 'first' or 'nearest'",
    "workers": "Use a thread count between 1 and 64",
}


class ConfigurationError(ChromaSeqError):
    """Settings cannot be loaded, validated or saved."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The settings file is not usable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        detail = parse_error.lower()
        if "empty" in detail:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'chromaseq config reset' to recreate it"
        elif "trailing comma" in detail:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last item in {file_path}"
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = (
                f"Fix the JSON in {file_path} (look for trailing commas, unquoted "
                "strings and unclosed braces) or run 'chromaseq config reset'"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A setting has a value AppConfig rejects."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        hint_lines = [f"Update the '{field}' value in your configuration"]
        if file_path:
            hint_lines.append(f"Config file: {file_path}")
        if field in _FIELD_HINTS:
            hint_lines.append(_FIELD_HINTS[field])

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
