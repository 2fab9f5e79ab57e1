"""Shared state and helpers for CLI commands."""

import json
import logging
import math
import sys
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Optional

import click

from chromaseq.exceptions import ChromaSeqError, InvalidParameterError, format_error_for_display
from chromaseq.models import AppConfig
from chromaseq.models.config import DEFAULT_CONFIG_PATH
from chromaseq.services import ConfigService, SequenceService

logger = logging.getLogger(__name__)


class CliContext:
    """Settings path plus lazily loaded config and services (stored in ctx.obj)."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Optional[AppConfig] = None
        self._service: Optional[SequenceService] = None

    @property
    def config(self) -> AppConfig:
        """Settings from the config file (defaults when it doesn't exist)."""
        if self._config is None:
            self._config = AppConfig.load_or_default(self.config_path)
        return self._config

    @property
    def service(self) -> SequenceService:
        if self._service is None:
            self._service = SequenceService(self.config)
        return self._service

    def config_service(self, initial: Optional[AppConfig] = None) -> ConfigService:
        """ConfigService bound to this settings file, starting from ``initial`` or the loaded config."""
        return ConfigService(initial if initial is not None else self.config, self.config_path)


pass_cli_context = click.make_pass_decorator(CliContext, ensure=True)


def cli_errors(func: Callable) -> Callable:
    """
    Show ChromaSeqError as a formatted message and exit with code 1.

    Anything else propagates so click shows the traceback.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ChromaSeqError as e:
            logger.debug(f"Command failed: {e.technical_message}")
            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)
            sys.exit(1)

    return wrapper


class SeedType(click.ParamType):
    """Integer of any size, or a float."""

    name = "seed"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            seed = float(value)
        except ValueError:
            self.fail(f"{value!r} is not an integer or float", param, ctx)
        if not math.isfinite(seed):
            self.fail(f"{value!r} is not a finite number", param, ctx)
        return seed


SEED = SeedType()


def parse_params(pairs: tuple[str, ...]) -> dict[str, Any]:
    """
    Parse repeated KEY=VALUE options into a method parameter dict.

    Values are read as JSON when possible (numbers, lists, booleans),
    otherwise kept as strings.

    Example:
        >>> parse_params(("bases=[2,3,7]", "mode=hsl"))
        {'bases': [2, 3, 7], 'mode': 'hsl'}
    """
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise InvalidParameterError("params", pair, "expected KEY=VALUE")
        try:
            params[key] = json.loads(raw)
        except json.JSONDecodeError:
            params[key] = raw
    return params


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))
