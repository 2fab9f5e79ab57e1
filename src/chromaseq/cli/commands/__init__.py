"""CLI commands for chromaseq."""

from .compare import compare
from .config import config
from .generate import generate
from .invert import check, invert
from .tools import request, serve

__all__ = ["check", "compare", "config", "generate", "invert", "request", "serve"]
