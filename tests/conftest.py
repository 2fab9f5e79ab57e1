"""Pytest fixtures for tests."""

import logging
from pathlib import Path

import pytest

from chromaseq.models import AppConfig, GoldenMethod, HaltonMethod, KroneckerMethod, PlasticMethod


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop console/file handlers the CLI installs so they don't outlive the runner's streams."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_chromaseq_handler", False):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Settings file location inside a temporary directory (not created)."""
    return tmp_path / "chromaseq" / "config.json"


@pytest.fixture
def app_config() -> AppConfig:
    """Default settings."""
    return AppConfig()


@pytest.fixture
def plastic() -> PlasticMethod:
    return PlasticMethod()


@pytest.fixture
def golden() -> GoldenMethod:
    return GoldenMethod()


@pytest.fixture
def halton() -> HaltonMethod:
    return HaltonMethod()


@pytest.fixture
def kronecker() -> KroneckerMethod:
    return KroneckerMethod()
