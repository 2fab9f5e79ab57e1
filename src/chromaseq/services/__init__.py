"""Service layer for chromaseq."""

from .config_service import ConfigService
from .sequence_service import SequenceService

__all__ = ["ConfigService", "SequenceService"]
