"""Generic utility modules for chromaseq.

- persistence: JSON load/save for Pydantic models
"""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
