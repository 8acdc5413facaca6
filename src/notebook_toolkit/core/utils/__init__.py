"""
Utils Package

Serialization and logging helpers.
"""

from .logging_utils import configure_logging
from .serialization import (
    deserialize_answers,
    serialize_answers,
    deserialize_font,
    serialize_layout,
)

__all__ = [
    "configure_logging",
    "deserialize_answers",
    "serialize_answers",
    "deserialize_font",
    "serialize_layout",
]
