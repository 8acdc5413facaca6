"""
Notebook Toolkit Core Package

Shared data models and utilities used by the measurement and layout
packages.

All models are frozen dataclasses: layout results are handed to rendering
and export code that must not be able to change what the engine cached.
"""

from .cache import BoundedCache
from .models import Answer, FontDescriptor, PageStyle

__all__ = [
    "BoundedCache",
    "Answer",
    "FontDescriptor",
    "PageStyle",
]
