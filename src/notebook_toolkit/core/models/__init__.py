"""
Core Models Package

Immutable, validated input models for the layout engine.

| Model | Role |
|-------|------|
| `Answer` | One question's text plus its declared number |
| `FontDescriptor` | Opaque font handle (cache id + measurement family) |
| `PageStyle` | Background decoration variant, carried through to pages |
"""

from .answers import Answer, PageStyle
from .fonts import FontDescriptor

__all__ = [
    "Answer",
    "PageStyle",
    "FontDescriptor",
]
