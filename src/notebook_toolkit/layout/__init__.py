"""
Module: layout

Purpose:
    Notebook page layout: word wrapping, answer assembly and pagination.

Key Functions:
    - split_into_lines(): Wrap text to a width function
    - answers_to_lines(): Build the annotated line stream
    - paginate(): Arrange lines onto pages

Key Classes:
    - LayoutEngine: Cached entry point (calculate_layout)
    - LayoutConfig: Page geometry and spacing
    - CanvasLine, CanvasPage, LayoutResult: Output models

Dependencies:
    - measurement: TextMeasurement

Used By:
    - Rendering/export code consuming LayoutResult pages
"""

from .config import LayoutConfig, create_default_layout_config
from .models import CanvasLine, CanvasPage, LayoutCacheStats, LayoutResult, LineWithMetadata
from .wrapping import break_long_word, split_into_lines, wrap_words
from .assembler import answers_to_lines
from .paginator import line_position, paginate
from .engine import LayoutEngine

__all__ = [
    # Config
    "LayoutConfig",
    "create_default_layout_config",
    # Models
    "LineWithMetadata",
    "CanvasLine",
    "CanvasPage",
    "LayoutResult",
    "LayoutCacheStats",
    # Functions
    "split_into_lines",
    "wrap_words",
    "break_long_word",
    "answers_to_lines",
    "paginate",
    "line_position",
    # Engine
    "LayoutEngine",
]
