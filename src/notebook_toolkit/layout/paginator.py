"""
Module: layout.paginator

Purpose:
    Distribute an annotated line stream across fixed-capacity pages.

Key Functions:
    - paginate(): Main pagination function
    - line_position(): y coordinate of a line on its page

Algorithm:
    Fixed pitch, no look-ahead:
    1. Capacity = whole lines between the margins (at least 1)
    2. Place lines top to bottom until the page is full
    3. Close the page and continue on a new one
    4. Keep the last page if it holds any line

Dependencies:
    - layout.models: LineWithMetadata, CanvasLine, CanvasPage
    - layout.config: LayoutConfig

Used By:
    - layout.engine.LayoutEngine.calculate_layout
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from notebook_toolkit.core.models.answers import PageStyle

from .config import LayoutConfig
from .models import CanvasLine, CanvasPage, LineWithMetadata

logger = logging.getLogger(__name__)


def line_position(index: int, config: LayoutConfig) -> float:
    """
    Vertical position of the index-th line on a page.

    Independent of page style: ruled/lined backgrounds are drawn to
    match this pitch by the renderer.
    """
    return config.margin_top + index * config.line_height


def paginate(
    lines: Sequence[LineWithMetadata],
    config: LayoutConfig,
    style: PageStyle,
) -> List[CanvasPage]:
    """
    Arrange lines onto pages.

    Args:
        lines: Assembled line stream
        config: Layout configuration
        style: Page style copied onto every page

    Returns:
        Pages numbered from 1; empty when there are no lines
    """
    if not lines:
        return []

    max_lines = config.max_lines_per_page
    pages: List[CanvasPage] = []
    current: List[CanvasLine] = []
    page_number = 1

    for line in lines:
        if len(current) >= max_lines:
            pages.append(CanvasPage(page_number=page_number, lines=tuple(current), style=style))
            page_number += 1
            current = []

        current.append(CanvasLine(
            text=line.text,
            x=config.margin_left,
            y=line_position(len(current), config),
            font_size=config.font_size,
        ))

    if current:
        pages.append(CanvasPage(page_number=page_number, lines=tuple(current), style=style))

    logger.debug(f"Paginated {len(lines)} lines onto {len(pages)} pages ({max_lines} lines/page)")

    return pages
