"""
Module: layout.models

Purpose:
    Data models for notebook page layout.
    Immutable dataclasses for annotated lines, placed lines, pages and
    the final layout result.

Key Classes:
    - LineWithMetadata: Wrapped line tagged with its answer
    - CanvasLine: Line positioned on a page
    - CanvasPage: One page of placed lines
    - LayoutResult: Final layout output
    - LayoutCacheStats: Engine cache size snapshot

Dependencies:
    - dataclasses (std)

Used By:
    - layout.assembler: Creates LineWithMetadata
    - layout.paginator: Creates CanvasPages
    - layout.engine: Returns LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from notebook_toolkit.core.models.answers import PageStyle


@dataclass(frozen=True, slots=True)
class LineWithMetadata:
    """
    A wrapped line in the assembled flow.

    Spacer lines between answers carry the preceding answer's number and
    both flags False.

    Attributes:
        text: Line text ("" for blank and spacer lines)
        is_answer_start: First line of an answer
        is_answer_end: Last line of an answer
        answer_number: Question number of the owning answer
        is_spacer: Blank line inserted between answers, not part of any
            answer. Blank paragraph lines inside an answer are not spacers.
    """

    text: str
    is_answer_start: bool
    is_answer_end: bool
    answer_number: int
    is_spacer: bool = False


@dataclass(frozen=True, slots=True)
class CanvasLine:
    """
    A line placed on a page.

    Attributes:
        text: Line text
        x: Left edge (always margin_left)
        y: margin_top + index_on_page * line_height
        font_size: Font size to draw with
    """

    text: str
    x: float
    y: float
    font_size: float

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "x": self.x, "y": self.y, "font_size": self.font_size}


@dataclass(frozen=True, slots=True)
class CanvasPage:
    """
    Complete layout of a single page.

    Attributes:
        page_number: Page number (1-based, contiguous)
        lines: Placed lines, top to bottom
        style: Background style for the renderer

    Example:
        >>> page = CanvasPage(page_number=1, lines=(line,), style=PageStyle.RULED)
        >>> page.line_count
        1
    """

    page_number: int
    lines: tuple[CanvasLine, ...]
    style: PageStyle

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "page_number": self.page_number,
            "lines": [line.to_dict() for line in self.lines],
            "style": self.style.value,
        }


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        pages: Pages in order
        total_pages: len(pages)
        total_lines: Wrapped answer lines plus inserted spacer lines

    Example:
        >>> result = LayoutResult(pages=(), total_pages=0, total_lines=0)
        >>> result.is_empty
        True
    """

    pages: tuple[CanvasPage, ...]
    total_pages: int
    total_lines: int

    @property
    def is_empty(self) -> bool:
        return self.total_pages == 0

    def iter_lines(self):
        """Yield (page_number, CanvasLine) across all pages."""
        for page in self.pages:
            for line in page.lines:
                yield page.page_number, line

    def to_dict(self) -> dict[str, Any]:
        return {
            "pages": [page.to_dict() for page in self.pages],
            "total_pages": self.total_pages,
            "total_lines": self.total_lines,
        }


@dataclass(frozen=True, slots=True)
class LayoutCacheStats:
    """Sizes of the engine's layout and line caches."""

    layout_cache_size: int
    line_cache_size: int
