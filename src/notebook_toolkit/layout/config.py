"""
Module: layout.config

Purpose:
    Configuration for the notebook layout engine.
    Defines page dimensions, margins, line pitch and answer spacing.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Key Functions:
    - create_default_layout_config(): A4 page with half-inch margins

Dependencies:
    - dataclasses (std)

Used By:
    - layout.engine: Wrapping width, page capacity, line positions
    - layout.paginator: Page distribution
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any

from notebook_toolkit.measurement.metrics import DEFAULT_DPI, MarginConfig, create_default_margins


# Standard A4 page dimensions at 96 DPI
DEFAULT_PAGE_WIDTH_PX = 794
DEFAULT_PAGE_HEIGHT_PX = 1123


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for notebook page layout (immutable).

    All values are pixels in one DPI space.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_top: Top margin
        margin_bottom: Bottom margin
        margin_left: Left margin (extra room for a lined-paper margin rule)
        margin_right: Right margin
        line_height: Line pitch, distance between consecutive baselines
        font_size: Font size used for measurement and CanvasLines
        answer_spacing: Blank lines inserted between consecutive answers

    Margins larger than the page are accepted: such a page has no room
    for a line, and the paginator places one line per page.

    Example:
        >>> config = LayoutConfig()
        >>> config.max_width
        674
        >>> config.max_lines_per_page
        31
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_PX
    page_height: float = DEFAULT_PAGE_HEIGHT_PX

    # Margins
    margin_top: float = 60
    margin_bottom: float = 60
    margin_left: float = 70
    margin_right: float = 50

    # Text
    line_height: float = 32
    font_size: float = 18

    # Spacing
    answer_spacing: int = 1

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")
        for name in ("margin_top", "margin_bottom", "margin_left", "margin_right"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")
        if isinstance(self.answer_spacing, bool) or not isinstance(self.answer_spacing, int):
            raise ValueError(f"answer_spacing must be an int: {self.answer_spacing!r}")
        if self.answer_spacing < 0:
            raise ValueError(f"answer_spacing must be non-negative: {self.answer_spacing}")

    @property
    def available_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def max_width(self) -> float:
        """Maximum rendered width of a wrapped line."""
        return self.available_width

    @property
    def max_lines_per_page(self) -> int:
        """
        Whole lines that fit in the content area, never less than 1.

        A degenerate page (margins eating the whole height) still takes
        one line so pagination always makes progress.
        """
        return max(1, math.floor(self.available_height / self.line_height))

    @property
    def is_degenerate(self) -> bool:
        """True when not even one line fits between the margins."""
        return math.floor(self.available_height / self.line_height) <= 0

    @property
    def margins(self) -> MarginConfig:
        return MarginConfig(
            top=self.margin_top,
            bottom=self.margin_bottom,
            left=self.margin_left,
            right=self.margin_right,
        )

    def with_updates(self, **changes: Any) -> "LayoutConfig":
        """
        Return a new validated config with fields replaced.

        Raises:
            TypeError: If a field name is unknown
            ValueError: If a new value is invalid
        """
        return replace(self, **changes)

    def cache_key(self) -> tuple:
        """Every field, in declaration order, for cache keys."""
        return tuple(asdict(self).values())

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayoutConfig":
        """Create from dictionary; missing fields take defaults."""
        return cls(**data)


def create_default_layout_config(dpi: float = DEFAULT_DPI) -> LayoutConfig:
    """
    A4 page with half-inch margins on every side.

    Example:
        >>> create_default_layout_config().margin_top
        48.0
    """
    margins = create_default_margins(dpi)
    return LayoutConfig(
        page_width=DEFAULT_PAGE_WIDTH_PX,
        page_height=DEFAULT_PAGE_HEIGHT_PX,
        margin_top=margins.top,
        margin_bottom=margins.bottom,
        margin_left=margins.left,
        margin_right=margins.right,
        line_height=32,
        font_size=18,
        answer_spacing=1,
    )
