"""
Module: measurement.metrics

Purpose:
    Value types for text measurement and page geometry, plus unit
    conversions.

Key Classes:
    - TextMetrics: Width and vertical metrics of a measured string
    - MarginConfig: Page margins in pixels
    - PaddingConfig: Inner padding of the content area in pixels
    - ContentArea: Usable rectangle inside margins and padding

Key Functions:
    - create_default_margins(): Half-inch margins at a given DPI
    - create_default_padding(): Zero padding
    - inches_to_pixels() / pixels_to_inches()

Dependencies:
    - dataclasses (std)

Used By:
    - measurement.provider
    - layout.engine: get_margins()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


DEFAULT_DPI = 96

# Fallback vertical metrics as fractions of the font size
DEFAULT_ASCENT_RATIO = 0.8
DEFAULT_DESCENT_RATIO = 0.2


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """
    Measured metrics of a string (immutable).

    Attributes:
        width: Advance width in pixels
        height: ascent + descent
        ascent: Extent above the baseline
        descent: Extent below the baseline
    """

    width: float
    height: float
    ascent: float
    descent: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "ascent": self.ascent,
            "descent": self.descent,
        }


@dataclass(frozen=True, slots=True)
class MarginConfig:
    """Page margins in pixels."""

    top: float
    bottom: float
    left: float
    right: float

    def to_dict(self) -> dict[str, Any]:
        return {"top": self.top, "bottom": self.bottom, "left": self.left, "right": self.right}


@dataclass(frozen=True, slots=True)
class PaddingConfig:
    """Padding inside the margins, in pixels."""

    top: float = 0
    bottom: float = 0
    left: float = 0
    right: float = 0


@dataclass(frozen=True, slots=True)
class ContentArea:
    """
    Usable rectangle of a page.

    Attributes:
        width: Width inside margins and padding
        height: Height inside margins and padding
        x: Left edge from page origin
        y: Top edge from page origin
    """

    width: float
    height: float
    x: float
    y: float


def create_default_margins(dpi: float = DEFAULT_DPI) -> MarginConfig:
    """
    Create half-inch margins on every side.

    Example:
        >>> create_default_margins(96).top
        48.0
    """
    half_inch = inches_to_pixels(0.5, dpi)
    return MarginConfig(top=half_inch, bottom=half_inch, left=half_inch, right=half_inch)


def create_default_padding() -> PaddingConfig:
    """Create zero padding."""
    return PaddingConfig()


def inches_to_pixels(inches: float, dpi: float = DEFAULT_DPI) -> float:
    """Convert inches to pixels at the given DPI."""
    return inches * dpi


def pixels_to_inches(pixels: float, dpi: float = DEFAULT_DPI) -> float:
    """Convert pixels to inches at the given DPI."""
    return pixels / dpi
