"""
Module: measurement.provider

Purpose:
    Cached text measurement for the layout engine and for renderers that
    need pixel-accurate placement.

Key Classes:
    - TextMeasurement: Width/metrics queries with bounded FIFO caches
    - MeasurementCacheStats: Cache size snapshot

Degraded mode:
    With no backend (headless use, or after destroy()) or when the backend
    cannot load a font, widths fall back to ``len(text) * size * 0.6`` and
    vertical metrics to 0.8/0.2 of the size. This is never an error.

Dependencies:
    - measurement.backends: Font metric sources
    - core.cache: BoundedCache

Used By:
    - layout.engine.LayoutEngine
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Set, Tuple

from notebook_toolkit.core.cache import BoundedCache
from notebook_toolkit.core.models.fonts import FontDescriptor

from .backends import (
    ApproximateBackend,
    MeasurementBackend,
    MeasurementUnavailable,
    PillowBackend,
    RawMeasurement,
)
from .metrics import (
    DEFAULT_ASCENT_RATIO,
    DEFAULT_DESCENT_RATIO,
    DEFAULT_DPI,
    ContentArea,
    MarginConfig,
    PaddingConfig,
    TextMetrics,
    inches_to_pixels,
    pixels_to_inches,
)

logger = logging.getLogger(__name__)

DEFAULT_MEASUREMENT_CACHE_SIZE = 1000
DEFAULT_LINE_SPACING = 1.5
LINE_HEIGHT_PROBE = "Ag"

CacheKey = Tuple[str, float, str]

_DEFAULT = object()


@dataclass(frozen=True, slots=True)
class MeasurementCacheStats:
    """Sizes of the two measurement caches."""

    width_cache_size: int
    metrics_cache_size: int


class TextMeasurement:
    """
    Text measurement provider with width and metrics caches.

    Both caches are keyed by ``(font.id, size, text)`` and evict the oldest
    inserted entry when full.

    Args:
        backend: Measurement source. Defaults to a PillowBackend; pass None
            for headless use (approximation only).
        cache_size: Capacity of each cache.

    Example:
        >>> tm = TextMeasurement(backend=None)
        >>> tm.measure_width("Hello", FontDescriptor(id="f", family="F"), 10)
        30.0
    """

    def __init__(
        self,
        backend: Optional[MeasurementBackend] = _DEFAULT,  # type: ignore[assignment]
        cache_size: int = DEFAULT_MEASUREMENT_CACHE_SIZE,
    ):
        if backend is _DEFAULT:
            backend = PillowBackend()
        self._backend: Optional[MeasurementBackend] = backend
        self._fallback = ApproximateBackend()
        self._width_cache: BoundedCache[CacheKey, float] = BoundedCache(cache_size, name="width-cache")
        self._metrics_cache: BoundedCache[CacheKey, TextMetrics] = BoundedCache(
            cache_size, name="metrics-cache"
        )
        self._degraded_fonts: Set[str] = set()

    @property
    def backend(self) -> Optional[MeasurementBackend]:
        """Active backend, or None when running on the approximation."""
        return self._backend

    # ─────────────────────────────────────────────────────────────────────────
    # Measurement
    # ─────────────────────────────────────────────────────────────────────────

    def _measure(self, text: str, font: FontDescriptor, size: float) -> RawMeasurement:
        if self._backend is not None:
            try:
                return self._backend.measure(text, font, size)
            except MeasurementUnavailable as exc:
                if font.id not in self._degraded_fonts:
                    self._degraded_fonts.add(font.id)
                    logger.warning(
                        f"Measuring font {font.id!r} with approximate widths "
                        f"({self._backend.name} backend: {exc})"
                    )
        return self._fallback.measure(text, font, size)

    def measure_width(self, text: str, font: FontDescriptor, size: float) -> float:
        """
        Width of text in pixels.

        Args:
            text: String to measure (empty string measures 0)
            font: Font to measure with
            size: Font size in pixels

        Returns:
            Summed advance width in pixels
        """
        if not text:
            return 0.0

        key = (font.id, size, text)
        cached = self._width_cache.get(key)
        if cached is not None:
            return cached

        width = self._measure(text, font, size).width
        self._width_cache.put(key, width)
        return width

    def get_metrics(self, text: str, font: FontDescriptor, size: float) -> TextMetrics:
        """
        Width and vertical metrics of text.

        Ascent/descent default to 0.8/0.2 of the size when the backend
        reports no bounding-box data; ``height`` is always their sum.
        """
        key = (font.id, size, text)
        cached = self._metrics_cache.get(key)
        if cached is not None:
            return cached

        raw = self._measure(text, font, size) if text else RawMeasurement(width=0.0)
        ascent = raw.ascent or size * DEFAULT_ASCENT_RATIO
        descent = raw.descent or size * DEFAULT_DESCENT_RATIO
        metrics = TextMetrics(
            width=raw.width,
            height=ascent + descent,
            ascent=ascent,
            descent=descent,
        )
        self._metrics_cache.put(key, metrics)
        return metrics

    def calculate_line_height(
        self,
        font: FontDescriptor,
        size: float,
        line_spacing: float = DEFAULT_LINE_SPACING,
    ) -> float:
        """Line pitch from the metrics of a fixed two-glyph probe."""
        return self.get_metrics(LINE_HEIGHT_PROBE, font, size).height * line_spacing

    def estimate_word_width(self, word: str, font: FontDescriptor, size: float) -> float:
        return self.measure_width(word, font, size)

    def fits_within_width(self, text: str, max_width: float, font: FontDescriptor, size: float) -> bool:
        """Check if text fits within max_width."""
        return self.measure_width(text, font, size) <= max_width

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def calculate_available_width(page_width: float, margins: MarginConfig) -> float:
        return page_width - margins.left - margins.right

    @staticmethod
    def calculate_available_height(page_height: float, margins: MarginConfig) -> float:
        return page_height - margins.top - margins.bottom

    @classmethod
    def calculate_content_area(
        cls,
        page_width: float,
        page_height: float,
        margins: MarginConfig,
        padding: PaddingConfig,
    ) -> ContentArea:
        """Rectangle inside margins and padding."""
        available_width = cls.calculate_available_width(page_width, margins)
        available_height = cls.calculate_available_height(page_height, margins)
        return ContentArea(
            width=available_width - padding.left - padding.right,
            height=available_height - padding.top - padding.bottom,
            x=margins.left + padding.left,
            y=margins.top + padding.top,
        )

    @staticmethod
    def calculate_max_lines(available_height: float, line_height: float) -> int:
        """Number of whole lines that fit in available_height."""
        return math.floor(available_height / line_height)

    @staticmethod
    def inches_to_pixels(inches: float, dpi: float = DEFAULT_DPI) -> float:
        return inches_to_pixels(inches, dpi)

    @staticmethod
    def pixels_to_inches(pixels: float, dpi: float = DEFAULT_DPI) -> float:
        return pixels_to_inches(pixels, dpi)

    # ─────────────────────────────────────────────────────────────────────────
    # Cache management
    # ─────────────────────────────────────────────────────────────────────────

    def clear_cache(self) -> None:
        """Drop both caches."""
        self._width_cache.clear()
        self._metrics_cache.clear()

    def get_cache_stats(self) -> MeasurementCacheStats:
        return MeasurementCacheStats(
            width_cache_size=len(self._width_cache),
            metrics_cache_size=len(self._metrics_cache),
        )

    def destroy(self) -> None:
        """
        Clear caches and release the backend.

        Safe to call more than once. Later calls still work, on the
        approximate model.
        """
        self.clear_cache()
        self._degraded_fonts.clear()
        if self._backend is not None:
            self._backend.close()
            self._backend = None
            logger.debug("Measurement backend released")
