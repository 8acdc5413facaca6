"""
Module: layout.engine

Purpose:
    Lay out answers on notebook pages, memoizing results for live
    re-layout while text is being edited.

Key Classes:
    - LayoutEngine: Wrapping, assembly, pagination and caching

Caching:
    - Line cache: wrapped lines per ``(text[:100], len(text), font.id,
      page_width)``. The key is a prefix, not a hash, so two long
      paragraphs with the same prefix and length share an entry.
    - Layout cache: LayoutResult per answers fingerprint
      ``(question_number, len(content))``, font id, page style and the
      full config. Hits return the same object.
    - Both are bounded FIFO caches and are cleared whenever the
      configuration changes, since cached values embed page geometry.

Thread safety:
    None. Caches are plain dicts; use one engine per thread.

Dependencies:
    - measurement.provider: TextMeasurement
    - layout.wrapping / assembler / paginator

Used By:
    - Rendering and export code (calculate_layout)
    - UI pre-flight estimates (estimate_page_count)
"""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Optional, Sequence, Tuple, Union

from notebook_toolkit.core.cache import BoundedCache
from notebook_toolkit.core.models.answers import Answer, PageStyle
from notebook_toolkit.core.models.fonts import FontDescriptor
from notebook_toolkit.measurement.metrics import MarginConfig
from notebook_toolkit.measurement.provider import TextMeasurement

from .assembler import answers_to_lines
from .config import LayoutConfig
from .models import LayoutCacheStats, LayoutResult
from .paginator import line_position, paginate
from .wrapping import split_into_lines

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_CACHE_SIZE = 100
DEFAULT_LINE_CACHE_SIZE = 100
LINE_CACHE_PREFIX_CHARS = 100

LineCacheKey = Tuple[str, int, str, float]


class LayoutEngine:
    """
    Positions answer text on notebook pages.

    Args:
        config: Layout configuration (defaults to LayoutConfig())
        measurement: Text measurement provider. When omitted the engine
            creates its own and destroys it in destroy().
        layout_cache_size: Capacity of the layout cache
        line_cache_size: Capacity of the line cache

    Example:
        >>> engine = LayoutEngine()
        >>> result = engine.calculate_layout(answers, font, "ruled")
        >>> result.total_pages
        2
        >>> engine.calculate_layout(answers, font, "ruled") is result
        True
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        measurement: Optional[TextMeasurement] = None,
        *,
        layout_cache_size: int = DEFAULT_LAYOUT_CACHE_SIZE,
        line_cache_size: int = DEFAULT_LINE_CACHE_SIZE,
    ):
        self._config = config if config is not None else LayoutConfig()
        self._owns_measurement = measurement is None
        self._measurement = measurement if measurement is not None else TextMeasurement()
        self._layout_cache: BoundedCache[tuple, LayoutResult] = BoundedCache(
            layout_cache_size, name="layout-cache"
        )
        self._line_cache: BoundedCache[LineCacheKey, Tuple[str, ...]] = BoundedCache(
            line_cache_size, name="line-cache"
        )
        self._warn_if_degenerate()

    @property
    def measurement(self) -> TextMeasurement:
        """Measurement provider used for wrapping."""
        return self._measurement

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def calculate_layout(
        self,
        answers: Sequence[Answer],
        font: FontDescriptor,
        page_style: Union[PageStyle, str],
    ) -> LayoutResult:
        """
        Lay out answers on pages, using the layout cache.

        Args:
            answers: Answers in display order
            font: Font to wrap with
            page_style: Style copied onto every page

        Returns:
            LayoutResult; the identical object for repeated calls with an
            unchanged cache key

        Raises:
            ValueError: If page_style is not a known style
        """
        style = PageStyle.coerce(page_style)
        cache_key = self._layout_cache_key(answers, font, style)

        cached = self._layout_cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Layout cache HIT ({len(answers)} answers)")
            return cached

        started = time.perf_counter()
        lines = answers_to_lines(
            answers,
            lambda text: self.split_into_lines(text, font),
            self._config.answer_spacing,
        )
        pages = paginate(lines, self._config, style)
        result = LayoutResult(
            pages=tuple(pages),
            total_pages=len(pages),
            total_lines=len(lines),
        )

        self._layout_cache.put(cache_key, result)
        logger.debug(
            f"Layout cache MISS: {len(answers)} answers -> {result.total_lines} lines, "
            f"{result.total_pages} pages in {(time.perf_counter() - started) * 1000:.1f}ms"
        )
        return result

    def _layout_cache_key(
        self,
        answers: Sequence[Answer],
        font: FontDescriptor,
        style: PageStyle,
    ) -> tuple:
        """Lightweight key: content lengths, not content hashes."""
        content = tuple(answer.fingerprint for answer in answers)
        return (content, font.id, style.value, self._config.cache_key())

    def split_into_lines(self, text: str, font: FontDescriptor) -> Tuple[str, ...]:
        """
        Wrap text to the content width, using the line cache.

        Returns:
            Wrapped lines (at least one)
        """
        cache_key = (
            text[:LINE_CACHE_PREFIX_CHARS],
            len(text),
            font.id,
            self._config.page_width,
        )
        cached = self._line_cache.get(cache_key)
        if cached is not None:
            return cached

        size = self._config.font_size
        lines = tuple(split_into_lines(
            text,
            lambda candidate: self._measurement.measure_width(candidate, font, size),
            self._config.max_width,
        ))
        self._line_cache.put(cache_key, lines)
        return lines

    def estimate_page_count(self, answers: Sequence[Answer], font: FontDescriptor) -> int:
        """
        Pages needed for answers, without building pages.

        Agrees with ``calculate_layout(...).total_pages``.
        """
        lines = answers_to_lines(
            answers,
            lambda text: self.split_into_lines(text, font),
            self._config.answer_spacing,
        )
        return math.ceil(len(lines) / self._config.max_lines_per_page)

    def calculate_line_position(self, line_index: int) -> float:
        """y coordinate of the line at line_index on a page."""
        return line_position(line_index, self._config)

    def calculate_max_lines_per_page(self) -> int:
        """Lines per page under the active config (at least 1)."""
        return self._config.max_lines_per_page

    # ─────────────────────────────────────────────────────────────────────────
    # Configuration
    # ─────────────────────────────────────────────────────────────────────────

    def get_config(self) -> LayoutConfig:
        """Active configuration (immutable snapshot)."""
        return self._config

    def get_margins(self) -> MarginConfig:
        return self._config.margins

    def update_config(self, **changes: Any) -> LayoutConfig:
        """
        Merge changes into the configuration and clear both caches.

        The new config is validated before it replaces the old one; on
        error the engine keeps its previous config and caches.

        Raises:
            TypeError: If a field name is unknown
            ValueError: If a value is invalid

        Returns:
            The new configuration
        """
        new_config = self._config.with_updates(**changes)
        self._config = new_config
        self.clear_cache()
        logger.debug(f"Layout config updated: {sorted(changes)}")
        self._warn_if_degenerate()
        return new_config

    def _warn_if_degenerate(self) -> None:
        if self._config.is_degenerate:
            logger.warning(
                f"Content height {self._config.available_height}px is smaller than line "
                f"height {self._config.line_height}px; placing 1 line per page"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Cache management
    # ─────────────────────────────────────────────────────────────────────────

    def clear_cache(self) -> None:
        """Drop layout and line caches."""
        self._layout_cache.clear()
        self._line_cache.clear()

    def get_cache_stats(self) -> LayoutCacheStats:
        return LayoutCacheStats(
            layout_cache_size=len(self._layout_cache),
            line_cache_size=len(self._line_cache),
        )

    def destroy(self) -> None:
        """
        Clear caches and release the measurement provider if owned.

        Safe to call more than once.
        """
        self.clear_cache()
        if self._owns_measurement:
            self._measurement.destroy()
