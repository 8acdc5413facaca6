"""
Module: measurement

Purpose:
    Font-aware text measurement for layout and rendering.

Key Classes:
    - TextMeasurement: Cached width/metrics provider
    - PillowBackend / ReportLabBackend / ApproximateBackend: Metric sources
    - TextMetrics, MarginConfig, PaddingConfig, ContentArea: Value types

Dependencies:
    - PIL: TrueType measurement surface
    - reportlab: PDF font metrics

Used By:
    - layout.engine.LayoutEngine
    - Rendering/export code placing text on a canvas or PDF
"""

from .backends import (
    ApproximateBackend,
    MeasurementBackend,
    MeasurementUnavailable,
    PillowBackend,
    RawMeasurement,
    ReportLabBackend,
    create_backend,
    load_truetype_font,
)
from .metrics import (
    ContentArea,
    MarginConfig,
    PaddingConfig,
    TextMetrics,
    create_default_margins,
    create_default_padding,
    inches_to_pixels,
    pixels_to_inches,
)
from .provider import MeasurementCacheStats, TextMeasurement

__all__ = [
    # Provider
    "TextMeasurement",
    "MeasurementCacheStats",
    # Backends
    "MeasurementBackend",
    "MeasurementUnavailable",
    "RawMeasurement",
    "PillowBackend",
    "ReportLabBackend",
    "ApproximateBackend",
    "create_backend",
    "load_truetype_font",
    # Metrics
    "TextMetrics",
    "MarginConfig",
    "PaddingConfig",
    "ContentArea",
    "create_default_margins",
    "create_default_padding",
    "inches_to_pixels",
    "pixels_to_inches",
]
