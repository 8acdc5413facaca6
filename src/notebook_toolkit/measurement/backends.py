"""
Module: measurement.backends

Purpose:
    Font measurement sources behind the TextMeasurement provider.
    Any object with ``measure(text, font, size)`` and ``close()`` can be
    plugged in; three are provided.

Key Classes:
    - PillowBackend: FreeType metrics from TrueType/OpenType files
    - ReportLabBackend: PDF font metrics (standard + registered fonts)
    - ApproximateBackend: Character-count model, no font data needed

Key Functions:
    - load_truetype_font(): Resolve a FontDescriptor to a Pillow font
    - create_backend(): Build a backend by name

Dependencies:
    - PIL: ImageFont / ImageDraw measurement surface
    - reportlab: pdfmetrics width tables

Used By:
    - measurement.provider.TextMeasurement
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Tuple, Union

from PIL import Image, ImageDraw, ImageFont
from reportlab.pdfbase import pdfmetrics

from notebook_toolkit.core.cache import BoundedCache
from notebook_toolkit.core.models.fonts import FontDescriptor

logger = logging.getLogger(__name__)

# Average advance of a glyph as a fraction of the font size
APPROX_CHAR_WIDTH_RATIO = 0.6

PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]
FontLoader = Callable[[FontDescriptor, float], PillowFont]


class MeasurementUnavailable(Exception):
    """Raised by a backend that cannot measure with the requested font."""


@dataclass(frozen=True, slots=True)
class RawMeasurement:
    """
    Backend output before defaults are applied.

    ascent/descent are None when the source has no bounding-box data.
    """

    width: float
    ascent: Optional[float] = None
    descent: Optional[float] = None


class MeasurementBackend(Protocol):
    """Interface every measurement source implements."""

    name: str

    def measure(self, text: str, font: FontDescriptor, size: float) -> RawMeasurement:
        ...

    def close(self) -> None:
        ...


# ─────────────────────────────────────────────────────────────────────────────
# Pillow
# ─────────────────────────────────────────────────────────────────────────────

def _font_file_candidates(font: FontDescriptor) -> List[str]:
    """File names tried, in order, for a descriptor without a path."""
    family = font.family.strip()
    compact = family.replace(" ", "")
    candidates = [
        family,
        f"{family}.ttf",
        f"{compact}.ttf",
        f"{compact}-Regular.ttf",
        f"{compact}.otf",
        f"{compact}-Regular.otf",
    ]
    # Keep order, drop duplicates
    return list(dict.fromkeys(c for c in candidates if c))


def load_truetype_font(font: FontDescriptor, size: float) -> ImageFont.FreeTypeFont:
    """
    Load a TrueType/OpenType font for a descriptor.

    Tries ``font.path`` first, then file names derived from the family
    (Pillow searches the system font directories for bare names).

    Raises:
        OSError: If no candidate can be opened
    """
    options = [font.path] if font.path else []
    options.extend(_font_file_candidates(font))

    for font_name in options:
        try:
            return ImageFont.truetype(font_name, size)
        except (IOError, OSError):
            continue

    raise OSError(f"No font file found for family {font.family!r} (id={font.id!r})")


class PillowBackend:
    """
    Measures text on a Pillow drawing surface.

    Widths come from ``ImageDraw.textlength`` (summed advances), vertical
    metrics from ``ImageDraw.textbbox`` anchored at the left baseline.

    Example:
        >>> backend = PillowBackend()
        >>> backend.measure("Ag", FontDescriptor(id="dv", family="DejaVuSans"), 18)
        RawMeasurement(width=..., ascent=..., descent=...)
    """

    name = "pillow"

    def __init__(self, font_loader: Optional[FontLoader] = None, max_fonts: int = 32):
        self._font_loader: FontLoader = font_loader or load_truetype_font
        self._fonts: BoundedCache[Tuple[str, float], PillowFont] = BoundedCache(
            max_entries=max_fonts, name="pillow-fonts"
        )
        self._missing: BoundedCache[Tuple[str, float], str] = BoundedCache(
            max_entries=max_fonts, name="pillow-missing-fonts"
        )
        self._surface: Optional[Image.Image] = Image.new("L", (1, 1))
        self._draw: Optional[ImageDraw.ImageDraw] = ImageDraw.Draw(self._surface)

    @property
    def is_open(self) -> bool:
        return self._draw is not None

    def _get_font(self, font: FontDescriptor, size: float) -> PillowFont:
        key = (font.id, size)
        cached = self._fonts.get(key)
        if cached is not None:
            return cached
        if key in self._missing:
            raise MeasurementUnavailable(f"Font {font.id!r} not available at {size}px")

        try:
            loaded = self._font_loader(font, size)
        except OSError as exc:
            self._missing.put(key, str(exc))
            raise MeasurementUnavailable(str(exc)) from exc

        self._fonts.put(key, loaded)
        logger.debug(f"Loaded font {font.id!r} at {size}px")
        return loaded

    def measure(self, text: str, font: FontDescriptor, size: float) -> RawMeasurement:
        if self._draw is None:
            raise MeasurementUnavailable("Measurement surface has been released")

        pil_font = self._get_font(font, size)
        lines = text.split("\n")
        width = max(self._draw.textlength(line, font=pil_font) for line in lines)

        ascent: Optional[float] = None
        descent: Optional[float] = None
        if len(lines) == 1 and text.strip():
            try:
                _, top, _, bottom = self._draw.textbbox((0, 0), text, font=pil_font, anchor="ls")
            except ValueError:
                # Bitmap fonts do not support anchors
                pass
            else:
                ascent = float(-top) if top < 0 else None
                descent = float(bottom) if bottom > 0 else None

        return RawMeasurement(width=float(width), ascent=ascent, descent=descent)

    def close(self) -> None:
        """Release the drawing surface and loaded fonts."""
        self._fonts.clear()
        self._missing.clear()
        self._draw = None
        if self._surface is not None:
            self._surface.close()
            self._surface = None


# ─────────────────────────────────────────────────────────────────────────────
# ReportLab
# ─────────────────────────────────────────────────────────────────────────────

class ReportLabBackend:
    """
    Measures text with reportlab's PDF font metrics.

    Resolves ``font.family`` (then ``font.id``) against the 14 standard PDF
    fonts and any font already registered with ``pdfmetrics``. Use it when
    the layout must match a PDF drawn with the same reportlab font.

    Args:
        fallback_font_name: Font used when a descriptor does not resolve.
            None means unresolved fonts raise MeasurementUnavailable.
    """

    name = "reportlab"

    def __init__(self, fallback_font_name: Optional[str] = None):
        self._fallback = fallback_font_name
        self._resolved: Dict[str, str] = {}
        self._closed = False

    def _resolve(self, font: FontDescriptor) -> str:
        if font.id in self._resolved:
            return self._resolved[font.id]

        known = set(pdfmetrics.standardFonts) | set(pdfmetrics.getRegisteredFontNames())
        for candidate in (font.family, font.id):
            if candidate in known:
                self._resolved[font.id] = candidate
                return candidate
        if self._fallback is not None:
            self._resolved[font.id] = self._fallback
            return self._fallback
        raise MeasurementUnavailable(f"Font {font.family!r} is not known to reportlab")

    def measure(self, text: str, font: FontDescriptor, size: float) -> RawMeasurement:
        if self._closed:
            raise MeasurementUnavailable("Backend has been closed")

        font_name = self._resolve(font)
        width = max(pdfmetrics.stringWidth(line, font_name, size) for line in text.split("\n"))
        ascent, descent = pdfmetrics.getAscentDescent(font_name, size)
        return RawMeasurement(
            width=float(width),
            ascent=float(ascent) if ascent > 0 else None,
            descent=float(-descent) if descent < 0 else None,
        )

    def close(self) -> None:
        self._resolved.clear()
        self._closed = True


# ─────────────────────────────────────────────────────────────────────────────
# Approximation
# ─────────────────────────────────────────────────────────────────────────────

class ApproximateBackend:
    """
    Width model needing no font data: ``len(text) * size * ratio``.

    Used directly in headless contexts and as the provider's degraded
    mode when a real backend cannot measure a font.
    """

    name = "approximate"

    def __init__(self, char_width_ratio: float = APPROX_CHAR_WIDTH_RATIO):
        if char_width_ratio <= 0:
            raise ValueError(f"char_width_ratio must be positive: {char_width_ratio}")
        self.char_width_ratio = char_width_ratio

    def measure(self, text: str, font: FontDescriptor, size: float) -> RawMeasurement:
        return RawMeasurement(width=len(text) * size * self.char_width_ratio)

    def close(self) -> None:
        pass


_BACKENDS: Dict[str, Callable[[], MeasurementBackend]] = {
    "pillow": PillowBackend,
    "reportlab": ReportLabBackend,
    "approximate": ApproximateBackend,
}


def create_backend(name: str = "pillow") -> Optional[MeasurementBackend]:
    """
    Build a measurement backend by name.

    Args:
        name: "pillow", "reportlab", "approximate" or "none" (headless)

    Raises:
        ValueError: If the name is unknown
    """
    key = name.strip().lower()
    if key == "none":
        return None
    if key not in _BACKENDS:
        raise ValueError(f"Unknown measurement backend: {name!r} (choose from {sorted(_BACKENDS)} or 'none')")
    return _BACKENDS[key]()
