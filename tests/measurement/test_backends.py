"""
Tests for measurement.backends

Test Coverage:
- ApproximateBackend: character-count model
- PillowBackend: font loading, memoization, surface release
- ReportLabBackend: standard font metrics, fallback font
- create_backend(): name lookup
"""

import pytest
from PIL import ImageFont
from reportlab.pdfbase import pdfmetrics

from notebook_toolkit.core.models import FontDescriptor
from notebook_toolkit.measurement import (
    ApproximateBackend,
    MeasurementUnavailable,
    PillowBackend,
    ReportLabBackend,
    create_backend,
    load_truetype_font,
)


@pytest.fixture
def helvetica():
    return FontDescriptor(id="helvetica", family="Helvetica")


@pytest.fixture
def missing_font():
    return FontDescriptor(id="no-such-font", family="No Such Font Family")


class TestApproximateBackend:
    """Tests for ApproximateBackend."""

    def test_measure_when_text_then_length_times_ratio(self, missing_font):
        raw = ApproximateBackend().measure("abcde", missing_font, 20)
        assert raw.width == pytest.approx(5 * 20 * 0.6)
        assert raw.ascent is None
        assert raw.descent is None

    def test_init_when_ratio_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="char_width_ratio"):
            ApproximateBackend(char_width_ratio=0)


class TestPillowBackend:
    """Tests for PillowBackend."""

    @staticmethod
    def _default_font_loader(calls):
        def _load(font, size):
            calls.append((font.id, size))
            return ImageFont.load_default(size=size)
        return _load

    def test_load_truetype_font_when_family_unknown_then_raises_oserror(self, missing_font):
        with pytest.raises(OSError, match="No font file found"):
            load_truetype_font(missing_font, 18)

    def test_measure_when_family_unknown_then_unavailable(self, missing_font):
        backend = PillowBackend()
        with pytest.raises(MeasurementUnavailable):
            backend.measure("text", missing_font, 18)
        backend.close()

    def test_measure_when_font_loaded_then_width_grows_with_text(self, missing_font):
        backend = PillowBackend(font_loader=self._default_font_loader([]))

        one = backend.measure("A", missing_font, 18).width
        four = backend.measure("AAAA", missing_font, 18).width

        assert one > 0
        assert four > one
        backend.close()

    def test_measure_when_same_font_and_size_then_loads_once(self, missing_font):
        calls = []
        backend = PillowBackend(font_loader=self._default_font_loader(calls))

        backend.measure("first", missing_font, 18)
        backend.measure("second", missing_font, 18)
        backend.measure("third", missing_font, 24)

        assert calls == [(missing_font.id, 18), (missing_font.id, 24)]
        backend.close()

    def test_measure_when_font_fails_again_then_not_reloaded(self, missing_font):
        calls = []

        def _failing(font, size):
            calls.append((font.id, size))
            raise OSError("cannot open resource")

        backend = PillowBackend(font_loader=_failing)
        for _ in range(2):
            with pytest.raises(MeasurementUnavailable):
                backend.measure("text", missing_font, 18)

        assert calls == [(missing_font.id, 18)]
        backend.close()

    def test_measure_when_many_fonts_fail_then_oldest_failure_forgotten(self):
        calls = []

        def _failing(font, size):
            calls.append(font.id)
            raise OSError("cannot open resource")

        backend = PillowBackend(font_loader=_failing, max_fonts=2)
        fonts = [FontDescriptor(id=f"missing-{i}", family=f"Missing {i}") for i in range(3)]
        for font in fonts + [fonts[2], fonts[0]]:
            with pytest.raises(MeasurementUnavailable):
                backend.measure("text", font, 18)

        # missing-2 is still remembered; missing-0 was evicted and is retried
        assert calls == ["missing-0", "missing-1", "missing-2", "missing-0"]
        backend.close()

    def test_measure_when_multiline_then_widest_line(self, missing_font):
        backend = PillowBackend(font_loader=self._default_font_loader([]))

        wide = backend.measure("WWWW", missing_font, 18).width
        multi = backend.measure("W\nWWWW", missing_font, 18)

        assert multi.width == pytest.approx(wide)
        assert multi.ascent is None
        backend.close()

    def test_measure_when_closed_then_unavailable(self, missing_font):
        backend = PillowBackend(font_loader=self._default_font_loader([]))
        backend.close()
        backend.close()

        assert not backend.is_open
        with pytest.raises(MeasurementUnavailable, match="released"):
            backend.measure("text", missing_font, 18)


class TestReportLabBackend:
    """Tests for ReportLabBackend."""

    def test_measure_when_standard_font_then_matches_pdfmetrics(self, helvetica):
        raw = ReportLabBackend().measure("hello world", helvetica, 18)

        assert raw.width == pytest.approx(pdfmetrics.stringWidth("hello world", "Helvetica", 18))
        assert raw.ascent > 0
        assert raw.descent > 0

    def test_measure_when_font_unknown_then_unavailable(self, missing_font):
        with pytest.raises(MeasurementUnavailable, match="not known to reportlab"):
            ReportLabBackend().measure("text", missing_font, 18)

    def test_measure_when_fallback_configured_then_uses_it(self, missing_font):
        raw = ReportLabBackend(fallback_font_name="Courier").measure("abc", missing_font, 10)
        assert raw.width == pytest.approx(pdfmetrics.stringWidth("abc", "Courier", 10))

    def test_measure_when_closed_then_unavailable(self, helvetica):
        backend = ReportLabBackend()
        backend.close()
        with pytest.raises(MeasurementUnavailable):
            backend.measure("text", helvetica, 18)


class TestCreateBackend:
    """Tests for create_backend()."""

    @pytest.mark.parametrize("name, expected", [
        ("pillow", PillowBackend),
        ("ReportLab", ReportLabBackend),
        ("approximate", ApproximateBackend),
    ])
    def test_create_when_known_name_then_instance(self, name, expected):
        backend = create_backend(name)
        assert isinstance(backend, expected)
        backend.close()

    def test_create_when_none_then_headless(self):
        assert create_backend("none") is None

    def test_create_when_unknown_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown measurement backend"):
            create_backend("canvas")
