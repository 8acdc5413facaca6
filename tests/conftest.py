import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import notebook_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from notebook_toolkit.core.models import Answer, FontDescriptor
from notebook_toolkit.layout import LayoutConfig, LayoutEngine
from notebook_toolkit.measurement import TextMeasurement


# Headless measurement: every character is 0.6 * size wide (10.8px at 18px)
APPROX_CHAR_WIDTH_18PX = 18 * 0.6


# Common test fixtures
@pytest.fixture
def test_font():
    """Font that no backend can resolve."""
    return FontDescriptor(id="test-font", family="Test Family", name="Test Font")


@pytest.fixture
def headless_measurement():
    """Measurement provider without a backend (approximation only)."""
    measurement = TextMeasurement(backend=None)
    yield measurement
    measurement.destroy()


@pytest.fixture
def engine_factory(headless_measurement):
    """Factory for engines sharing the headless measurement provider."""
    engines = []

    def _create(config: LayoutConfig | None = None, **kwargs) -> LayoutEngine:
        engine = LayoutEngine(config, measurement=headless_measurement, **kwargs)
        engines.append(engine)
        return engine

    yield _create
    for engine in engines:
        engine.destroy()


@pytest.fixture
def engine(engine_factory):
    """Engine with the default config and headless measurement."""
    return engine_factory()


@pytest.fixture
def sample_answers():
    """Two short answers, one line each at the default page width."""
    return [
        Answer(question_number=1, content="This is the first answer with some content.", word_count=8),
        Answer(
            question_number=2,
            content="This is the second answer with more content to test layout.",
            word_count=11,
        ),
    ]
