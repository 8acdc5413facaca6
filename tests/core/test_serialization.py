"""
Unit Tests for serialization helpers.
"""

import pytest

from notebook_toolkit.core.models import Answer
from notebook_toolkit.core.schemas import ValidationError
from notebook_toolkit.core.utils import (
    deserialize_answers,
    deserialize_font,
    serialize_answers,
    serialize_layout,
)


class TestAnswerSerialization:
    """Tests for answer payload conversion."""

    def test_deserialize_when_payload_list_then_keeps_order(self):
        answers = deserialize_answers([
            {"questionNumber": 2, "content": "second", "wordCount": 1},
            {"questionNumber": 1, "content": "first", "wordCount": 1},
        ])
        assert [a.question_number for a in answers] == [2, 1]

    def test_deserialize_when_duplicates_then_raises_error(self):
        with pytest.raises(ValidationError):
            deserialize_answers([
                {"questionNumber": 1, "content": "a"},
                {"questionNumber": 1, "content": "b"},
            ])

    def test_deserialize_when_entry_malformed_then_reports_index(self):
        with pytest.raises(ValidationError) as exc_info:
            deserialize_answers([{"questionNumber": 1, "content": "a"}, {"questionNumber": 2}])
        assert exc_info.value.path == "answers[1]"

    def test_serialize_when_answers_then_camel_case_payloads(self):
        payloads = serialize_answers([Answer(question_number=1, content="x", word_count=1)])
        assert payloads == [{"questionNumber": 1, "content": "x", "wordCount": 1}]

    def test_deserialize_font_when_entry_then_descriptor(self):
        font = deserialize_font({"id": "caveat", "family": "Caveat", "size": 20})
        assert font.size == 20.0


class TestLayoutSerialization:
    """Tests for serialize_layout()."""

    def test_serialize_when_layout_then_plain_dict(self, engine, test_font):
        answers = [Answer(question_number=1, content="hello world", word_count=2)]
        result = engine.calculate_layout(answers, test_font, "lined")

        data = serialize_layout(result)

        assert data["total_pages"] == 1
        assert data["total_lines"] == 1
        page = data["pages"][0]
        assert page["page_number"] == 1
        assert page["style"] == "lined"
        config = engine.get_config()
        assert page["lines"] == [{
            "text": "hello world",
            "x": config.margin_left,
            "y": config.margin_top,
            "font_size": config.font_size,
        }]

    def test_serialize_when_no_answers_then_empty_pages(self, engine, test_font):
        data = serialize_layout(engine.calculate_layout([], test_font, "ruled"))
        assert data == {"pages": [], "total_pages": 0, "total_lines": 0}
