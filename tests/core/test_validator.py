"""
Unit Tests for answer payload validation.
"""

import pytest

from notebook_toolkit.core.schemas import (
    ValidationError,
    validate_answer_payload,
    validate_answer_payloads,
)


class TestValidateAnswerPayload:
    """Tests for validate_answer_payload()."""

    def test_validate_when_valid_then_passes(self):
        validate_answer_payload({"questionNumber": 1, "content": "text", "wordCount": 1})

    def test_validate_when_not_a_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="expected an object"):
            validate_answer_payload(["1", "text"])

    def test_validate_when_several_problems_then_collects_all(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_answer_payload({"questionNumber": 0, "wordCount": -1}, path="answers[2]")

        error = exc_info.value
        assert error.path == "answers[2]"
        assert len(error.errors) == 3
        assert str(error).startswith("answers[2]:")

    def test_validate_when_question_number_is_bool_then_raises_error(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_answer_payload({"questionNumber": True, "content": "text"})


class TestValidateAnswerPayloads:
    """Tests for validate_answer_payloads()."""

    def test_validate_when_duplicate_numbers_then_raises_error(self):
        payloads = [
            {"questionNumber": 1, "content": "a"},
            {"questionNumber": 2, "content": "b"},
            {"questionNumber": 1, "content": "c"},
        ]
        with pytest.raises(ValidationError, match="duplicate questionNumber 1") as exc_info:
            validate_answer_payloads(payloads)
        assert exc_info.value.path == "answers[2]"

    def test_validate_when_empty_list_then_passes(self):
        validate_answer_payloads([])
