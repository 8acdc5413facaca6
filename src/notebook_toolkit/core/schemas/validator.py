"""
Answer Payload Validation

Validates the ``(questionNumber, content, wordCount)`` dictionaries that the
generation step hands to the layout engine.

Malformed answers are programmer errors, not layout conditions: validation
fails fast and collects every problem it finds for the offending entry.
"""

from __future__ import annotations

from typing import Any, Iterable


class ValidationError(Exception):
    """Raised when data fails structural validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_answer_payload(data: Any, *, path: str = "") -> None:
    """
    Validate a single answer payload.

    Both camelCase and snake_case keys are accepted.

    Args:
        data: Answer dictionary to validate
        path: Location of the entry, used in error messages

    Raises:
        ValidationError: If data is invalid
    """
    where = path or "answer"
    if not isinstance(data, dict):
        raise ValidationError(
            f"{where}: expected an object, got {type(data).__name__}",
            path=path,
        )

    errors: list[str] = []

    number = data.get("questionNumber", data.get("question_number"))
    if number is None:
        errors.append("missing required field: questionNumber")
    elif not _is_int(number):
        errors.append(f"questionNumber must be an integer, got {number!r}")
    elif number < 1:
        errors.append(f"questionNumber must be >= 1, got {number}")

    if "content" not in data:
        errors.append("missing required field: content")
    elif not isinstance(data["content"], str):
        errors.append(f"content must be a string, got {type(data['content']).__name__}")

    word_count = data.get("wordCount", data.get("word_count"))
    if word_count is not None and (not _is_int(word_count) or word_count < 0):
        errors.append(f"wordCount must be a non-negative integer, got {word_count!r}")

    if errors:
        raise ValidationError(f"{where}: {'; '.join(errors)}", path=path, errors=errors)


def validate_answer_payloads(payloads: Iterable[Any]) -> None:
    """
    Validate a list of answer payloads.

    Checks each entry and that question numbers are unique within the list.

    Raises:
        ValidationError: On the first invalid entry or duplicate number
    """
    seen: dict[int, int] = {}
    for index, data in enumerate(payloads):
        path = f"answers[{index}]"
        validate_answer_payload(data, path=path)
        number = data.get("questionNumber", data.get("question_number"))
        if number in seen:
            message = f"duplicate questionNumber {number} (first at answers[{seen[number]}])"
            raise ValidationError(f"{path}: {message}", path=path, errors=[message])
        seen[number] = index
