"""
Module: answers

Purpose:
    Provides the Answer dataclass (one question's text content plus its
    declared number) and the PageStyle enum carried through to pages.

Key Functions:
    - Answer.from_dict(data): Build from a generation payload entry
    - Answer.to_dict(): Serialize for JSON
    - PageStyle.coerce(value): Accept enum members or plain strings

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.assembler: Converts answers into annotated lines
    - layout.engine: Cache key fingerprints
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..schemas.validator import validate_answer_payload


class PageStyle(str, Enum):
    """
    Background decoration variant of a notebook page.

    Style never affects line placement; it is copied onto every
    CanvasPage for the renderer.
    """

    RULED = "ruled"
    UNRULED = "unruled"
    LINED = "lined"

    @classmethod
    def coerce(cls, value: Union["PageStyle", str]) -> "PageStyle":
        """
        Convert a string or PageStyle to a PageStyle.

        Raises:
            ValueError: If value is not a known style
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True, slots=True)
class Answer:
    """
    One answer to lay out (immutable).

    Attributes:
        question_number: Declared question number (>= 1, order-significant)
        content: Raw answer text; newlines mark paragraph breaks
        word_count: Advisory word count, never used for layout

    Invariants:
        - question_number is an int >= 1
        - content is a str
        - word_count is an int >= 0

    Example:
        >>> answer = Answer(question_number=1, content="hello world", word_count=2)
        >>> answer.fingerprint
        (1, 11)
    """

    question_number: int
    content: str
    word_count: int = 0

    def __post_init__(self) -> None:
        """Validate answer on construction."""
        if isinstance(self.question_number, bool) or not isinstance(self.question_number, int):
            raise ValueError(f"question_number must be an int: {self.question_number!r}")
        if self.question_number < 1:
            raise ValueError(f"question_number must be >= 1: {self.question_number}")
        if not isinstance(self.content, str):
            raise ValueError(f"content must be a str: {type(self.content).__name__}")
        if isinstance(self.word_count, bool) or not isinstance(self.word_count, int):
            raise ValueError(f"word_count must be an int: {self.word_count!r}")
        if self.word_count < 0:
            raise ValueError(f"word_count must be >= 0: {self.word_count}")

    @property
    def fingerprint(self) -> tuple[int, int]:
        """
        Lightweight content fingerprint used in layout cache keys.

        Only the length of the content is used, not a hash: two answers
        with equal number and equal length share a fingerprint.
        """
        return (self.question_number, len(self.content))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary (camelCase keys, as received)."""
        return {
            "questionNumber": self.question_number,
            "content": self.content,
            "wordCount": self.word_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, path: str = "") -> "Answer":
        """
        Create an Answer from a payload dictionary.

        Accepts camelCase (``questionNumber``, ``wordCount``) or snake_case
        keys. A missing word count is derived from the content.

        Raises:
            ValidationError: If questionNumber or content is missing or
                has the wrong type
        """
        validate_answer_payload(data, path=path)
        number = data.get("questionNumber", data.get("question_number"))
        content = data["content"]
        word_count = data.get("wordCount", data.get("word_count"))
        if word_count is None:
            word_count = len(content.split())
        return cls(
            question_number=int(number),
            content=content,
            word_count=int(word_count),
        )
