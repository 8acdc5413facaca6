"""
Serialization Utilities

To/from dictionary helpers for the layout boundary:

- Answers arrive from the generation step as a list of
  ``{questionNumber, content, wordCount}`` dictionaries.
- Layout results leave for the rendering/export step as plain dictionaries.

All models have ``to_dict()`` (and inputs ``from_dict()``); these functions
add list handling and validation on top.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List

from ..models.answers import Answer
from ..models.fonts import FontDescriptor
from ..schemas.validator import validate_answer_payloads

if TYPE_CHECKING:
    from notebook_toolkit.layout.models import LayoutResult


# ─────────────────────────────────────────────────────────────────────────────
# Answers
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_answers(
    payloads: Iterable[dict[str, Any]],
    *,
    validate: bool = True,
) -> List[Answer]:
    """
    Build Answers from generation payload dictionaries.

    Args:
        payloads: Answer dictionaries, in display order
        validate: Whether to validate the whole list first (including
            duplicate question numbers)

    Returns:
        Answers in input order

    Raises:
        ValidationError: If validate=True and any entry is malformed
    """
    items = list(payloads)
    if validate:
        validate_answer_payloads(items)
    return [
        Answer.from_dict(data, path=f"answers[{index}]")
        for index, data in enumerate(items)
    ]


def serialize_answers(answers: Iterable[Answer]) -> List[dict[str, Any]]:
    """Serialize Answers back to payload dictionaries."""
    return [answer.to_dict() for answer in answers]


def deserialize_font(data: dict[str, Any]) -> FontDescriptor:
    """Build a FontDescriptor from a font catalog entry."""
    return FontDescriptor.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Layout
# ─────────────────────────────────────────────────────────────────────────────

def serialize_layout(result: "LayoutResult") -> dict[str, Any]:
    """
    Serialize a LayoutResult for rendering/export consumers.

    Returns:
        ``{"pages": [...], "total_pages": int, "total_lines": int}``
    """
    return result.to_dict()
