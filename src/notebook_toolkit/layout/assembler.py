"""
Module: layout.assembler

Purpose:
    Turn answers into one flat, annotated line stream.

Key Functions:
    - answers_to_lines(): Wrap each answer and join them with spacers

Dependencies:
    - layout.models: LineWithMetadata

Used By:
    - layout.engine: calculate_layout() and estimate_page_count()
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from notebook_toolkit.core.models.answers import Answer

from .models import LineWithMetadata


def answers_to_lines(
    answers: Sequence[Answer],
    split: Callable[[str], Sequence[str]],
    answer_spacing: int,
) -> List[LineWithMetadata]:
    """
    Wrap answers and concatenate them in input order.

    The first and last line of each answer are tagged (both, for a
    one-line answer). ``answer_spacing`` blank lines follow every answer
    except the last; they carry that answer's number.

    Args:
        answers: Answers in display order
        split: Wraps one answer's content into lines
        answer_spacing: Blank lines between consecutive answers

    Returns:
        Annotated line stream

    Example:
        >>> lines = answers_to_lines([a1, a2], engine.split_into_lines, 1)
        >>> [line.text for line in lines]
        ['first answer', '', 'second answer']
    """
    all_lines: List[LineWithMetadata] = []
    last_index = len(answers) - 1

    for index, answer in enumerate(answers):
        lines = split(answer.content)
        final = len(lines) - 1
        for line_index, text in enumerate(lines):
            all_lines.append(LineWithMetadata(
                text=text,
                is_answer_start=line_index == 0,
                is_answer_end=line_index == final,
                answer_number=answer.question_number,
            ))

        if index < last_index:
            spacer = LineWithMetadata(
                text="",
                is_answer_start=False,
                is_answer_end=False,
                answer_number=answer.question_number,
                is_spacer=True,
            )
            all_lines.extend([spacer] * answer_spacing)

    return all_lines
