"""
Module: layout.wrapping

Purpose:
    Greedy word wrapping against a non-monospaced width function.

Key Functions:
    - split_into_lines(): Wrap a whole text, paragraph by paragraph
    - wrap_words(): Greedy accumulation of words into lines
    - break_long_word(): Character-level breaking of oversized words

Algorithm:
    1. Split on "\\n"; a blank paragraph becomes one "" line
    2. Split paragraphs on whitespace
    3. Add words to the current line while ``line + " " + word`` fits
    4. A word wider than the line on its own is cut into maximal chunks
       (no hyphen); the last chunk keeps accumulating words

Dependencies:
    - None (width function is injected)

Used By:
    - layout.engine.LayoutEngine.split_into_lines
"""

from __future__ import annotations

from typing import Callable, List

WidthFn = Callable[[str], float]


def break_long_word(word: str, measure: WidthFn, max_width: float) -> List[str]:
    """
    Break a word into chunks that each fit within max_width.

    Chunks are packed greedily, one character at a time. A single
    character wider than max_width still forms its own chunk, so joining
    the chunks always gives back the word.

    Args:
        word: Word to break
        measure: Width function
        max_width: Maximum chunk width

    Returns:
        Chunks in order (at least one)

    Example:
        >>> break_long_word("abcdef", len, 4)
        ['abcd', 'ef']
    """
    chunks: List[str] = []
    current = ""

    for char in word:
        candidate = current + char
        if measure(candidate) <= max_width:
            current = candidate
        else:
            if current:
                chunks.append(current)
            current = char

    if current:
        chunks.append(current)

    return chunks if chunks else [word]


def wrap_words(words: List[str], measure: WidthFn, max_width: float) -> List[str]:
    """
    Wrap words greedily into lines no wider than max_width.

    Returns:
        Lines (at least one; [""] for no words)
    """
    lines: List[str] = []
    current = ""

    for word in words:
        if measure(word) > max_width:
            if current:
                lines.append(current)
            chunks = break_long_word(word, measure, max_width)
            lines.extend(chunks[:-1])
            current = chunks[-1]
            continue

        candidate = f"{current} {word}" if current else word
        if measure(candidate) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    return lines if lines else [""]


def split_into_lines(text: str, measure: WidthFn, max_width: float) -> List[str]:
    """
    Wrap text into lines, preserving explicit line breaks.

    Each "\\n"-separated paragraph is wrapped on its own. Blank paragraphs
    keep one empty line so intentional spacing survives.

    Example:
        >>> split_into_lines("one two\\n\\nthree", len, 7)
        ['one two', '', 'three']
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            lines.append("")
            continue
        words = [word for word in paragraph.split() if word]
        lines.extend(wrap_words(words, measure, max_width))
    return lines
