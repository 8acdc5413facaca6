"""
Tests for layout.wrapping

Uses ``len`` as the width function (one unit per character) so expected
lines can be read straight off the input.
"""

import pytest

from notebook_toolkit.layout import break_long_word, split_into_lines, wrap_words


class TestWrapWords:
    """Tests for wrap_words()."""

    def test_wrap_when_all_fit_then_single_line(self):
        assert wrap_words(["hello", "world"], len, 20) == ["hello world"]

    def test_wrap_when_exact_fit_then_kept_on_line(self):
        """Width equal to max_width still fits."""
        assert wrap_words(["abc", "def"], len, 7) == ["abc def"]

    def test_wrap_when_overflow_then_breaks_before_word(self):
        assert wrap_words(["one", "two", "three"], len, 7) == ["one two", "three"]

    def test_wrap_when_no_words_then_single_empty_line(self):
        assert wrap_words([], len, 10) == [""]

    def test_wrap_when_long_word_then_flushes_pending_line(self):
        """Oversized word: pending line closes, chunks follow, last chunk continues."""
        lines = wrap_words(["ab", "abcdefghij", "cd"], len, 4)
        assert lines == ["ab", "abcd", "efgh", "ij", "cd"]

    def test_wrap_when_last_chunk_has_room_then_next_word_joins_it(self):
        assert wrap_words(["abcdefgh", "x"], len, 6) == ["abcdef", "gh x"]


class TestBreakLongWord:
    """Tests for break_long_word()."""

    def test_break_when_word_long_then_maximal_chunks(self):
        assert break_long_word("abcdefghij", len, 4) == ["abcd", "efgh", "ij"]

    @pytest.mark.parametrize("word, max_width", [
        ("supercalifragilisticexpialidocious", 5),
        ("x" * 301, 7),
        ("naïve-café-ünïcode", 3),
    ])
    def test_break_when_joined_then_lossless(self, word, max_width):
        chunks = break_long_word(word, len, max_width)

        assert "".join(chunks) == word
        assert all(len(chunk) <= max_width for chunk in chunks)

    def test_break_when_single_char_wider_than_line_then_one_char_per_chunk(self):
        """No character is dropped even when none fits."""
        wide = lambda text: len(text) * 10
        assert break_long_word("abc", wide, 5) == ["a", "b", "c"]

    def test_break_when_empty_word_then_returns_word(self):
        assert break_long_word("", len, 5) == [""]


class TestSplitIntoLines:
    """Tests for split_into_lines()."""

    def test_split_when_paragraph_break_then_blank_line_kept(self):
        lines = split_into_lines("First paragraph.\n\nSecond paragraph.", len, 40)
        assert lines == ["First paragraph.", "", "Second paragraph."]

    def test_split_when_whitespace_only_paragraph_then_single_blank_line(self):
        assert split_into_lines("a\n   \t \nb", len, 10) == ["a", "", "b"]

    def test_split_when_repeated_whitespace_then_collapsed(self):
        assert split_into_lines("  one   two\tthree  ", len, 40) == ["one two three"]

    def test_split_when_empty_text_then_one_blank_line(self):
        assert split_into_lines("", len, 10) == [""]

    def test_split_when_trailing_newline_then_trailing_blank_line(self):
        assert split_into_lines("end\n", len, 10) == ["end", ""]

    def test_split_when_wrapped_then_every_line_fits(self):
        text = "The quick brown fox jumps over the lazy dog " * 20
        lines = split_into_lines(text, len, 25)

        assert len(lines) > 1
        assert all(len(line) <= 25 for line in lines)
        assert " ".join(lines).split() == text.split()
