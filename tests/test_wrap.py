"""Tests for tuich.wrap -- wrapping spans into display lines."""

from __future__ import annotations

import pytest

from tuich.span import Span
from tuich.style import Color, Style
from tuich.wrap import WrapMode, line_text, line_width, wrap_spans

RED = Style(fg=Color.RED)


def texts(spans: list[Span], width: int, mode: WrapMode = WrapMode.WORD, **kwargs: int) -> list[str]:
    return wrap_spans(spans, width, mode, **kwargs).texts()


# ---------------------------------------------------------------------------
# WORD
# ---------------------------------------------------------------------------


class TestWordWrap:
    """Break at spaces and span boundaries."""

    def test_breaks_at_spaces(self) -> None:
        assert texts([Span("the quick brown fox")], 10) == ["the quick", "brown fox"]

    def test_long_word_overflows_on_its_own_line(self) -> None:
        assert texts([Span("Hello! "), Span("World")], 5) == ["Hello!", "World"]

    def test_span_boundary_is_a_break_point(self) -> None:
        assert texts([Span("abc"), Span("def")], 4) == ["abc", "def"]

    def test_spaces_are_trimmed_at_breaks(self) -> None:
        assert texts([Span("ab   cd")], 3) == ["ab", "cd"]

    def test_fits_on_one_line(self) -> None:
        assert texts([Span("hi there")], 20) == ["hi there"]

    def test_graphemes_keep_their_span_style(self) -> None:
        lines = list(wrap_spans([Span("ab", RED), Span(" cd")], 10))
        assert [g.style for g in lines[0]] == [RED, RED, None, None, None]


# ---------------------------------------------------------------------------
# WORD_BREAK / CHAR / NONE
# ---------------------------------------------------------------------------


class TestOtherModes:
    """Hard breaking and truncation."""

    def test_word_break_splits_long_words(self) -> None:
        assert texts([Span("abcdefgh ij")], 3, WrapMode.WORD_BREAK) == ["abc", "def", "gh", "ij"]

    def test_char_breaks_anywhere(self) -> None:
        assert texts([Span("ab cd ef")], 3, WrapMode.CHAR) == ["ab ", "cd ", "ef"]

    def test_none_truncates_each_line(self) -> None:
        assert texts([Span("abcdef\nxy")], 3, WrapMode.NONE) == ["abc", "xy"]

    def test_wide_glyph_is_never_split(self) -> None:
        lines = texts([Span("a世b")], 2, WrapMode.CHAR)
        assert lines == ["a", "世", "b"]

    def test_glyph_wider_than_line_gets_its_own_line(self) -> None:
        assert texts([Span("世a")], 1, WrapMode.CHAR) == ["世", "a"]

    @pytest.mark.parametrize("mode", [WrapMode.NONE, WrapMode.CHAR, WrapMode.WORD_BREAK])
    @pytest.mark.parametrize("width", [2, 3, 7])
    def test_lines_never_exceed_width(self, mode: WrapMode, width: int) -> None:
        spans = [Span("Lorem ipsum "), Span("dolor世sit amet, consectetur"), Span(" adipiscing")]
        for line in wrap_spans(spans, width, mode):
            assert line_width(line) <= width


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------


class TestInputHandling:
    """Newlines, tabs, control characters and empty input."""

    def test_empty_input_yields_no_lines(self) -> None:
        assert texts([], 10) == []
        assert texts([Span("")], 10) == []

    def test_newline_forces_a_break(self) -> None:
        assert texts([Span("a\nb")], 10) == ["a", "b"]

    def test_blank_line_between_newlines(self) -> None:
        assert texts([Span("a\n\nb")], 10) == ["a", "", "b"]

    def test_trailing_newline_adds_no_line(self) -> None:
        assert texts([Span("a\n")], 10) == ["a"]

    def test_tab_becomes_three_spaces(self) -> None:
        assert texts([Span("a\tb")], 10) == ["a   b"]

    def test_control_characters_are_dropped(self) -> None:
        assert texts([Span("a\x07b")], 10) == ["ab"]

    def test_indents_reduce_available_width(self) -> None:
        assert texts([Span("aa bb cc")], 4, first_indent=2, indent=1) == ["aa", "bb", "cc"]
        assert texts([Span("aa bb cc")], 6, indent=1) == ["aa bb", "cc"]

    def test_wrapped_lines_can_be_iterated_twice(self) -> None:
        lines = wrap_spans([Span("one two")], 3)
        assert [line_text(line) for line in lines] == [line_text(line) for line in lines]
