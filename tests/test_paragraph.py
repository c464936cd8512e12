"""Tests for the Paragraph widget."""

from __future__ import annotations

from tuich.buffer import Buffer
from tuich.layout import Align, Rect
from tuich.span import Span
from tuich.style import Color, Style
from tuich.widgets import Paragraph
from tuich.wrap import WrapMode


def render(paragraph: Paragraph, width: int, height: int) -> list[str]:
    buf = Buffer.empty(Rect(0, 0, width, height))
    paragraph.draw(buf, buf.area)
    return buf.lines()


class TestParagraphWrapping:
    """Text wrapped to the rect width."""

    def test_forced_overflow_scenario(self) -> None:
        paragraph = Paragraph(["Hello! ", "World"])
        assert paragraph.line_texts(5) == ["Hello!", "World"]

    def test_overflowing_word_is_cut_at_the_rect_edge(self) -> None:
        assert render(Paragraph(["Hello! ", "World"]), 5, 2) == ["Hello", "World"]

    def test_rows_beyond_height_are_dropped(self) -> None:
        assert render(Paragraph.plain("a b c d"), 1, 2) == ["a", "b"]

    def test_char_mode(self) -> None:
        assert render(Paragraph.plain("abcdef").with_wrap(WrapMode.CHAR), 4, 2) == ["abcd", "ef  "]

    def test_accepts_single_string(self) -> None:
        assert Paragraph("hi").spans == (Span("hi"),)


class TestParagraphLayout:
    """Alignment, indents and styles."""

    def test_align_end(self) -> None:
        assert render(Paragraph.plain("ab").with_align(Align.END), 5, 1) == ["   ab"]

    def test_align_center(self) -> None:
        assert render(Paragraph.plain("ab").with_align(Align.CENTER), 6, 1) == ["  ab  "]

    def test_hanging_indent(self) -> None:
        lines = render(Paragraph.plain("aa bb cc").with_indent(0, 2), 5, 3)
        assert lines == ["aa bb", "  cc ", "     "]

    def test_span_styles_reach_cells(self) -> None:
        red = Style(fg=Color.RED)
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        Paragraph([Span("a", red), "b"]).draw(buf, buf.area)
        assert buf[0, 0].style == red
        assert buf[1, 0].style == Style()

    def test_returns_rect_unchanged(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 2))
        assert Paragraph.plain("x").draw(buf, Rect(1, 0, 3, 2)) == Rect(1, 0, 3, 2)

    def test_lines_builds_one_paragraph_per_line(self) -> None:
        paragraphs = Paragraph.lines("a\nb")
        assert [p.spans for p in paragraphs] == [(Span("a"),), (Span("b"),)]
