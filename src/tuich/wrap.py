"""Wrap styled spans into display lines.

Lines are produced lazily from grapheme clusters, each carrying the style of
the span it came from, and measured in terminal cells::

    >>> lines = wrap_spans([Span("Hello! "), Span("World")], 5, WrapMode.WORD)
    >>> [line_text(line) for line in lines]
    ['Hello!', 'World']
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence

from tuich.span import Span
from tuich.style import Style
from tuich.utils import TAB_WIDTH, grapheme_width, graphemes, is_control


class WrapMode(enum.Enum):
    """How text that does not fit the width is broken into lines.

    NONE
        No wrapping; each line is truncated at the width.
    WORD
        Break at spaces and span boundaries. A single word wider than the
        line overflows onto a line of its own.
    WORD_BREAK
        Like WORD, but words wider than the line are broken mid-word.
    CHAR
        Break at any grapheme boundary; spaces are kept.
    """

    NONE = "none"
    WORD = "word"
    WORD_BREAK = "word_break"
    CHAR = "char"


class StyledGrapheme(NamedTuple):
    symbol: str
    style: Optional[Style]
    width: int


DisplayLine = list[StyledGrapheme]


def line_width(line: Sequence[StyledGrapheme]) -> int:
    return sum(g.width for g in line)


def line_text(line: Sequence[StyledGrapheme]) -> str:
    return "".join(g.symbol for g in line)


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------


class _Segment(NamedTuple):
    """One newline-free stretch of input."""

    items: list[StyledGrapheme]
    # starts_span[i] is True when items[i] is the first grapheme of a span
    starts_span: list[bool]


def _segments(spans: Iterable[Span]) -> list[_Segment]:
    segments: list[_Segment] = []
    items: list[StyledGrapheme] = []
    starts: list[bool] = []
    saw_newline = False

    for span in spans:
        first = True
        for g in graphemes(span.text):
            if g in ("\n", "\r\n"):
                segments.append(_Segment(items, starts))
                items, starts = [], []
                saw_newline = True
                continue
            if g == "\t":
                for _ in range(TAB_WIDTH):
                    items.append(StyledGrapheme(" ", span.style, 1))
                    starts.append(first)
                    first = False
                continue
            if is_control(g):
                continue
            width = grapheme_width(g)
            if width == 0:
                continue
            items.append(StyledGrapheme(g, span.style, width))
            starts.append(first)
            first = False

    if items or not saw_newline:
        segments.append(_Segment(items, starts))
    if len(segments) == 1 and not segments[0].items:
        return []
    return segments


# ---------------------------------------------------------------------------
# Break search
# ---------------------------------------------------------------------------


def _is_space(g: StyledGrapheme) -> bool:
    return g.symbol == " "


def _trim_end(items: list[StyledGrapheme], start: int, end: int) -> int:
    while end > start and _is_space(items[end - 1]):
        end -= 1
    return end


def _skip_spaces(items: list[StyledGrapheme], pos: int) -> int:
    while pos < len(items) and _is_space(items[pos]):
        pos += 1
    return pos


def _fit(items: list[StyledGrapheme], pos: int, avail: int) -> int:
    """Index of the first grapheme from *pos* that no longer fits."""
    width = 0
    i = pos
    while i < len(items) and width + items[i].width <= avail:
        width += items[i].width
        i += 1
    return i


def _next_break(seg: _Segment, pos: int, avail: int, mode: WrapMode) -> tuple[int, int]:
    """Return ``(end, next_pos)`` for the line starting at *pos*."""
    items = seg.items
    n = len(items)

    if mode is WrapMode.NONE:
        end = _fit(items, pos, avail)
        return max(end, pos + 1), n

    if mode is WrapMode.CHAR:
        end = max(_fit(items, pos, avail), pos + 1)
        return end, end

    width = 0
    last_break: Optional[int] = None
    i = pos
    while i < n:
        g = items[i]
        if _is_space(g) or (i > pos and seg.starts_span[i]):
            last_break = i
        if width + g.width > avail:
            break
        width += g.width
        i += 1
    else:
        return n, n

    if last_break is None:
        if mode is WrapMode.WORD_BREAK:
            end = max(i, pos + 1)
            return end, end
        # Forced overflow: the word runs on to its next break opportunity
        j = max(i, pos + 1)
        while j < n and not _is_space(items[j]) and not seg.starts_span[j]:
            j += 1
        last_break = j

    return _trim_end(items, pos, last_break), _skip_spaces(items, last_break)


def _wrap(
    spans: Sequence[Span],
    width: int,
    mode: WrapMode,
    first_indent: int,
    indent: int,
) -> Iterator[DisplayLine]:
    first = True
    for seg in _segments(spans):
        if not seg.items:
            yield []
            first = False
            continue
        start = 0
        while start < len(seg.items):
            avail = max(width - (first_indent if first else indent), 1)
            end, next_start = _next_break(seg, start, avail, mode)
            yield seg.items[start:end]
            start = next_start
            first = False


class WrappedLines:
    """Lazily wrapped lines; iterating again starts from the top."""

    def __init__(
        self,
        spans: Sequence[Span],
        width: int,
        mode: WrapMode = WrapMode.WORD,
        first_indent: int = 0,
        indent: int = 0,
    ) -> None:
        self.spans = tuple(spans)
        self.width = max(width, 0)
        self.mode = mode
        self.first_indent = first_indent
        self.indent = indent

    def __iter__(self) -> Iterator[DisplayLine]:
        return _wrap(self.spans, self.width, self.mode, self.first_indent, self.indent)

    def texts(self) -> list[str]:
        return [line_text(line) for line in self]


def wrap_spans(
    spans: Sequence[Span],
    width: int,
    mode: WrapMode = WrapMode.WORD,
    first_indent: int = 0,
    indent: int = 0,
) -> WrappedLines:
    """Wrap *spans* to *width* cells.

    Parameters
    ----------
    spans:
        Styled input; graphemes keep the style of the span they came from.
    width:
        Maximum line width in cells.
    mode:
        Break policy, see :class:`WrapMode`.
    first_indent, indent:
        Cells reserved at the start of the first and of every later line.
        At least one cell always remains available.
    """
    return WrappedLines(spans, width, mode, first_indent, indent)


__all__ = [
    "DisplayLine",
    "StyledGrapheme",
    "WrapMode",
    "WrappedLines",
    "line_text",
    "line_width",
    "wrap_spans",
]
