"""Wrapped, aligned multi-line text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from tuich.buffer import Buffer
from tuich.layout import Align, Rect
from tuich.span import Span, SpanLike, to_spans
from tuich.style import Style
from tuich.wrap import WrapMode, line_width, wrap_spans


@dataclass(frozen=True, init=False)
class Paragraph:
    """Spans wrapped to the width of the rect they are drawn into.

    Lines are written top-down; whatever does not fit the rect's height is
    dropped. ``first_indent`` and ``indent`` shift the first and following
    lines to the right.
    """

    spans: tuple[Span, ...] = ()
    wrap: WrapMode = WrapMode.WORD
    align: Align = Align.START
    first_indent: int = 0
    indent: int = 0

    def __init__(
        self,
        spans: Union[SpanLike, Iterable[SpanLike]] = (),
        wrap: WrapMode = WrapMode.WORD,
        align: Align = Align.START,
        first_indent: int = 0,
        indent: int = 0,
    ) -> None:
        object.__setattr__(self, "spans", tuple(to_spans(spans)))
        object.__setattr__(self, "wrap", wrap)
        object.__setattr__(self, "align", align)
        object.__setattr__(self, "first_indent", first_indent)
        object.__setattr__(self, "indent", indent)

    @classmethod
    def plain(cls, text: str, style: Optional[Style] = None) -> Paragraph:
        return cls([Span(text, style)])

    @classmethod
    def lines(cls, text: str, style: Optional[Style] = None) -> list[Paragraph]:
        """One paragraph per ``\\n``-separated line of *text*."""
        return [cls.plain(line, style) for line in text.split("\n")]

    def with_wrap(self, wrap: WrapMode) -> Paragraph:
        return replace(self, wrap=wrap)

    def with_align(self, align: Align) -> Paragraph:
        return replace(self, align=align)

    def with_indent(self, first_indent: int, indent: int = 0) -> Paragraph:
        return replace(self, first_indent=first_indent, indent=indent)

    def line_texts(self, width: int) -> list[str]:
        """The wrapped lines as plain strings."""
        return wrap_spans(self.spans, width, self.wrap, self.first_indent, self.indent).texts()

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        if rect.is_empty:
            return rect

        lines = wrap_spans(self.spans, rect.width, self.wrap, self.first_indent, self.indent)
        for row, line in enumerate(lines):
            if row >= rect.height:
                break
            indent = self.first_indent if row == 0 else self.indent
            indent = min(indent, rect.width - 1)
            x = rect.x + indent + self.align.calc(line_width(line), rect.width - indent)
            y = rect.y + row
            for g in line:
                if x + g.width > rect.right:
                    break
                buf.set_symbol(x, y, g.symbol, g.style)
                x += g.width
        return rect


__all__ = ["Paragraph"]
