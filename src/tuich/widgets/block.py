"""A bordered panel with an optional title and footer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from tuich.buffer import Buffer
from tuich.layout import Align, Rect
from tuich.span import Span, to_span
from tuich.widgets.borders import Borders, Sides


@dataclass(frozen=True)
class Block:
    borders: Borders = Borders()
    title: Optional[Span] = None
    title_align: Align = Align.START
    footer: Optional[Span] = None
    footer_align: Align = Align.END

    def with_title(self, title: Union[str, Span], align: Align = Align.START) -> Block:
        return replace(self, title=to_span(title), title_align=align)

    def with_footer(self, footer: Union[str, Span], align: Align = Align.END) -> Block:
        return replace(self, footer=to_span(footer), footer_align=align)

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        inner = self.borders.draw(buf, rect)
        # Labels sit on the edge, one cell in from each corner
        edge = rect.margin((1, 0))
        if self.title is not None and Sides.TOP in self.borders.sides:
            _draw_label(buf, edge.with_height(1), self.title, self.title_align)
        if (
            self.footer is not None
            and rect.height > 1
            and Sides.BOTTOM in self.borders.sides
        ):
            _draw_label(buf, edge.with_y(rect.bottom - 1).with_height(1), self.footer, self.footer_align)
        return inner


def _draw_label(buf: Buffer, row: Rect, label: Span, align: Align) -> None:
    if row.is_empty:
        return
    x = row.x + align.calc(label.width, row.width)
    buf.set_span(x, row.y, label, row.right - x)


__all__ = ["Block"]
