"""Scrollable single-column list with an optional selected row."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from tuich.buffer import Buffer
from tuich.layout import Rect
from tuich.span import Span, to_spans
from tuich.style import Modifier, Style
from tuich.widgets.paragraph import Paragraph
from tuich.wrap import WrapMode

ListItem = Union[str, Span, Sequence[Span], Paragraph]


def _as_paragraph(item: ListItem) -> Paragraph:
    if isinstance(item, Paragraph):
        return item.with_wrap(WrapMode.NONE)
    return Paragraph(to_spans(item), wrap=WrapMode.NONE)


@dataclass(frozen=True)
class List:
    """Items drawn one per row, starting at ``offset``.

    When ``selected`` is set the list scrolls just enough to keep it on
    screen, and that row is layered with ``highlight_style``. A
    ``highlight_symbol`` is drawn in front of the selected row; other rows
    are padded by its width so they line up.
    """

    items: tuple = ()
    offset: int = 0
    selected: Optional[int] = None
    style: Optional[Style] = None
    highlight_style: Style = Style(modifiers=Modifier.REVERSED)
    highlight_symbol: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def with_offset(self, offset: int) -> List:
        return replace(self, offset=offset)

    def with_selected(self, selected: Optional[int]) -> List:
        return replace(self, selected=selected)

    def with_highlight(self, style: Style, symbol: str = "") -> List:
        return replace(self, highlight_style=style, highlight_symbol=symbol)

    def visible_offset(self, height: int) -> int:
        """First item index shown in a list *height* rows tall."""
        if not self.items or height <= 0:
            return 0
        start = min(max(self.offset, 0), len(self.items) - 1)
        if self.selected is not None and 0 <= self.selected < len(self.items):
            if self.selected < start:
                start = self.selected
            elif self.selected >= start + height:
                start = self.selected - height + 1
        return start

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        if rect.is_empty:
            return rect
        if self.style is not None:
            buf.set_style(rect, self.style)

        symbol = Span(self.highlight_symbol)
        pad = symbol.width
        start = self.visible_offset(rect.height)
        for row, index in enumerate(range(start, len(self.items))):
            if row >= rect.height:
                break
            line = Rect(rect.x, rect.y + row, rect.width, 1)
            is_selected = index == self.selected
            if pad:
                if is_selected:
                    buf.set_span(line.x, line.y, symbol, line.width)
                line = line.margin((pad, 0, 0, 0))
            _as_paragraph(self.items[index]).draw(buf, line)
            if is_selected:
                buf.set_style(Rect(rect.x, rect.y + row, rect.width, 1), self.highlight_style)
        return rect


__all__ = ["List", "ListItem"]
