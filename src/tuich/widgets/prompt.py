"""Single-line text input rendering."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from tuich.buffer import Buffer
from tuich.layout import Rect
from tuich.span import Span, to_span
from tuich.style import Modifier, Style
from tuich.utils import grapheme_width, graphemes, is_control
from tuich.widgets.borders import Borders


@dataclass(frozen=True)
class Prompt:
    """A label followed by an editable value and a cursor.

    The prompt only renders; editing lives in
    :class:`tuich.prompt_state.PromptState`. ``cursor`` is an index into
    ``value`` (``None`` means the end). The value scrolls horizontally so
    the cursor stays visible, and the cursor cell is layered with
    ``cursor_style`` while the prompt is focused.
    """

    value: str = ""
    cursor: Optional[int] = None
    label: Optional[Span] = None
    placeholder: Optional[Span] = None
    style: Optional[Style] = None
    cursor_style: Style = Style(modifiers=Modifier.REVERSED)
    focused: bool = True
    borders: Optional[Borders] = None

    def with_label(self, label: Union[str, Span]) -> Prompt:
        return replace(self, label=to_span(label))

    def with_placeholder(self, placeholder: Union[str, Span]) -> Prompt:
        return replace(self, placeholder=to_span(placeholder))

    def with_borders(self, borders: Optional[Borders]) -> Prompt:
        return replace(self, borders=borders)

    def with_focus(self, focused: bool) -> Prompt:
        return replace(self, focused=focused)

    def cursor_column(self) -> int:
        """Cells between the start of the value and the cursor."""
        cursor = len(self.value) if self.cursor is None else min(max(self.cursor, 0), len(self.value))
        return sum(grapheme_width(g) for g in graphemes(self.value[:cursor]) if not is_control(g))

    def scroll(self, width: int) -> int:
        """Columns of the value hidden to the left in a *width*-cell field."""
        column = self.cursor_column()
        if not self.focused or width <= 0 or column < width:
            return 0
        return max(column - (width - width // 4), 0)

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        area = self.borders.draw(buf, rect) if self.borders is not None else rect
        if area.is_empty:
            return area
        if self.style is not None:
            buf.set_style(area, self.style)

        x = area.x
        if self.label is not None:
            x = buf.set_span(x, area.y, self.label, area.width)
        width = area.right - x
        if width <= 0:
            return area

        if not self.value and self.placeholder is not None:
            buf.set_span(x, area.y, self.placeholder, width)
        else:
            scroll = self.scroll(width)
            column = 0
            for g in graphemes(self.value):
                w = 0 if is_control(g) else grapheme_width(g)
                if w == 0:
                    continue
                if column >= scroll:
                    if column - scroll + w > width:
                        break
                    buf.set_symbol(x + column - scroll, area.y, g)
                column += w

        if self.focused:
            cursor_x = x + self.cursor_column() - self.scroll(width)
            if cursor_x < area.right:
                buf.set_cell_style(cursor_x, area.y, self.cursor_style)
        return area


__all__ = ["Prompt"]
