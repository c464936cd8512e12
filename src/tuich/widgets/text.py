"""Single-line text with alignment and clipping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from tuich.buffer import Buffer
from tuich.layout import Align, Clip, Rect
from tuich.span import Span
from tuich.style import Style
from tuich.widgets.paragraph import Paragraph
from tuich.wrap import WrapMode


@dataclass(frozen=True)
class Text:
    """A string drawn on the first row of the rect.

    Text wider than the rect is shortened by ``clip`` (keeping the end
    chosen by ``clip_align``) and the result is placed by ``align``. With a
    ``wrap`` mode set the text is drawn like a :class:`Paragraph` instead.
    """

    content: str = ""
    style: Optional[Style] = None
    align: Align = Align.START
    clip: Clip = Clip.CLIP
    clip_align: Align = Align.END
    wrap: Optional[WrapMode] = None

    def with_align(self, align: Align) -> Text:
        return replace(self, align=align)

    def with_clip(self, clip: Clip, clip_align: Align = Align.END) -> Text:
        return replace(self, clip=clip, clip_align=clip_align)

    def with_wrap(self, wrap: Optional[WrapMode]) -> Text:
        return replace(self, wrap=wrap)

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        if self.wrap is not None:
            return Paragraph([Span(self.content, self.style)], self.wrap, self.align).draw(buf, rect)
        if rect.is_empty:
            return rect

        span = Span(self.clip.calc(self.content, rect.width, self.clip_align), self.style)
        x = rect.x + self.align.calc(span.width, rect.width)
        buf.set_span(x, rect.y, span, rect.right - x)
        return rect


__all__ = ["Text"]
