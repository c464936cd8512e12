"""Horizontal and vertical rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from tuich.buffer import Buffer
from tuich.layout import Direction, Rect
from tuich.style import Style


@dataclass(frozen=True)
class Line:
    """A rule along the first row (or column) of the rect.

    ``start`` and ``end`` replace the glyph at either end, e.g. ``├`` and
    ``┤`` to join a rule onto a frame.
    """

    direction: Direction = Direction.HORIZONTAL
    glyph: str = "─"
    style: Optional[Style] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @classmethod
    def horizontal(cls, glyph: str = "─", style: Optional[Style] = None) -> Line:
        return cls(Direction.HORIZONTAL, glyph, style)

    @classmethod
    def vertical(cls, glyph: str = "│", style: Optional[Style] = None) -> Line:
        return cls(Direction.VERTICAL, glyph, style)

    def with_ends(self, start: Optional[str], end: Optional[str]) -> Line:
        return replace(self, start=start, end=end)

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        if rect.is_empty:
            return Rect(rect.x, rect.y, 0, 0)

        if self.direction is Direction.HORIZONTAL:
            points = [(x, rect.y) for x in range(rect.x, rect.right)]
        else:
            points = [(rect.x, y) for y in range(rect.y, rect.bottom)]

        for x, y in points:
            buf.set_symbol(x, y, self.glyph, self.style)
        if self.start is not None:
            buf.set_symbol(*points[0], self.start, self.style)
        if self.end is not None and len(points) > 1:
            buf.set_symbol(*points[-1], self.end, self.style)
        return Rect(rect.x, rect.y, 0, 0)


__all__ = ["Line"]
