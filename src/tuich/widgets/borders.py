"""Box-drawing frames."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional

from tuich.buffer import Buffer, Cell
from tuich.layout import Margin, Rect
from tuich.style import Style


class BorderGlyphs(NamedTuple):
    """The eight glyphs of a frame, clockwise from the left edge."""

    left: str
    top_left: str
    top: str
    top_right: str
    right: str
    bottom_right: str
    bottom: str
    bottom_left: str

    @classmethod
    def from_string(cls, glyphs: str) -> BorderGlyphs:
        chars = list(glyphs)
        if len(chars) != 8:
            raise ValueError(f"border needs 8 glyphs, got {len(chars)}: {glyphs!r}")
        return cls(*chars)


SINGLE = BorderGlyphs.from_string("│┌─┐│┘─└")
DOUBLE = BorderGlyphs.from_string("║╔═╗║╝═╚")
ROUNDED = BorderGlyphs.from_string("│╭─╮│╯─╰")
THICK = BorderGlyphs.from_string("┃┏━┓┃┛━┗")
BLOCK = BorderGlyphs.from_string("█" * 8)


class Sides(enum.Flag):
    NONE = 0
    LEFT = enum.auto()
    TOP = enum.auto()
    RIGHT = enum.auto()
    BOTTOM = enum.auto()
    ALL = LEFT | TOP | RIGHT | BOTTOM


@dataclass(frozen=True)
class Borders:
    """A frame around a rect, optionally filling the interior first.

    Returns the interior: *rect* shrunk by one cell on every enabled side.
    """

    glyphs: BorderGlyphs = SINGLE
    style: Optional[Style] = None
    sides: Sides = Sides.ALL
    fill: Optional[Cell] = None

    # -- constructors -------------------------------------------------------

    @classmethod
    def single(cls) -> Borders:
        return cls(SINGLE)

    @classmethod
    def double(cls) -> Borders:
        return cls(DOUBLE)

    @classmethod
    def rounded(cls) -> Borders:
        return cls(ROUNDED)

    @classmethod
    def thick(cls) -> Borders:
        return cls(THICK)

    @classmethod
    def block(cls) -> Borders:
        return cls(BLOCK)

    @classmethod
    def custom(cls, glyphs: str | BorderGlyphs) -> Borders:
        if isinstance(glyphs, str):
            glyphs = BorderGlyphs.from_string(glyphs)
        return cls(glyphs)

    # -- builders -----------------------------------------------------------

    def with_style(self, style: Style) -> Borders:
        return replace(self, style=style)

    def with_sides(self, sides: Sides) -> Borders:
        return replace(self, sides=sides)

    def with_fill(self, cell: Optional[Cell]) -> Borders:
        return replace(self, fill=cell)

    # -- geometry -----------------------------------------------------------

    def inner(self, rect: Rect) -> Rect:
        return rect.margin(
            Margin(
                int(Sides.LEFT in self.sides),
                int(Sides.TOP in self.sides),
                int(Sides.RIGHT in self.sides),
                int(Sides.BOTTOM in self.sides),
            )
        )

    # -- drawing ------------------------------------------------------------

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        inner = self.inner(rect)
        if rect.is_empty:
            return inner

        if self.fill is not None:
            buf.fill(inner, self.fill)

        g = self.glyphs
        sides = self.sides
        left = Sides.LEFT in sides
        top = Sides.TOP in sides
        right = Sides.RIGHT in sides and rect.width > 1
        bottom = Sides.BOTTOM in sides and rect.height > 1
        last_x = rect.right - 1
        last_y = rect.bottom - 1

        if top:
            for x in range(rect.x, rect.right):
                buf.set_symbol(x, rect.y, g.top, self.style)
        if bottom:
            for x in range(rect.x, rect.right):
                buf.set_symbol(x, last_y, g.bottom, self.style)
        if left:
            for y in range(rect.y, rect.bottom):
                buf.set_symbol(rect.x, y, g.left, self.style)
        if right:
            for y in range(rect.y, rect.bottom):
                buf.set_symbol(last_x, y, g.right, self.style)

        if top and left:
            buf.set_symbol(rect.x, rect.y, g.top_left, self.style)
        if top and right:
            buf.set_symbol(last_x, rect.y, g.top_right, self.style)
        if bottom and right:
            buf.set_symbol(last_x, last_y, g.bottom_right, self.style)
        if bottom and left:
            buf.set_symbol(rect.x, last_y, g.bottom_left, self.style)

        return inner


__all__ = [
    "BLOCK",
    "BorderGlyphs",
    "Borders",
    "DOUBLE",
    "ROUNDED",
    "SINGLE",
    "Sides",
    "THICK",
]
