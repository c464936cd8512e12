"""Screen buffer: a grid of styled cells for one frame.

Writes outside the buffer area are dropped silently. Wide glyphs occupy two
cells; the right-hand cell holds a continuation marker and is rewritten
whenever either half of the glyph is overwritten, so the grid never holds a
half glyph.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional, Sequence

from tuich.layout import Rect
from tuich.span import Span
from tuich.style import Style
from tuich.utils import grapheme_width, graphemes, is_control
from tuich.wrap import WrapMode, wrap_spans

Change = tuple[int, int, "Cell"]


@dataclass(frozen=True)
class Cell:
    """One grapheme cluster and its style."""

    symbol: str = " "
    style: Style = field(default_factory=Style)
    width: int = 1

    @classmethod
    def continuation(cls, style: Optional[Style] = None) -> Cell:
        """The cell to the right of a wide glyph."""
        return cls("", style if style is not None else Style(), 0)

    @classmethod
    def of(cls, symbol: str, style: Optional[Style] = None) -> Cell:
        """Build a cell for *symbol*, measuring its width."""
        width = grapheme_width(symbol) if symbol else 0
        return cls(symbol, style if style is not None else Style(), 2 if width >= 2 else 1)

    @property
    def is_continuation(self) -> bool:
        return self.width == 0

    def patch_style(self, style: Optional[Style]) -> Cell:
        if style is None:
            return self
        return replace(self, style=self.style.patch(style))


_BLANK = Cell()


class Buffer:
    """Row-major grid of :class:`Cell` covering ``area``."""

    def __init__(self, area: Rect, cells: Optional[list[Cell]] = None) -> None:
        self.area = area
        if cells is None:
            cells = [_BLANK] * area.area
        elif len(cells) != area.area:
            raise ValueError(
                f"buffer of {area.width}x{area.height} needs {area.area} cells, got {len(cells)}"
            )
        self.cells = cells

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        return cls(area)

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        return cls(area, [cell] * area.area)

    @classmethod
    def with_lines(cls, lines: Sequence[str]) -> Buffer:
        """Build a buffer from plain strings, one per row."""
        width = max((sum(grapheme_width(g) for g in graphemes(line)) for line in lines), default=0)
        buf = cls(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            buf.set_string(0, y, line)
        return buf

    # -- addressing ---------------------------------------------------------

    def index_of(self, x: int, y: int) -> Optional[int]:
        if not self.area.contains(x, y):
            return None
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def pos_of(self, index: int) -> tuple[int, int]:
        width = self.area.width
        return self.area.x + index % width, self.area.y + index // width

    def get(self, x: int, y: int) -> Optional[Cell]:
        index = self.index_of(x, y)
        return None if index is None else self.cells[index]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        cell = self.get(*pos)
        if cell is None:
            raise IndexError(f"position {pos} is outside {self.area}")
        return cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Buffer({self.area!r})"

    # -- whole-buffer operations -------------------------------------------

    def clear(self) -> None:
        """Reset every cell to a blank space with the default style."""
        self.cells = [_BLANK] * self.area.area

    def resize(self, area: Rect) -> None:
        """Replace the area; all content is discarded."""
        self.area = area
        self.clear()

    def copy(self) -> Buffer:
        return Buffer(self.area, list(self.cells))

    def lines(self) -> list[str]:
        """Row contents as strings, continuation cells skipped."""
        width = self.area.width
        return [
            "".join(c.symbol for c in self.cells[row * width:(row + 1) * width])
            for row in range(self.area.height)
        ]

    # -- cell writes --------------------------------------------------------

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Write *cell* at ``(x, y)``; out-of-bounds writes are dropped."""
        index = self.index_of(x, y)
        if index is None:
            return

        if cell.width == 2 and not self.area.contains(x + 1, y):
            # A wide glyph that does not fit becomes a blank
            cell = Cell(" ", cell.style)

        self._release(x, y, index)
        self.cells[index] = cell
        if cell.width == 2:
            right = index + 1
            self._release(x + 1, y, right)
            self.cells[right] = Cell.continuation(cell.style)

    def _release(self, x: int, y: int, index: int) -> None:
        """Blank the other half of a wide glyph overlapping ``(x, y)``."""
        current = self.cells[index]
        if current.is_continuation:
            left = self.index_of(x - 1, y)
            if left is not None:
                self.cells[left] = Cell(" ", self.cells[left].style)
        elif current.width == 2:
            right = self.index_of(x + 1, y)
            if right is not None:
                self.cells[right] = Cell(" ", self.cells[right].style)

    def set_symbol(self, x: int, y: int, symbol: str, style: Optional[Style] = None) -> None:
        """Write *symbol*, layering *style* over the cell's existing style."""
        current = self.get(x, y)
        if current is None:
            return
        self.set(x, y, Cell.of(symbol, current.style.patch(style)))

    def set_cell_style(self, x: int, y: int, style: Style) -> None:
        index = self.index_of(x, y)
        if index is not None:
            self.cells[index] = self.cells[index].patch_style(style)

    def set_style(self, rect: Rect, style: Style) -> None:
        """Layer *style* over every cell inside *rect*."""
        for x, y in rect.intersect(self.area).positions():
            self.set_cell_style(x, y, style)

    def fill(self, rect: Rect, cell: Cell) -> None:
        """Replace every cell inside *rect* with *cell*."""
        for x, y in rect.intersect(self.area).positions():
            self.set(x, y, cell)

    # -- text writes --------------------------------------------------------

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        max_width: Optional[int] = None,
    ) -> int:
        """Write *text* from ``(x, y)`` and return the column after it.

        Each cell keeps its existing style with *style* layered on top.
        Writing stops at *max_width* cells; a wide glyph that would cross
        that limit is not written.
        """
        limit = x + max_width if max_width is not None else self.area.right
        limit = min(limit, self.area.right)
        for g in graphemes(text):
            if is_control(g):
                continue
            width = grapheme_width(g)
            if width == 0:
                continue
            if x + width > limit:
                break
            self.set_symbol(x, y, g, style)
            x += width
        return x

    def set_span(self, x: int, y: int, span: Span, max_width: Optional[int] = None) -> int:
        return self.set_string(x, y, span.text, span.style, max_width)

    def set_spans(self, x: int, y: int, spans: Iterable[Span], max_width: Optional[int] = None) -> int:
        """Write spans one after another on a single row."""
        start = x
        for span in spans:
            remaining = None if max_width is None else max_width - (x - start)
            if remaining is not None and remaining <= 0:
                break
            x = self.set_span(x, y, span, remaining)
        return x

    def write_spans(self, rect: Rect, spans: Sequence[Span], wrap_mode: WrapMode = WrapMode.WORD) -> int:
        """Wrap *spans* to ``rect.width`` and write them row by row.

        Returns the number of rows written. Rows and columns outside *rect*
        are clipped, and so are cells past the edge of the buffer; a rect
        that overhangs the buffer does not narrow the wrap width.
        """
        if rect.is_empty:
            return 0
        rows = 0
        for line in wrap_spans(spans, rect.width, wrap_mode):
            if rows >= rect.height:
                break
            x = rect.x
            for g in line:
                if x + g.width > rect.right:
                    break
                self.set_symbol(x, rect.y + rows, g.symbol, g.style)
                x += g.width
            rows += 1
        return rows

    # -- diffing ------------------------------------------------------------

    def diff(self, previous: Buffer) -> list[Change]:
        """Cells that differ from *previous*, in row-major order.

        When the areas differ every cell of this buffer is reported.
        """
        if previous.area != self.area:
            return [(*self.pos_of(i), cell) for i, cell in enumerate(self.cells)]
        return [
            (*self.pos_of(i), cell)
            for i, (cell, old) in enumerate(zip(self.cells, previous.cells))
            if cell != old
        ]

    def apply(self, changes: Iterable[Change]) -> Buffer:
        """Write raw changes (as produced by :meth:`diff`) into this buffer."""
        for x, y, cell in changes:
            index = self.index_of(x, y)
            if index is not None:
                self.cells[index] = cell
        return self

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        for i, cell in enumerate(self.cells):
            yield (*self.pos_of(i), cell)

    # -- drawing into another buffer ---------------------------------------

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        """Copy this buffer's cells into *buf* with its origin at *rect*'s.

        Continuation cells are recreated by the wide glyph that owns them.
        """
        target = Rect(rect.x, rect.y, self.area.width, self.area.height).intersect(rect)
        for x, y in target.positions():
            cell = self.cells[(y - rect.y) * self.area.width + (x - rect.x)]
            if not cell.is_continuation:
                buf.set(x, y, cell)
        return target


__all__ = ["Buffer", "Cell", "Change"]
