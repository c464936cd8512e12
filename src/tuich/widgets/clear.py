"""Blank out a region."""

from __future__ import annotations

from dataclasses import dataclass

from tuich.buffer import Buffer, Cell
from tuich.layout import Rect


@dataclass(frozen=True)
class Clear:
    cell: Cell = Cell()

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        buf.fill(rect, self.cell)
        return Rect(rect.x, rect.y, 0, 0)


__all__ = ["Clear"]
