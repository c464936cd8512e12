"""Layout container: splits its rect and draws children into the parts."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from tuich.buffer import Buffer
from tuich.layout import Constraint, Direction, Rect, split
from tuich.widgets.base import Widget


@dataclass(frozen=True)
class Stack:
    """Children laid out along one axis.

    Each child is a ``(constraint, widget)`` pair; see
    :func:`tuich.layout.split` for how constraints are resolved.
    """

    children: tuple = ()
    direction: Direction = Direction.VERTICAL
    gap: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def vertical(cls, children: Sequence[tuple[Constraint, Widget]], gap: int = 0) -> Stack:
        return cls(tuple(children), Direction.VERTICAL, gap)

    @classmethod
    def horizontal(cls, children: Sequence[tuple[Constraint, Widget]], gap: int = 0) -> Stack:
        return cls(tuple(children), Direction.HORIZONTAL, gap)

    def push(self, constraint: Constraint, widget: Widget) -> Stack:
        return replace(self, children=self.children + ((constraint, widget),))

    def areas(self, rect: Rect) -> list[Rect]:
        return split(rect, [c for c, _ in self.children], self.direction, self.gap)

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        for area, (_, widget) in zip(self.areas(rect), self.children):
            widget.draw(buf, area)
        return rect


__all__ = ["Stack"]
