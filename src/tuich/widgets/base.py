"""The draw contract shared by every widget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tuich.buffer import Buffer
    from tuich.layout import Rect


@runtime_checkable
class Widget(Protocol):
    """Something that paints itself into a buffer region.

    ``draw`` returns the part of *rect* left for further content: the
    interior for frames, the rect itself for leaf widgets, and an empty rect
    at the same origin for widgets that cover their whole area.
    """

    def draw(self, buf: Buffer, rect: Rect) -> Rect:
        ...


__all__ = ["Widget"]
