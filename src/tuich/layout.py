"""Rectangle algebra and one-axis layout.

All operations are total: results that would be negative clamp to zero
area, so layouts that collapse during a resize simply draw nothing.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Sequence, Union

from tuich.utils import grapheme_width, graphemes, visible_width

# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


class Align(enum.Enum):
    START = "start"
    CENTER = "center"
    END = "end"

    def calc(self, target: int, inside: int) -> int:
        """Offset that places *target* cells within *inside* cells."""
        if target <= 0 or inside <= 0:
            return 0
        if self is Align.START:
            return 0
        if self is Align.CENTER:
            offset = inside / 2 - target / 2
            # round half away from zero
            return int(offset + 0.5) if offset > 0 else 0
        return max(inside - target, 0)


class Direction(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# ---------------------------------------------------------------------------
# Margin
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Margin:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def of(cls, value: MarginLike) -> Margin:
        """Build a margin from an int, ``(h, v)`` or ``(l, t, r, b)``."""
        if isinstance(value, Margin):
            return value
        if isinstance(value, int):
            return cls(value, value, value, value)
        if len(value) == 2:
            h, v = value
            return cls(h, v, h, v)
        if len(value) == 4:
            return cls(*value)
        raise ValueError(f"margin needs 1, 2 or 4 values, got {value!r}")


MarginLike = Union[int, tuple, Margin]


# ---------------------------------------------------------------------------
# Rect
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rect:
    """An axis-aligned region in cell coordinates.

    ``width`` and ``height`` never go below zero; a zero-area rect is a
    valid "nothing to draw here" region.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.x < 0:
            object.__setattr__(self, "x", 0)
        if self.y < 0:
            object.__setattr__(self, "y", 0)
        if self.width < 0:
            object.__setattr__(self, "width", 0)
        if self.height < 0:
            object.__setattr__(self, "height", 0)

    @classmethod
    def sized(cls, width: int, height: int) -> Rect:
        return cls(0, 0, width, height)

    # -- derived ------------------------------------------------------------

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.width // 2, self.y + self.height // 2

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    # -- builders -----------------------------------------------------------

    def with_x(self, x: int) -> Rect:
        return Rect(x, self.y, self.width, self.height)

    def with_y(self, y: int) -> Rect:
        return Rect(self.x, y, self.width, self.height)

    def with_pos(self, x: int, y: int) -> Rect:
        return Rect(x, y, self.width, self.height)

    def with_width(self, width: int, parent: Optional[Rect] = None) -> Rect:
        rect = Rect(self.x, self.y, width, self.height)
        return rect.intersect(parent) if parent is not None else rect

    def with_height(self, height: int, parent: Optional[Rect] = None) -> Rect:
        rect = Rect(self.x, self.y, self.width, height)
        return rect.intersect(parent) if parent is not None else rect

    def with_size(self, width: int, height: int, parent: Optional[Rect] = None) -> Rect:
        rect = Rect(self.x, self.y, width, height)
        return rect.intersect(parent) if parent is not None else rect

    def margin(self, amount: MarginLike) -> Rect:
        """Shrink every side, clamping to zero area."""
        m = Margin.of(amount)
        width = max(self.width - m.left - m.right, 0)
        height = max(self.height - m.top - m.bottom, 0)
        x = min(self.x + m.left, self.right)
        y = min(self.y + m.top, self.bottom)
        return Rect(x, y, width, height)

    def intersect(self, other: Rect) -> Rect:
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(right - x, 0), max(bottom - y, 0))

    def union(self, other: Rect) -> Rect:
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return Rect(x, y, max(self.right, other.right) - x, max(self.bottom, other.bottom) - y)

    def align(
        self,
        width: int,
        height: int,
        h_align: Align = Align.CENTER,
        v_align: Align = Align.CENTER,
    ) -> Rect:
        """Place a ``width`` x ``height`` rect inside this one."""
        width = min(width, self.width)
        height = min(height, self.height)
        return Rect(
            self.x + h_align.calc(width, self.width),
            self.y + v_align.calc(height, self.height),
            width,
            height,
        )

    def split(
        self,
        constraints: Sequence[Constraint],
        direction: Direction = Direction.VERTICAL,
        gap: int = 0,
    ) -> list[Rect]:
        return split(self, constraints, direction, gap)

    # -- iteration ----------------------------------------------------------

    def rows(self) -> Iterator[Rect]:
        for y in range(self.y, self.bottom):
            yield Rect(self.x, y, self.width, 1)

    def positions(self) -> Iterator[tuple[int, int]]:
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield x, y


# ---------------------------------------------------------------------------
# Constraints and split
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Length:
    """A fixed number of cells."""

    value: int


@dataclass(frozen=True)
class Percentage:
    """A share of the available extent; flexible."""

    value: int


@dataclass(frozen=True)
class Fill:
    """Whatever is left, shared by weight; flexible."""

    weight: int = 1


Constraint = Union[Length, Percentage, Fill]


def _scale_down(sizes: list[int], budget: int) -> list[int]:
    total = sum(sizes)
    if total <= budget:
        return sizes
    return [s * budget // total for s in sizes]


def _solve(extent: int, constraints: Sequence[Constraint]) -> list[int]:
    sizes = [0] * len(constraints)
    fixed = [i for i, c in enumerate(constraints) if isinstance(c, Length)]
    percents = [i for i, c in enumerate(constraints) if isinstance(c, Percentage)]
    fills = [i for i, c in enumerate(constraints) if isinstance(c, Fill)]

    wanted = [max(constraints[i].value, 0) for i in fixed]
    if sum(wanted) > extent:
        # Fixed entries alone overflow: flexible ones get nothing
        for i, size in zip(fixed, _scale_down(wanted, extent)):
            sizes[i] = size
        sizes[fixed[-1]] += extent - sum(sizes)
        return sizes
    for i, size in zip(fixed, wanted):
        sizes[i] = size
    remaining = extent - sum(wanted)

    wanted = [max(constraints[i].value, 0) * extent // 100 for i in percents]
    for i, size in zip(percents, _scale_down(wanted, remaining)):
        sizes[i] = size
    remaining = extent - sum(sizes)

    weights = [max(constraints[i].weight, 0) for i in fills]
    total_weight = sum(weights)
    if total_weight:
        for i, weight in zip(fills, weights):
            sizes[i] = remaining * weight // total_weight

    leftover = extent - sum(sizes)
    if leftover:
        flexible = percents + fills
        target = max(flexible) if flexible else len(constraints) - 1
        sizes[target] += leftover
    return sizes


def split(
    rect: Rect,
    constraints: Sequence[Constraint],
    direction: Direction = Direction.VERTICAL,
    gap: int = 0,
) -> list[Rect]:
    """Partition *rect* along one axis.

    Fixed lengths are honoured first, percentages next, and fills share the
    rest by weight. When the constraints ask for more than there is,
    flexible entries give way before fixed ones. Space left over (including
    rounding) goes to the last flexible entry, or to the last entry when
    every constraint is fixed.
    """
    count = len(constraints)
    if count == 0:
        return []

    extent = rect.width if direction is Direction.HORIZONTAL else rect.height
    if count > 1:
        gap = min(max(gap, 0), extent // (count - 1))
    else:
        gap = 0
    sizes = _solve(extent - gap * (count - 1), constraints)

    rects: list[Rect] = []
    offset = 0
    for size in sizes:
        if direction is Direction.HORIZONTAL:
            rects.append(Rect(rect.x + offset, rect.y, size, rect.height))
        else:
            rects.append(Rect(rect.x, rect.y + offset, rect.width, size))
        offset += size + gap
    return rects


# ---------------------------------------------------------------------------
# Clip
# ---------------------------------------------------------------------------


class ClipKind(enum.Enum):
    NONE = "none"
    CLIP = "clip"
    ELLIPSIS = "ellipsis"
    HIDE = "hide"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Clip:
    """What to do with text wider than its box.

    ``NONE`` leaves it alone, ``CLIP`` cuts it, ``ELLIPSIS`` cuts it and
    adds ``...``, ``HIDE`` drops it entirely and ``Clip.custom(marker)``
    cuts it and adds *marker*. The align argument of :meth:`calc` chooses
    which end is kept.
    """

    kind: ClipKind = ClipKind.CLIP
    marker: str = ""

    NONE: ClassVar[Clip]
    CLIP: ClassVar[Clip]
    ELLIPSIS: ClassVar[Clip]
    HIDE: ClassVar[Clip]

    @classmethod
    def custom(cls, marker: str) -> Clip:
        return cls(ClipKind.CUSTOM, marker)

    def calc(self, text: str, width: int, align: Align = Align.END) -> str:
        """Fit *text* into *width* cells.

        ``Align.END`` keeps the start of the text (the end is cut),
        ``Align.START`` keeps the end and ``Align.CENTER`` cuts the middle.
        """
        if self.kind is ClipKind.NONE or visible_width(text) <= width:
            return text
        if self.kind is ClipKind.HIDE or width <= 0:
            return ""

        if self.kind is ClipKind.ELLIPSIS:
            marker = "..."
        elif self.kind is ClipKind.CUSTOM:
            marker = self.marker
        else:
            marker = ""
        marker_width = visible_width(marker)
        if marker_width >= width:
            return _take(marker, width)
        budget = width - marker_width

        if align is Align.END:
            return _take(text, budget) + marker
        if align is Align.START:
            return marker + _take_last(text, budget)
        head = _take(text, budget - budget // 2)
        tail = _take_last(text, budget // 2)
        return head + marker + tail


def _take(text: str, width: int) -> str:
    out: list[str] = []
    used = 0
    for g in graphemes(text):
        w = grapheme_width(g)
        if used + w > width:
            break
        out.append(g)
        used += w
    return "".join(out)


def _take_last(text: str, width: int) -> str:
    out: list[str] = []
    used = 0
    for g in reversed(graphemes(text)):
        w = grapheme_width(g)
        if used + w > width:
            break
        out.append(g)
        used += w
    return "".join(reversed(out))


Clip.NONE = Clip(ClipKind.NONE)
Clip.CLIP = Clip(ClipKind.CLIP)
Clip.ELLIPSIS = Clip(ClipKind.ELLIPSIS)
Clip.HIDE = Clip(ClipKind.HIDE)


__all__ = [
    "Align",
    "Clip",
    "ClipKind",
    "Constraint",
    "Direction",
    "Fill",
    "Length",
    "Margin",
    "Percentage",
    "Rect",
    "split",
]
