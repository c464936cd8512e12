"""Styled runs of text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from tuich.style import Style
from tuich.utils import visible_width


@dataclass(frozen=True)
class Span:
    """A run of text with an optional style.

    A span without a style inherits whatever style the cells it is written
    into already carry.
    """

    text: str
    style: Optional[Style] = None

    @classmethod
    def styled(cls, text: str, style: Style) -> Span:
        return cls(text, style)

    @property
    def width(self) -> int:
        return visible_width(self.text)

    def with_style(self, style: Optional[Style]) -> Span:
        return Span(self.text, style)

    def patch_style(self, style: Style) -> Span:
        """Layer *style* over this span's own style."""
        base = self.style if self.style is not None else Style()
        return Span(self.text, base.patch(style))

    def __len__(self) -> int:
        return len(self.text)


SpanLike = Union[str, Span]


def to_span(value: SpanLike) -> Span:
    return value if isinstance(value, Span) else Span(value)


def to_spans(value: Union[SpanLike, Iterable[SpanLike]]) -> list[Span]:
    """Normalise a string, span, or sequence of either into a span list."""
    if isinstance(value, (str, Span)):
        return [to_span(value)]
    return [to_span(v) for v in value]


def spans_width(spans: Sequence[Span]) -> int:
    return sum(span.width for span in spans)


__all__ = ["Span", "SpanLike", "spans_width", "to_span", "to_spans"]
