"""Colors, text modifiers and the composable ``Style`` value."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class Color(enum.Enum):
    """Named terminal colors. ``RESET`` restores the terminal default."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    LIGHT_BLACK = "light_black"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    LIGHT_GRAY = "light_gray"

    @classmethod
    def from_index(cls, index: int) -> Color:
        """Map 0..16 onto RESET, BLACK, RED ... LIGHT_GRAY; anything else is RESET."""
        members = list(cls)
        if 0 <= index < len(members):
            return members[index]
        return cls.RESET

    def __str__(self) -> str:
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class Rgb:
    """24-bit color."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> Rgb:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"invalid hex color: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"rgb {self.r}, {self.g}, {self.b}"


@dataclass(frozen=True)
class Ansi:
    """Indexed palette color (0..255)."""

    value: int

    def __str__(self) -> str:
        return f"ansi {self.value}"


AnyColor = Union[Color, Rgb, Ansi]

_DARK_COLORS = (Color.RESET, Color.BLACK, Color.LIGHT_BLACK, Color.GRAY)


def contrast_fg(color: AnyColor) -> Color:
    """Pick a readable foreground for text drawn on *color*."""
    if isinstance(color, Rgb):
        return Color.LIGHT_GRAY if (color.r + color.g + color.b) / 2 < 380 else Color.BLACK
    if color in _DARK_COLORS:
        return Color.LIGHT_GRAY
    return Color.BLACK


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class Modifier(enum.Flag):
    """Independent text attributes. Combine with ``|``."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


class UnderlineKind(enum.Enum):
    LINE = "line"
    CURL = "curl"
    DASH = "dash"
    DOT = "dot"


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers for a cell or span.

    ``None`` fields mean "inherit": when a style is layered over another with
    :meth:`patch`, only the fields it sets take effect and modifiers are
    merged. ``Style()`` therefore changes nothing.
    """

    fg: Optional[AnyColor] = None
    bg: Optional[AnyColor] = None
    modifiers: Modifier = Modifier.NONE
    underline_kind: Optional[UnderlineKind] = None

    @classmethod
    def contrast(cls, color: AnyColor) -> Style:
        """Background *color* with a readable foreground on top."""
        return cls(fg=contrast_fg(color), bg=color)

    def patch(self, other: Optional[Style]) -> Style:
        """Return this style with *other* layered on top."""
        if other is None:
            return self
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            modifiers=self.modifiers | other.modifiers,
            underline_kind=(
                other.underline_kind
                if other.underline_kind is not None
                else self.underline_kind
            ),
        )

    def with_fg(self, color: Optional[AnyColor]) -> Style:
        return Style(color, self.bg, self.modifiers, self.underline_kind)

    def with_bg(self, color: Optional[AnyColor]) -> Style:
        return Style(self.fg, color, self.modifiers, self.underline_kind)

    def with_modifiers(self, modifiers: Modifier) -> Style:
        """Add *modifiers* to the current set."""
        return Style(self.fg, self.bg, self.modifiers | modifiers, self.underline_kind)

    def with_underline_kind(self, kind: Optional[UnderlineKind]) -> Style:
        return Style(self.fg, self.bg, self.modifiers | Modifier.UNDERLINED, kind)

    def has(self, modifier: Modifier) -> bool:
        return modifier in self.modifiers

    @property
    def is_empty(self) -> bool:
        return self == _EMPTY


_EMPTY = Style()


__all__ = [
    "Ansi",
    "AnyColor",
    "Color",
    "Modifier",
    "Rgb",
    "Style",
    "UnderlineKind",
    "contrast_fg",
]
