"""ANSI escape sequences for styling and cursor control."""

from __future__ import annotations

from tuich.style import Ansi, AnyColor, Color, Modifier, Rgb, Style, UnderlineKind

# ---------------------------------------------------------------------------
# Escape constants
# ---------------------------------------------------------------------------

CSI = "\x1b["

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
ENTER_ALTERNATE_SCREEN = "\x1b[?1049h"
LEAVE_ALTERNATE_SCREEN = "\x1b[?1049l"
BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
BRACKETED_PASTE_DISABLE = "\x1b[?2004l"
# Button events, any-motion tracking, SGR coordinates
MOUSE_ENABLE = "\x1b[?1000h\x1b[?1002h\x1b[?1003h\x1b[?1006h"
MOUSE_DISABLE = "\x1b[?1006l\x1b[?1003l\x1b[?1002l\x1b[?1000l"
RESET_STYLE = "\x1b[0m"

_SET_TITLE_FMT = "\x1b]0;{}\x07"

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

_FG_CODES: dict[Color, int] = {
    Color.RESET: 39,
    Color.BLACK: 30,
    Color.RED: 31,
    Color.GREEN: 32,
    Color.YELLOW: 33,
    Color.BLUE: 34,
    Color.MAGENTA: 35,
    Color.CYAN: 36,
    Color.GRAY: 37,
    Color.LIGHT_BLACK: 90,
    Color.LIGHT_RED: 91,
    Color.LIGHT_GREEN: 92,
    Color.LIGHT_YELLOW: 93,
    Color.LIGHT_BLUE: 94,
    Color.LIGHT_MAGENTA: 95,
    Color.LIGHT_CYAN: 96,
    Color.LIGHT_GRAY: 97,
}

_MODIFIER_CODES: tuple[tuple[Modifier, str], ...] = (
    (Modifier.BOLD, "1"),
    (Modifier.DIM, "2"),
    (Modifier.ITALIC, "3"),
    (Modifier.SLOW_BLINK, "5"),
    (Modifier.RAPID_BLINK, "6"),
    (Modifier.REVERSED, "7"),
    (Modifier.HIDDEN, "8"),
    (Modifier.CROSSED_OUT, "9"),
)

_UNDERLINE_CODES: dict[UnderlineKind, str] = {
    UnderlineKind.LINE: "4",
    UnderlineKind.CURL: "4:3",
    UnderlineKind.DOT: "4:4",
    UnderlineKind.DASH: "4:5",
}


def color_params(color: AnyColor, background: bool = False) -> str:
    """SGR parameters selecting *color* as foreground or background."""
    if isinstance(color, Rgb):
        return f"{48 if background else 38};2;{color.r};{color.g};{color.b}"
    if isinstance(color, Ansi):
        return f"{48 if background else 38};5;{color.value}"
    code = _FG_CODES[color]
    return str(code + 10 if background else code)


def sgr(style: Style) -> str:
    """Full SGR sequence for *style*, starting from a reset."""
    params = ["0"]
    for modifier, code in _MODIFIER_CODES:
        if modifier in style.modifiers:
            params.append(code)
    if Modifier.UNDERLINED in style.modifiers or style.underline_kind is not None:
        params.append(_UNDERLINE_CODES[style.underline_kind or UnderlineKind.LINE])
    if style.fg is not None:
        params.append(color_params(style.fg))
    if style.bg is not None:
        params.append(color_params(style.bg, background=True))
    return f"{CSI}{';'.join(params)}m"


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------


def move_to(x: int, y: int) -> str:
    """Move the cursor to zero-based column *x*, row *y*."""
    return f"{CSI}{y + 1};{x + 1}H"


def set_title(title: str) -> str:
    return _SET_TITLE_FMT.format(title)


__all__ = [
    "CLEAR_SCREEN",
    "ENTER_ALTERNATE_SCREEN",
    "HIDE_CURSOR",
    "LEAVE_ALTERNATE_SCREEN",
    "MOUSE_DISABLE",
    "MOUSE_ENABLE",
    "RESET_STYLE",
    "SHOW_CURSOR",
    "color_params",
    "move_to",
    "set_title",
    "sgr",
]
