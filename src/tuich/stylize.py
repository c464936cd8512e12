"""Stylize helpers: pure constructors for styled text.

Each helper accepts a plain string, a :class:`Span` or a :class:`Style` and
returns a new value of the same kind (a string becomes a span)::

    bold(red("error"))          # Span("error", fg=RED, BOLD)
    on_blue(Style())            # Style(bg=BLUE)
"""

from __future__ import annotations

from typing import Optional, Union

from tuich.span import Span
from tuich.style import AnyColor, Color, Modifier, Style, UnderlineKind

Stylable = Union[str, Span, Style]
Styled = Union[Span, Style]


def _apply(value: Stylable, style: Style) -> Styled:
    if isinstance(value, Style):
        return value.patch(style)
    if isinstance(value, Span):
        return value.patch_style(style)
    return Span(value, style)


def _replace(value: Stylable, **fields: Optional[AnyColor]) -> Styled:
    # patch() cannot clear a field, so resets rebuild the style directly
    if isinstance(value, str):
        value = Span(value, Style())
    if isinstance(value, Span):
        return Span(value.text, _replace(value.style or Style(), **fields))
    return Style(
        fields.get("fg", value.fg),
        fields.get("bg", value.bg),
        value.modifiers,
        value.underline_kind,
    )


# ---------------------------------------------------------------------------
# Generic
# ---------------------------------------------------------------------------


def style(value: Stylable, overlay: Style) -> Styled:
    return _apply(value, overlay)


def fg(value: Stylable, color: AnyColor) -> Styled:
    return _apply(value, Style(fg=color))


def bg(value: Stylable, color: AnyColor) -> Styled:
    return _apply(value, Style(bg=color))


def fg_reset(value: Stylable) -> Styled:
    """Drop the foreground so the span inherits it again."""
    return _replace(value, fg=None)


def bg_reset(value: Stylable) -> Styled:
    """Drop the background so the span inherits it again."""
    return _replace(value, bg=None)


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


def bold(value: Stylable) -> Styled:
    return _apply(value, Style(modifiers=Modifier.BOLD))


def dim(value: Stylable) -> Styled:
    return _apply(value, Style(modifiers=Modifier.DIM))


def italic(value: Stylable) -> Styled:
    return _apply(value, Style(modifiers=Modifier.ITALIC))


def underlined(value: Stylable) -> Styled:
    return _apply(value, Style(modifiers=Modifier.UNDERLINED))


def underline_kind(value: Stylable, kind: UnderlineKind) -> Styled:
    return _apply(value, Style(modifiers=Modifier.UNDERLINED, underline_kind=kind))


# Shadows the builtin within this module
def reversed(value: Stylable) -> Styled:
    return _apply(value, Style(modifiers=Modifier.REVERSED))


def crossed_out(value: Stylable) -> Styled:
    return _apply(value, Style(modifiers=Modifier.CROSSED_OUT))


# ---------------------------------------------------------------------------
# Foreground colors
# ---------------------------------------------------------------------------


def black(value: Stylable) -> Styled:
    return fg(value, Color.BLACK)


def red(value: Stylable) -> Styled:
    return fg(value, Color.RED)


def green(value: Stylable) -> Styled:
    return fg(value, Color.GREEN)


def yellow(value: Stylable) -> Styled:
    return fg(value, Color.YELLOW)


def blue(value: Stylable) -> Styled:
    return fg(value, Color.BLUE)


def magenta(value: Stylable) -> Styled:
    return fg(value, Color.MAGENTA)


def cyan(value: Stylable) -> Styled:
    return fg(value, Color.CYAN)


def gray(value: Stylable) -> Styled:
    return fg(value, Color.GRAY)


def light_black(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_BLACK)


def light_red(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_RED)


def light_green(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_GREEN)


def light_yellow(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_YELLOW)


def light_blue(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_BLUE)


def light_magenta(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_MAGENTA)


def light_cyan(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_CYAN)


def light_gray(value: Stylable) -> Styled:
    return fg(value, Color.LIGHT_GRAY)


# ---------------------------------------------------------------------------
# Background colors
# ---------------------------------------------------------------------------


def on_black(value: Stylable) -> Styled:
    return bg(value, Color.BLACK)


def on_red(value: Stylable) -> Styled:
    return bg(value, Color.RED)


def on_green(value: Stylable) -> Styled:
    return bg(value, Color.GREEN)


def on_yellow(value: Stylable) -> Styled:
    return bg(value, Color.YELLOW)


def on_blue(value: Stylable) -> Styled:
    return bg(value, Color.BLUE)


def on_magenta(value: Stylable) -> Styled:
    return bg(value, Color.MAGENTA)


def on_cyan(value: Stylable) -> Styled:
    return bg(value, Color.CYAN)


def on_gray(value: Stylable) -> Styled:
    return bg(value, Color.GRAY)


def on_light_black(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_BLACK)


def on_light_red(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_RED)


def on_light_green(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_GREEN)


def on_light_yellow(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_YELLOW)


def on_light_blue(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_BLUE)


def on_light_magenta(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_MAGENTA)


def on_light_cyan(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_CYAN)


def on_light_gray(value: Stylable) -> Styled:
    return bg(value, Color.LIGHT_GRAY)
