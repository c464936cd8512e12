"""JSON-compatible conversion of colors and styles.

Colors serialize as snake_case names (``"light_red"``), ``"#rrggbb"`` for RGB
and a plain integer for palette indices. Styles become dicts with lower-case
keys; unset fields are omitted.
"""

from __future__ import annotations

import json
from typing import Any, Union

from tuich.style import Ansi, AnyColor, Color, Modifier, Rgb, Style, UnderlineKind

ColorValue = Union[str, int, list]


def color_to_value(color: AnyColor) -> ColorValue:
    """Serialize a color to a JSON-compatible value."""
    if isinstance(color, Rgb):
        return color.to_hex()
    # Ansi carries its index, Color its snake_case name
    return color.value


def color_from_value(value: ColorValue) -> AnyColor:
    """Deserialize a color from a name, ``#rrggbb``, ``[r, g, b]`` or an int."""
    if isinstance(value, bool):
        raise ValueError(f"invalid color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"palette index out of range: {value}")
        return Ansi(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ValueError(f"rgb color needs three components: {value!r}")
        r, g, b = (int(v) for v in value)
        return Rgb(r, g, b)
    if isinstance(value, str):
        if value.startswith("#"):
            return Rgb.from_hex(value)
        try:
            return Color(value.lower().replace(" ", "_"))
        except ValueError:
            raise ValueError(f"unknown color name: {value!r}") from None
    raise ValueError(f"invalid color: {value!r}")


def _modifier_names(modifiers: Modifier) -> list[str]:
    return [m.name.lower() for m in Modifier if m.value and m in modifiers]


def style_to_dict(style: Style) -> dict[str, Any]:
    """Serialize a Style to a JSON-compatible dict."""
    data: dict[str, Any] = {}
    if style.fg is not None:
        data["fg"] = color_to_value(style.fg)
    if style.bg is not None:
        data["bg"] = color_to_value(style.bg)
    if style.modifiers:
        data["modifiers"] = _modifier_names(style.modifiers)
    if style.underline_kind is not None:
        data["underline_kind"] = style.underline_kind.value
    return data


def style_from_dict(data: dict[str, Any]) -> Style:
    """Deserialize a Style from a JSON-compatible dict."""
    modifiers = Modifier.NONE
    for name in data.get("modifiers", []):
        try:
            modifiers |= Modifier[name.upper()]
        except KeyError:
            raise ValueError(f"unknown modifier: {name!r}") from None

    fg = data.get("fg")
    bg = data.get("bg")
    kind = data.get("underline_kind")
    return Style(
        fg=color_from_value(fg) if fg is not None else None,
        bg=color_from_value(bg) if bg is not None else None,
        modifiers=modifiers,
        underline_kind=UnderlineKind(kind) if kind is not None else None,
    )


def dumps_style(style: Style) -> str:
    return json.dumps(style_to_dict(style))


def loads_style(text: str) -> Style:
    return style_from_dict(json.loads(text))


__all__ = [
    "color_from_value",
    "color_to_value",
    "dumps_style",
    "loads_style",
    "style_from_dict",
    "style_to_dict",
]
