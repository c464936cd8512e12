"""Input events delivered by an event source."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class KeyModifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    ALT = enum.auto()
    CTRL = enum.auto()


class KeyCode(enum.Enum):
    """Non-character keys. Printable keys are plain one-character strings."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    TAB = "tab"
    BACK_TAB = "back_tab"
    ESC = "esc"
    DELETE = "delete"
    INSERT = "insert"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"

    @classmethod
    def function(cls, n: int) -> KeyCode:
        return cls(f"f{n}")


@dataclass(frozen=True)
class KeyEvent:
    code: Union[KeyCode, str]
    modifiers: KeyModifiers = KeyModifiers.NONE

    @property
    def char(self) -> str | None:
        return self.code if isinstance(self.code, str) else None

    def matches(self, code: Union[KeyCode, str], modifiers: KeyModifiers = KeyModifiers.NONE) -> bool:
        """Exact match on code and modifiers; SHIFT is ignored for characters."""
        mods = self.modifiers
        if isinstance(self.code, str):
            mods &= ~KeyModifiers.SHIFT
            modifiers &= ~KeyModifiers.SHIFT
        return self.code == code and mods == modifiers


class MouseKind(enum.Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVE = "move"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"


class MouseButton(enum.Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    NONE = "none"


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseKind
    x: int
    y: int
    button: MouseButton = MouseButton.NONE
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class PasteEvent:
    text: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class FocusEvent:
    gained: bool


@dataclass(frozen=True)
class UnknownEvent:
    data: str


Event = Union[KeyEvent, MouseEvent, PasteEvent, ResizeEvent, FocusEvent, UnknownEvent]


__all__ = [
    "Event",
    "FocusEvent",
    "KeyCode",
    "KeyEvent",
    "KeyModifiers",
    "MouseButton",
    "MouseEvent",
    "MouseKind",
    "PasteEvent",
    "ResizeEvent",
    "UnknownEvent",
]
