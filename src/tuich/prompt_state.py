"""Editable single-line value behind a :class:`~tuich.widgets.Prompt`."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from tuich.events import Event, KeyCode, KeyEvent, KeyModifiers, PasteEvent
from tuich.utils import graphemes, is_control, is_punctuation_char, is_whitespace_char
from tuich.widgets.prompt import Prompt

CTRL = KeyModifiers.CTRL
ALT = KeyModifiers.ALT


class PromptState:
    """Value plus cursor, edited one grapheme cluster at a time.

    ``cursor`` is a string index that always sits on a grapheme boundary.
    Word motion treats runs of punctuation and runs of other non-space
    characters as separate words.
    """

    def __init__(self, value: str = "", cursor: Optional[int] = None) -> None:
        self.value = value
        self.cursor = len(value) if cursor is None else min(max(cursor, 0), len(value))

    def __repr__(self) -> str:
        return f"PromptState(value={self.value!r}, cursor={self.cursor})"

    # -- insertion ----------------------------------------------------------

    def insert_str(self, text: str) -> None:
        text = "".join(g for g in graphemes(text) if not is_control(g))
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)

    def insert_char(self, char: str) -> None:
        self.insert_str(char)

    # -- deletion -----------------------------------------------------------

    def delete_left(self, n: int = 1) -> None:
        start = self._step_left(self.cursor, n)
        self.value = self.value[:start] + self.value[self.cursor :]
        self.cursor = start

    def delete_right(self, n: int = 1) -> None:
        end = self._step_right(self.cursor, n)
        self.value = self.value[: self.cursor] + self.value[end:]

    def delete_prev_word(self) -> None:
        start = self._prev_word(self.cursor)
        self.value = self.value[:start] + self.value[self.cursor :]
        self.cursor = start

    def delete_next_word(self) -> None:
        end = self._next_word(self.cursor)
        self.value = self.value[: self.cursor] + self.value[end:]

    def delete_to_start(self) -> None:
        self.value = self.value[self.cursor :]
        self.cursor = 0

    def delete_to_end(self) -> None:
        self.value = self.value[: self.cursor]

    def clear(self) -> None:
        self.value = ""
        self.cursor = 0

    # -- motion -------------------------------------------------------------

    def move_left(self, n: int = 1) -> None:
        self.cursor = self._step_left(self.cursor, n)

    def move_right(self, n: int = 1) -> None:
        self.cursor = self._step_right(self.cursor, n)

    def move_prev_word(self) -> None:
        self.cursor = self._prev_word(self.cursor)

    def move_next_word(self) -> None:
        self.cursor = self._next_word(self.cursor)

    def move_start(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.value)

    def move_to(self, index: int) -> None:
        """Place the cursor on the grapheme boundary at or before *index*."""
        index = min(max(index, 0), len(self.value))
        pos = 0
        for g in graphemes(self.value):
            if pos + len(g) > index:
                break
            pos += len(g)
        self.cursor = pos

    # -- boundaries ---------------------------------------------------------

    def _step_left(self, pos: int, n: int) -> int:
        clusters = graphemes(self.value[:pos])
        for _ in range(min(max(n, 0), len(clusters))):
            pos -= len(clusters.pop())
        return pos

    def _step_right(self, pos: int, n: int) -> int:
        clusters = graphemes(self.value[pos:])
        for g in clusters[: max(n, 0)]:
            pos += len(g)
        return pos

    def _prev_word(self, pos: int) -> int:
        clusters = graphemes(self.value[:pos])

        # Skip trailing whitespace
        while clusters and is_whitespace_char(clusters[-1]):
            pos -= len(clusters.pop())

        if clusters:
            if is_punctuation_char(clusters[-1]):
                while clusters and is_punctuation_char(clusters[-1]):
                    pos -= len(clusters.pop())
            else:
                while (
                    clusters
                    and not is_whitespace_char(clusters[-1])
                    and not is_punctuation_char(clusters[-1])
                ):
                    pos -= len(clusters.pop())
        return pos

    def _next_word(self, pos: int) -> int:
        clusters = graphemes(self.value[pos:])
        idx = 0

        while idx < len(clusters) and is_whitespace_char(clusters[idx]):
            pos += len(clusters[idx])
            idx += 1

        if idx < len(clusters):
            if is_punctuation_char(clusters[idx]):
                while idx < len(clusters) and is_punctuation_char(clusters[idx]):
                    pos += len(clusters[idx])
                    idx += 1
            else:
                while (
                    idx < len(clusters)
                    and not is_whitespace_char(clusters[idx])
                    and not is_punctuation_char(clusters[idx])
                ):
                    pos += len(clusters[idx])
                    idx += 1
        return pos

    # -- key handling -------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> bool:
        """Apply the editing action bound to *event*.

        Returns ``False`` when the key has no binding, so the caller can
        handle it (Enter, Escape, Tab and so on).
        """
        for code, modifiers, action in _BINDINGS:
            if event.matches(code, modifiers):
                action(self)
                return True

        char = event.char
        if char is not None and not (event.modifiers & (CTRL | ALT)) and not is_control(char):
            self.insert_char(char)
            return True
        return False

    def handle_event(self, event: Event) -> bool:
        """Like :meth:`handle_key`, but pastes are inserted too."""
        if isinstance(event, PasteEvent):
            self.insert_str(event.text)
            return True
        if isinstance(event, KeyEvent):
            return self.handle_key(event)
        return False

    def prompt(self, **kwargs: Any) -> Prompt:
        """Build a :class:`Prompt` showing this value and cursor."""
        return Prompt(value=self.value, cursor=self.cursor, **kwargs)


_BINDINGS: list[tuple[Union[KeyCode, str], KeyModifiers, Callable[[PromptState], None]]] = [
    (KeyCode.LEFT, CTRL, PromptState.move_prev_word),
    ("b", ALT, PromptState.move_prev_word),
    (KeyCode.RIGHT, CTRL, PromptState.move_next_word),
    ("f", ALT, PromptState.move_next_word),
    ("a", CTRL, PromptState.move_start),
    (KeyCode.HOME, KeyModifiers.NONE, PromptState.move_start),
    ("e", CTRL, PromptState.move_end),
    (KeyCode.END, KeyModifiers.NONE, PromptState.move_end),
    ("b", CTRL, PromptState.move_left),
    (KeyCode.LEFT, KeyModifiers.NONE, PromptState.move_left),
    ("f", CTRL, PromptState.move_right),
    (KeyCode.RIGHT, KeyModifiers.NONE, PromptState.move_right),
    ("w", CTRL, PromptState.delete_prev_word),
    ("h", CTRL, PromptState.delete_prev_word),
    (KeyCode.BACKSPACE, ALT, PromptState.delete_prev_word),
    ("d", ALT, PromptState.delete_next_word),
    (KeyCode.BACKSPACE, KeyModifiers.NONE, PromptState.delete_left),
    (KeyCode.DELETE, KeyModifiers.NONE, PromptState.delete_right),
    ("u", CTRL, PromptState.delete_to_start),
    ("k", CTRL, PromptState.delete_to_end),
]


__all__ = ["PromptState"]
