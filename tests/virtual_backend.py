"""Virtual backend for testing -- implements the Backend and EventSource protocols in-memory.

This module provides a ``VirtualBackend`` class that satisfies
``tuich.backend.Backend`` and ``tuich.backend.EventSource`` without
performing any real I/O. Every call is recorded for assertions, and a
small screen model replays cursor moves and writes so tests can inspect
what the terminal would show.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from tuich.events import Event
from tuich.style import Style
from tuich.utils import grapheme_width


def _advance(text: str) -> int:
    return max(grapheme_width(text), 1)


class VirtualBackend:
    """In-memory backend that records all calls for test inspection.

    Parameters
    ----------
    width:
        Number of terminal columns.
    height:
        Number of terminal rows.
    events:
        Events returned, in order, by ``read_event``.
    """

    def __init__(self, width: int = 80, height: int = 24, events: Iterable[Event] = ()) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []
        self.flushed: list[str] = []
        self.fail_on: dict[str, BaseException] = {}

        self._events: deque[Event] = deque(events)
        self._pending: list[str] = []
        self._cursor = (0, 0)
        self._screen: dict[tuple[int, int], str] = {}

        self.raw_mode = False
        self.alternate_screen = False
        self.cursor_visible = True

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, *args))
        error = self.fail_on.get(name)
        if error is not None:
            raise error

    # -- Backend protocol: modes --------------------------------------------

    def size(self) -> tuple[int, int]:
        self._record("size")
        return self.width, self.height

    def enable_raw_mode(self) -> None:
        self._record("enable_raw_mode")
        self.raw_mode = True

    def disable_raw_mode(self) -> None:
        self._record("disable_raw_mode")
        self.raw_mode = False

    def enter_alternate_screen(self) -> None:
        self._record("enter_alternate_screen")
        self.alternate_screen = True

    def leave_alternate_screen(self) -> None:
        self._record("leave_alternate_screen")
        self.alternate_screen = False

    def show_cursor(self) -> None:
        self._record("show_cursor")
        self.cursor_visible = True

    def hide_cursor(self) -> None:
        self._record("hide_cursor")
        self.cursor_visible = False

    # -- Backend protocol: output -------------------------------------------

    def move_cursor(self, x: int, y: int) -> None:
        self._record("move_cursor", x, y)
        self._cursor = (x, y)

    def set_style(self, style: Style) -> None:
        self._record("set_style", style)

    def reset_style(self) -> None:
        self._record("reset_style")

    def write(self, text: str) -> None:
        self._record("write", text)
        self._pending.append(text)
        x, y = self._cursor
        self._screen[(x, y)] = text
        self._cursor = (x + _advance(text), y)

    def clear(self) -> None:
        self._record("clear")
        self._screen.clear()

    def flush(self) -> None:
        self._record("flush")
        self.flushed.append("".join(self._pending))
        self._pending.clear()

    # -- EventSource protocol -----------------------------------------------

    def read_event(self) -> Event:
        self._record("read_event")
        if not self._events:
            raise EOFError("no scripted events left")
        return self._events.popleft()

    # -- Test helpers -------------------------------------------------------

    def push_events(self, *events: Event) -> None:
        """Script more events for ``read_event``."""
        self._events.extend(events)

    def call_names(self) -> list[str]:
        """Names of every recorded call, in order."""
        return [call[0] for call in self.calls]

    def writes(self) -> list[tuple[int, int, str]]:
        """``(x, y, text)`` for each ``write``, using the preceding cursor moves."""
        result = []
        cursor = (0, 0)
        for call in self.calls:
            if call[0] == "move_cursor":
                cursor = (call[1], call[2])
            elif call[0] == "write":
                result.append((cursor[0], cursor[1], call[1]))
                cursor = (cursor[0] + _advance(call[1]), cursor[1])
        return result

    def screen_line(self, y: int) -> str:
        """Row *y* of the replayed screen, unwritten cells shown as spaces."""
        return "".join(self._screen.get((x, y), " ") for x in range(self.width))

    def clear_calls(self) -> None:
        """Discard all recorded calls."""
        self.calls.clear()
        self.flushed.clear()
