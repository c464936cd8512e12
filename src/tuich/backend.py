"""Backend capability interfaces and the POSIX tty implementation.

:class:`Backend` is everything :class:`tuich.terminal.Terminal` needs from a
device: size, modes, cursor and a buffered output stream. :class:`EventSource`
is the blocking input side. :class:`AnsiBackend` implements both on top of
``sys.stdin``/``sys.stdout`` with :mod:`termios` raw mode, ANSI escape
sequences and ``SIGWINCH`` resize notification.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import signal
import sys
import termios
import tty
from collections import deque
from typing import Any, Optional, Protocol, TextIO

from tuich import ansi
from tuich.config import TerminalConfig
from tuich.events import Event, ResizeEvent
from tuich.input import InputParser
from tuich.style import Style

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Capability protocols
# ---------------------------------------------------------------------------


class Backend(Protocol):
    """Output side of a terminal device."""

    def size(self) -> tuple[int, int]: ...

    def enable_raw_mode(self) -> None: ...

    def disable_raw_mode(self) -> None: ...

    def enter_alternate_screen(self) -> None: ...

    def leave_alternate_screen(self) -> None: ...

    def show_cursor(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def move_cursor(self, x: int, y: int) -> None: ...

    def set_style(self, style: Style) -> None: ...

    def reset_style(self) -> None: ...

    def write(self, text: str) -> None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...


class EventSource(Protocol):
    """Input side of a terminal device."""

    def read_event(self) -> Event: ...


# ---------------------------------------------------------------------------
# AnsiBackend
# ---------------------------------------------------------------------------


class AnsiBackend:
    """ANSI terminal on a pair of tty streams.

    Output is queued by :meth:`write`, :meth:`move_cursor` and
    :meth:`set_style` and only reaches the device on :meth:`flush`. Mode
    switches (cursor visibility, alternate screen, raw mode) are written
    immediately. Errors from the device propagate as ``OSError``.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        config: Optional[TerminalConfig] = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.config = config if config is not None else TerminalConfig()

        self._pending: list[str] = []
        self._style: Optional[Style] = None
        self._original_termios: Optional[list[Any]] = None
        self._prev_sigwinch_handler: Any = None
        self._wakeup_r: Optional[int] = None
        self._wakeup_w: Optional[int] = None
        self._resized = False
        self._mouse_enabled = False

        self._parser = InputParser()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._events: deque[Event] = deque()

    # -- size ---------------------------------------------------------------

    def size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self._stdout.fileno())
        except (ValueError, OSError):
            return 80, 24
        return size.columns, size.lines

    # -- modes --------------------------------------------------------------

    def enable_raw_mode(self) -> None:
        """Enter raw mode and start watching for resizes."""
        fd = self._stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

        self._wakeup_r, self._wakeup_w = os.pipe()
        os.set_blocking(self._wakeup_w, False)
        self._prev_sigwinch_handler = signal.getsignal(signal.SIGWINCH)
        signal.signal(signal.SIGWINCH, self._on_sigwinch)

        if self.config.bracketed_paste:
            self._write_now(ansi.BRACKETED_PASTE_ENABLE)
        if self.config.mouse_capture:
            self.enable_mouse_capture()

    def disable_raw_mode(self) -> None:
        """Restore the terminal attributes saved by :meth:`enable_raw_mode`.

        The tty attributes, the ``SIGWINCH`` handler and the wakeup pipe are
        restored even when writing the mode-off sequences fails.
        """
        try:
            if self._mouse_enabled:
                self.disable_mouse_capture()
            if self.config.bracketed_paste and self._original_termios is not None:
                self._write_now(ansi.BRACKETED_PASTE_DISABLE)
        finally:
            self._restore_tty()

    def _restore_tty(self) -> None:
        if self._prev_sigwinch_handler is not None:
            signal.signal(signal.SIGWINCH, self._prev_sigwinch_handler)
            self._prev_sigwinch_handler = None
        for fd in (self._wakeup_r, self._wakeup_w):
            if fd is not None:
                os.close(fd)
        self._wakeup_r = self._wakeup_w = None

        if self._original_termios is not None:
            original, self._original_termios = self._original_termios, None
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, original)

    def enter_alternate_screen(self) -> None:
        self._write_now(ansi.ENTER_ALTERNATE_SCREEN)

    def leave_alternate_screen(self) -> None:
        self._write_now(ansi.LEAVE_ALTERNATE_SCREEN)

    def enable_mouse_capture(self) -> None:
        self._write_now(ansi.MOUSE_ENABLE)
        self._mouse_enabled = True

    def disable_mouse_capture(self) -> None:
        self._write_now(ansi.MOUSE_DISABLE)
        self._mouse_enabled = False

    def show_cursor(self) -> None:
        self._write_now(ansi.SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self._write_now(ansi.HIDE_CURSOR)

    def set_title(self, title: str) -> None:
        self._write_now(ansi.set_title(title))

    # -- output -------------------------------------------------------------

    def move_cursor(self, x: int, y: int) -> None:
        self._pending.append(ansi.move_to(x, y))

    def set_style(self, style: Style) -> None:
        if style != self._style:
            self._pending.append(ansi.sgr(style))
            self._style = style

    def reset_style(self) -> None:
        if self._style is not None:
            self._pending.append(ansi.RESET_STYLE)
            self._style = None

    def write(self, text: str) -> None:
        self._pending.append(text)

    def clear(self) -> None:
        self._pending.append(ansi.RESET_STYLE + ansi.CLEAR_SCREEN)
        self._style = None
        self.flush()

    def flush(self) -> None:
        """Write everything queued to the device."""
        if not self._pending:
            return
        data = "".join(self._pending)
        self._pending.clear()
        self._stdout.write(data)
        self._stdout.flush()
        self._log_write(data)

    def _write_now(self, data: str) -> None:
        self._pending.append(data)
        self.flush()

    def _log_write(self, data: str) -> None:
        if not self.config.write_log:
            return
        try:
            with open(self.config.write_log, "a", encoding="utf-8") as f:
                f.write(data)
        except OSError:
            logger.warning("Cannot append to write log %s", self.config.write_log, exc_info=True)

    # -- input --------------------------------------------------------------

    def read_event(self) -> Event:
        """Block until the next input event (or resize) is available."""
        fd = self._stdin.fileno()
        while not self._events:
            if self._resized:
                self._resized = False
                return ResizeEvent(*self.size())

            watch = [fd] if self._wakeup_r is None else [fd, self._wakeup_r]
            timeout = self.config.escape_timeout if self._parser.pending else None
            ready, _, _ = select.select(watch, [], [], timeout)

            if not ready:
                self._events.extend(self._parser.flush())
                continue
            if self._wakeup_r is not None and self._wakeup_r in ready:
                os.read(self._wakeup_r, 1024)
            if fd in ready:
                raw = os.read(fd, 4096)
                if not raw:
                    raise EOFError("terminal input closed")
                self._events.extend(self._parser.feed(self._decoder.decode(raw)))

        return self._events.popleft()

    def _on_sigwinch(self, signum: int, frame: object) -> None:
        self._resized = True
        if self._wakeup_w is not None:
            try:
                os.write(self._wakeup_w, b"\0")
            except BlockingIOError:
                # Pipe full: a wakeup is already pending
                pass


__all__ = ["AnsiBackend", "Backend", "EventSource"]
