"""Frame orchestration: double buffering, diffing and terminal lifecycle.

A :class:`Terminal` owns two buffers. Widgets draw into :attr:`Terminal.buffer`;
:meth:`Terminal.draw` sends only the cells that differ from the previous
frame to the backend, then remembers the frame. Lifecycle::

    UNINITIALIZED --start()--> ACTIVE --close()--> TERMINATED
"""

from __future__ import annotations

import enum
import logging
from types import TracebackType
from typing import Callable, Optional

from tuich.backend import AnsiBackend, Backend, EventSource
from tuich.buffer import Buffer
from tuich.config import TerminalConfig
from tuich.events import Event, ResizeEvent
from tuich.exceptions import TeardownError, TerminalError
from tuich.layout import Rect

logger = logging.getLogger(__name__)


class TerminalState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    TERMINATED = "terminated"


class Terminal:
    """Double-buffered screen on top of a :class:`~tuich.backend.Backend`.

    ``events`` defaults to the backend itself when it can read events.
    The terminal modes switched on by :meth:`start` (and restored by
    :meth:`close`) come from ``config``.
    """

    def __init__(
        self,
        backend: Backend,
        events: Optional[EventSource] = None,
        config: Optional[TerminalConfig] = None,
    ) -> None:
        self.backend = backend
        if events is None and hasattr(backend, "read_event"):
            events = backend  # type: ignore[assignment]
        self.events = events
        self.config = config if config is not None else TerminalConfig()
        self.state = TerminalState.UNINITIALIZED

        self.buffer = Buffer.empty(Rect(0, 0, 0, 0))
        self.previous = Buffer.empty(Rect(0, 0, 0, 0))
        # Restore steps for the modes start() switched on, in undo order
        self._restore: list[tuple[str, Callable[[], None]]] = []

    @classmethod
    def classic(
        cls,
        backend: Optional[Backend] = None,
        events: Optional[EventSource] = None,
        config: Optional[TerminalConfig] = None,
    ) -> Terminal:
        """Create and start a terminal; without a backend, use the process tty."""
        if backend is None:
            backend = AnsiBackend(config=config)
        terminal = cls(backend, events, config)
        terminal.start()
        return terminal

    # -- lifecycle ----------------------------------------------------------

    def start(self) -> Terminal:
        """Switch on the configured modes and size the buffers.

        If any step fails, the modes already switched on are restored, the
        terminal becomes TERMINATED and the original error propagates.
        """
        if self.state is not TerminalState.UNINITIALIZED:
            raise TerminalError(f"cannot start a terminal that is {self.state.value}")

        self.state = TerminalState.ACTIVE
        try:
            if self.config.hide_cursor:
                self.backend.hide_cursor()
                self._restore.insert(0, ("show cursor", self.backend.show_cursor))
            if self.config.alternate_screen:
                self.backend.enter_alternate_screen()
                self._restore.insert(0, ("leave alternate screen", self.backend.leave_alternate_screen))
            if self.config.raw_mode:
                self.backend.enable_raw_mode()
                self._restore.insert(0, ("disable raw mode", self.backend.disable_raw_mode))

            width, height = self.backend.size()
            self._resize_buffers(width, height)
        except BaseException:
            self.state = TerminalState.TERMINATED
            steps, self._restore = self._restore, []
            self._run_restore_steps([*steps, ("flush", self.backend.flush)])
            raise

        logger.info("Terminal started at %dx%d", width, height)
        return self

    def close(self) -> None:
        """Restore every mode :meth:`start` changed.

        All restore steps run even when one fails; the failures are then
        raised together as :class:`TeardownError`. Closing twice is a no-op.
        """
        if self.state is TerminalState.TERMINATED:
            return
        was_started = self.state is TerminalState.ACTIVE
        self.state = TerminalState.TERMINATED
        if not was_started:
            return

        steps: list[tuple[str, Callable[[], None]]] = [
            ("reset style", self.backend.reset_style),
            *self._restore,
            ("flush", self.backend.flush),
        ]
        self._restore = []

        errors = self._run_restore_steps(steps)
        logger.info("Terminal closed")
        if errors:
            raise TeardownError(errors)

    def _run_restore_steps(
        self, steps: list[tuple[str, Callable[[], None]]]
    ) -> list[tuple[str, BaseException]]:
        errors: list[tuple[str, BaseException]] = []
        for name, step in steps:
            try:
                step()
            except Exception as e:
                logger.exception("Terminal restore step %r failed", name)
                errors.append((name, e))
        return errors

    def __enter__(self) -> Terminal:
        if self.state is TerminalState.UNINITIALIZED:
            self.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _require_active(self, operation: str) -> None:
        if self.state is not TerminalState.ACTIVE:
            raise TerminalError(f"cannot {operation} a terminal that is {self.state.value}")

    # -- geometry -----------------------------------------------------------

    def rect(self) -> Rect:
        """The full-screen area."""
        return self.buffer.area

    def _resize_buffers(self, width: int, height: int) -> None:
        area = Rect(0, 0, width, height)
        self.buffer.resize(area)
        self.previous.resize(area)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new screen size; the next :meth:`draw` repaints everything."""
        self._require_active("resize")
        self.backend.clear()
        self._resize_buffers(width, height)
        logger.info("Terminal resized to %dx%d", width, height)

    def clear(self) -> None:
        """Clear the screen and force a full repaint on the next draw."""
        self._require_active("clear")
        self.backend.clear()
        self.previous.clear()

    # -- frames -------------------------------------------------------------

    def draw(self) -> int:
        """Send the cells that changed since the last frame.

        Returns the number of cells written.
        """
        self._require_active("draw")
        backend = self.backend

        written = 0
        cursor: Optional[tuple[int, int]] = None
        for x, y, cell in self.buffer.diff(self.previous):
            if cell.is_continuation:
                continue
            if cursor != (x, y):
                backend.move_cursor(x, y)
            backend.set_style(cell.style)
            backend.write(cell.symbol)
            cursor = (x + cell.width, y)
            written += 1

        backend.reset_style()
        backend.flush()
        self.previous = self.buffer.copy()
        logger.debug("Frame drawn: %d cells changed", written)
        return written

    # -- input --------------------------------------------------------------

    def read_events(self) -> Event:
        """Block until the next event; a resize is applied before returning it."""
        self._require_active("read events from")
        if self.events is None:
            raise TerminalError("terminal has no event source")
        event = self.events.read_event()
        if isinstance(event, ResizeEvent):
            self.resize(event.width, event.height)
        return event


__all__ = ["Terminal", "TerminalState"]
