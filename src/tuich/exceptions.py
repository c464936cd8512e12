"""Exceptions raised by the terminal layer."""

from __future__ import annotations


class TerminalError(Exception):
    """A terminal was used in a state that does not allow the operation.

    Raised for example by ``draw()`` before ``start()`` or after
    ``close()``. Backend I/O failures are not wrapped; they propagate as
    the ``OSError`` the backend raised.
    """


class TeardownError(TerminalError):
    """Restoring the terminal mode failed.

    Every restore step is attempted even when an earlier one fails; the
    exceptions of all failed steps are collected in ``errors`` as
    ``(step, exception)`` pairs.
    """

    def __init__(self, errors: list[tuple[str, BaseException]]) -> None:
        self.errors = errors
        steps = ", ".join(step for step, _ in errors)
        super().__init__(f"terminal restore failed during: {steps}")
