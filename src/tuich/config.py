"""Terminal session configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class TerminalConfig:
    """Which terminal modes a session switches on.

    ``escape_timeout`` is how long (in seconds) a lone ``ESC`` waits for
    the rest of an escape sequence before it is reported as the Escape key.
    ``write_log`` names a file that receives a copy of everything written
    to the terminal; empty disables it.
    """

    alternate_screen: bool = True
    raw_mode: bool = True
    hide_cursor: bool = True
    mouse_capture: bool = False
    bracketed_paste: bool = True
    escape_timeout: float = 0.01
    write_log: str = field(default_factory=lambda: os.environ.get("TUICH_WRITE_LOG", ""))

    @classmethod
    def from_env(cls) -> TerminalConfig:
        """Defaults overridden by ``TUICH_*`` environment variables."""
        config = cls()
        config.mouse_capture = _env_flag("TUICH_MOUSE", config.mouse_capture)
        timeout = os.environ.get("TUICH_ESCAPE_TIMEOUT")
        if timeout:
            try:
                config.escape_timeout = float(timeout)
            except ValueError:
                raise ValueError(f"TUICH_ESCAPE_TIMEOUT must be a number, got {timeout!r}") from None
        return config
