"""Decode raw terminal input into events.

Input arrives in arbitrary chunks, so an escape sequence can be split across
reads. :class:`InputParser` keeps incomplete sequences until the rest
arrives (or until :meth:`InputParser.flush` is called after a timeout, which
turns a lone ``ESC`` into the Escape key), collects bracketed pastes, and
decodes each complete sequence.
"""

from __future__ import annotations

import logging
import re
import sys

from tuich.events import (
    Event,
    FocusEvent,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseButton,
    MouseEvent,
    MouseKind,
    PasteEvent,
    UnknownEvent,
)

logger = logging.getLogger(__name__)

ESC = "\x1b"
BRACKETED_PASTE_START = "\x1b[200~"
BRACKETED_PASTE_END = "\x1b[201~"

_SGR_MOUSE_RE = re.compile(r"^\x1b\[<(\d+);(\d+);(\d+)([Mm])$")
_CSI_RE = re.compile(r"^\x1b\[([0-9;:]*)([\x40-\x7e])$")

# ---------------------------------------------------------------------------
# Key tables
# ---------------------------------------------------------------------------

# CSI <letter> and SS3 <letter>
_LETTER_KEYS: dict[str, KeyCode] = {
    "A": KeyCode.UP,
    "B": KeyCode.DOWN,
    "C": KeyCode.RIGHT,
    "D": KeyCode.LEFT,
    "H": KeyCode.HOME,
    "F": KeyCode.END,
    "P": KeyCode.F1,
    "Q": KeyCode.F2,
    "R": KeyCode.F3,
    "S": KeyCode.F4,
}

# CSI <number> ~
_TILDE_KEYS: dict[int, KeyCode] = {
    1: KeyCode.HOME,
    2: KeyCode.INSERT,
    3: KeyCode.DELETE,
    4: KeyCode.END,
    5: KeyCode.PAGE_UP,
    6: KeyCode.PAGE_DOWN,
    7: KeyCode.HOME,
    8: KeyCode.END,
    11: KeyCode.F1,
    12: KeyCode.F2,
    13: KeyCode.F3,
    14: KeyCode.F4,
    15: KeyCode.F5,
    17: KeyCode.F6,
    18: KeyCode.F7,
    19: KeyCode.F8,
    20: KeyCode.F9,
    21: KeyCode.F10,
    23: KeyCode.F11,
    24: KeyCode.F12,
}

# CSI <codepoint> u
_CODEPOINT_KEYS: dict[int, KeyCode] = {
    9: KeyCode.TAB,
    13: KeyCode.ENTER,
    27: KeyCode.ESC,
    127: KeyCode.BACKSPACE,
    57414: KeyCode.ENTER,
}

_CTRL_SYMBOLS: dict[str, str] = {
    "\x00": " ",
    "\x1c": "\\",
    "\x1d": "]",
    "\x1e": "^",
    "\x1f": "_",
}


def _modifiers(param: int) -> KeyModifiers:
    """Decode an xterm modifier parameter (1 + bitmask)."""
    bits = max(param - 1, 0)
    mods = KeyModifiers.NONE
    if bits & 1:
        mods |= KeyModifiers.SHIFT
    if bits & 2:
        mods |= KeyModifiers.ALT
    if bits & 4:
        mods |= KeyModifiers.CTRL
    return mods


# ---------------------------------------------------------------------------
# Sequence completeness
# ---------------------------------------------------------------------------


def _sequence_status(data: str) -> str:
    """Return 'complete', 'incomplete' or 'not-escape' for *data*."""
    if not data.startswith(ESC):
        return "not-escape"
    if len(data) == 1:
        return "incomplete"

    introducer = data[1]
    if introducer == "[":
        if data.startswith("\x1b[M"):
            # X10 mouse: three payload bytes
            return "complete" if len(data) >= 6 else "incomplete"
        if len(data) < 3:
            return "incomplete"
        final = ord(data[-1])
        if 0x40 <= final <= 0x7E and not (data[2] == "<" and data[-1] not in "Mm"):
            return "complete"
        return "incomplete"
    if introducer in "]P_":
        # OSC / DCS / APC run until BEL or ST
        if data.endswith("\x07") or data.endswith("\x1b\\"):
            return "complete"
        return "incomplete"
    if introducer == "O":
        return "complete" if len(data) >= 3 else "incomplete"
    return "complete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete sequences plus an incomplete remainder."""
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        if buffer[pos] != ESC:
            sequences.append(buffer[pos])
            pos += 1
            continue

        end = pos + 1
        while True:
            status = _sequence_status(buffer[pos:end])
            if status == "complete":
                break
            if end >= len(buffer):
                return sequences, buffer[pos:]
            if end == pos + 1 and buffer[end] == ESC:
                # ESC ESC: the first one stands alone
                break
            end += 1
        sequences.append(buffer[pos:end])
        pos = end

    return sequences, ""


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _decode_single(ch: str) -> Event:
    if ch in ("\r", "\n"):
        return KeyEvent(KeyCode.ENTER)
    if ch == "\t":
        return KeyEvent(KeyCode.TAB)
    if ch == "\x7f":
        return KeyEvent(KeyCode.BACKSPACE)
    if ch == ESC:
        return KeyEvent(KeyCode.ESC)
    if ch in _CTRL_SYMBOLS:
        return KeyEvent(_CTRL_SYMBOLS[ch], KeyModifiers.CTRL)
    if "\x01" <= ch <= "\x1a":
        return KeyEvent(chr(ord(ch) + 0x60), KeyModifiers.CTRL)
    if ch.isupper():
        return KeyEvent(ch, KeyModifiers.SHIFT)
    return KeyEvent(ch)


def _decode_mouse(match: re.Match[str]) -> MouseEvent:
    code, x, y, final = int(match.group(1)), int(match.group(2)), int(match.group(3)), match.group(4)
    mods = KeyModifiers.NONE
    if code & 4:
        mods |= KeyModifiers.SHIFT
    if code & 8:
        mods |= KeyModifiers.ALT
    if code & 16:
        mods |= KeyModifiers.CTRL
    x, y = x - 1, y - 1

    if code & 64:
        kind = (
            MouseKind.SCROLL_UP,
            MouseKind.SCROLL_DOWN,
            MouseKind.SCROLL_LEFT,
            MouseKind.SCROLL_RIGHT,
        )[code & 3]
        return MouseEvent(kind, x, y, MouseButton.NONE, mods)

    button = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT, MouseButton.NONE)[code & 3]
    if code & 32:
        kind = MouseKind.MOVE if button is MouseButton.NONE else MouseKind.DRAG
    else:
        kind = MouseKind.DOWN if final == "M" else MouseKind.UP
    return MouseEvent(kind, x, y, button, mods)


def _decode_csi(seq: str) -> Event | None:
    mouse = _SGR_MOUSE_RE.match(seq)
    if mouse:
        return _decode_mouse(mouse)

    match = _CSI_RE.match(seq)
    if not match:
        return None
    params = [p.split(":")[0] for p in match.group(1).split(";")] if match.group(1) else []
    numbers = [int(p) if p.isdigit() else 0 for p in params]
    final = match.group(2)
    mods = _modifiers(numbers[1]) if len(numbers) > 1 else KeyModifiers.NONE

    if final in _LETTER_KEYS:
        return KeyEvent(_LETTER_KEYS[final], mods)
    if final == "~" and numbers and numbers[0] in _TILDE_KEYS:
        return KeyEvent(_TILDE_KEYS[numbers[0]], mods)
    if final == "Z":
        return KeyEvent(KeyCode.BACK_TAB, KeyModifiers.SHIFT)
    if final == "I" and not numbers:
        return FocusEvent(True)
    if final == "O" and not numbers:
        return FocusEvent(False)
    if final == "u" and numbers:
        codepoint = numbers[0]
        if codepoint in _CODEPOINT_KEYS:
            return KeyEvent(_CODEPOINT_KEYS[codepoint], mods)
        if codepoint > sys.maxunicode:
            return None
        return KeyEvent(chr(codepoint), mods)
    return None


def decode_sequence(seq: str) -> Event:
    """Decode one complete sequence as returned by :func:`split_sequences`."""
    if len(seq) == 1:
        return _decode_single(seq)

    event: Event | None = None
    if seq.startswith("\x1b["):
        event = _decode_csi(seq)
    elif seq.startswith("\x1bO") and len(seq) == 3 and seq[2] in _LETTER_KEYS:
        event = KeyEvent(_LETTER_KEYS[seq[2]])
    elif len(seq) == 2 and seq[0] == ESC:
        # Alt+<key>
        inner = _decode_single(seq[1])
        if isinstance(inner, KeyEvent):
            event = KeyEvent(inner.code, inner.modifiers | KeyModifiers.ALT)

    if event is None:
        logger.debug("Unrecognised input sequence %r", seq)
        return UnknownEvent(seq)
    return event


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class InputParser:
    """Incremental decoder for raw terminal input."""

    def __init__(self) -> None:
        self._buffer: str = ""
        self._paste_mode: bool = False
        self._paste_buffer: str = ""

    @property
    def pending(self) -> bool:
        """True while an incomplete escape sequence waits for its remainder.

        An open paste is not pending: it has no timeout and only ends at
        its end marker (or an explicit :meth:`flush`).
        """
        return bool(self._buffer) and not self._paste_mode

    @property
    def in_paste(self) -> bool:
        return self._paste_mode

    def feed(self, data: str) -> list[Event]:
        """Add *data* and return every event it completes."""
        events: list[Event] = []
        self._buffer += data

        while self._buffer:
            if self._paste_mode:
                self._paste_buffer += self._buffer
                self._buffer = ""
                end_index = self._paste_buffer.find(BRACKETED_PASTE_END)
                if end_index == -1:
                    break
                events.append(PasteEvent(self._paste_buffer[:end_index]))
                self._buffer = self._paste_buffer[end_index + len(BRACKETED_PASTE_END):]
                self._paste_buffer = ""
                self._paste_mode = False
                continue

            start_index = self._buffer.find(BRACKETED_PASTE_START)
            head = self._buffer if start_index == -1 else self._buffer[:start_index]
            sequences, remainder = split_sequences(head)
            events.extend(decode_sequence(seq) for seq in sequences)

            if start_index == -1:
                self._buffer = remainder
                break
            self._buffer = self._buffer[start_index + len(BRACKETED_PASTE_START):]
            self._paste_mode = True

        return events

    def flush(self) -> list[Event]:
        """Decode whatever is buffered, complete or not."""
        if self._paste_mode:
            # An unterminated paste is delivered as-is
            events: list[Event] = [PasteEvent(self._paste_buffer + self._buffer)]
            self._paste_mode = False
            self._paste_buffer = ""
            self._buffer = ""
            return events
        if not self._buffer:
            return []
        data, self._buffer = self._buffer, ""
        if data == ESC:
            return [KeyEvent(KeyCode.ESC)]
        if len(data) == 2 and data[0] == ESC:
            return [decode_sequence(data)]
        return [UnknownEvent(data)]

    def clear(self) -> None:
        self._buffer = ""
        self._paste_mode = False
        self._paste_buffer = ""


__all__ = [
    "BRACKETED_PASTE_END",
    "BRACKETED_PASTE_START",
    "ESC",
    "InputParser",
    "decode_sequence",
    "split_sequences",
]
