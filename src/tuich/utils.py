"""Unicode text measurement: grapheme segmentation and cell widths.

Every width in the toolkit is measured here, per grapheme cluster, so that
wide (CJK, emoji) and zero-width (combining, control) characters are laid
out the way a terminal displays them.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

TAB_WIDTH = 3

# Punctuation characters for word-motion classification
_PUNCTUATION_REGEX = re.compile(r"[(){}\[\]<>.,;:'\"!?\+\-=*/\\|&%\^$#@~`]")

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    if text.isascii():
        return list(text) if "\r\n" not in text else list(grapheme.graphemes(text))
    return list(grapheme.graphemes(text))


def is_control(g: str) -> bool:
    """True for C0/C1 control clusters (newlines included)."""
    if not g:
        return False
    cp = ord(g[0])
    return cp < 0x20 or 0x7F <= cp <= 0x9F


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the terminal cell width of a single grapheme cluster.

    Rules:
    1. Control characters and lone marks/format characters -> 0
    2. Emoji (VS16, ZWJ sequences, skin tones, flags) -> 2
    3. Otherwise wcwidth of the first codepoint, clamped to 2; codepoints
       wcwidth cannot classify count as 1.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        if cp < 0x7F:
            return 1
        cached = _width_cache.get(g)
        if cached is not None:
            return cached
        return _cache_width(g, _codepoint_width(g))

    cached = _width_cache.get(g)
    if cached is not None:
        return cached

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return _cache_width(g, 2)
        if cp == 0x200D:  # ZWJ
            return _cache_width(g, 2)
        if 0x1F3FB <= cp <= 0x1F3FF:  # skin tone modifiers
            return _cache_width(g, 2)
        if 0x1F1E6 <= cp <= 0x1F1FF:  # regional indicators
            return _cache_width(g, 2)

    first = g[0]
    if is_control(first):
        return _cache_width(g, 0)
    return _cache_width(g, _codepoint_width(first))


def _codepoint_width(ch: str) -> int:
    w = _wcwidth.wcwidth(ch)
    if w < 0:
        # Unassigned or non-printable: marks and format chars stay invisible
        cat = unicodedata.category(ch)
        return 0 if cat.startswith("M") or cat == "Cf" else 1
    return min(w, 2)


def visible_width(text: str) -> int:
    """Calculate the number of cells *text* occupies.

    Tabs count as ``TAB_WIDTH`` cells, control characters as zero.
    """
    if not text:
        return 0

    if text.isascii():
        width = 0
        for ch in text:
            if ch == "\t":
                width += TAB_WIDTH
            elif " " <= ch < "\x7f":
                width += 1
        return width

    width = 0
    for g in grapheme.graphemes(text):
        width += TAB_WIDTH if g == "\t" else grapheme_width(g)
    return width


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------


def is_whitespace_char(char: str) -> bool:
    """Check if a character (or grapheme) is whitespace."""
    return bool(char) and char.isspace()


def is_punctuation_char(char: str) -> bool:
    """Check if a character is punctuation."""
    return bool(_PUNCTUATION_REGEX.match(char))


__all__ = [
    "TAB_WIDTH",
    "grapheme_width",
    "graphemes",
    "is_control",
    "is_punctuation_char",
    "is_whitespace_char",
    "visible_width",
]
