"""Tests for tuich.utils -- grapheme segmentation and cell widths."""

from __future__ import annotations

from tuich.utils import (
    grapheme_width,
    graphemes,
    is_control,
    is_punctuation_char,
    is_whitespace_char,
    visible_width,
)


# ---------------------------------------------------------------------------
# graphemes
# ---------------------------------------------------------------------------


class TestGraphemes:
    """Split text into extended grapheme clusters."""

    def test_ascii_is_split_per_character(self) -> None:
        assert graphemes("abc") == ["a", "b", "c"]

    def test_empty_string(self) -> None:
        assert graphemes("") == []

    def test_crlf_is_one_cluster(self) -> None:
        assert graphemes("a\r\nb") == ["a", "\r\n", "b"]

    def test_combining_mark_joins_its_base(self) -> None:
        assert graphemes("e\u0301x") == ["e\u0301", "x"]

    def test_zwj_emoji_sequence_is_one_cluster(self) -> None:
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert graphemes(family) == [family]


# ---------------------------------------------------------------------------
# grapheme_width
# ---------------------------------------------------------------------------


class TestGraphemeWidth:
    """Cell width of a single cluster."""

    def test_ascii_letter(self) -> None:
        assert grapheme_width("a") == 1

    def test_cjk_is_wide(self) -> None:
        assert grapheme_width("\u4e16") == 2

    def test_control_character_is_zero(self) -> None:
        assert grapheme_width("\x07") == 0

    def test_empty_is_zero(self) -> None:
        assert grapheme_width("") == 0

    def test_combining_sequence_takes_base_width(self) -> None:
        assert grapheme_width("e\u0301") == 1

    def test_emoji_with_variation_selector_is_wide(self) -> None:
        assert grapheme_width("\u2764\ufe0f") == 2

    def test_flag_is_wide(self) -> None:
        assert grapheme_width("\U0001F1FA\U0001F1F8") == 2

    def test_unassigned_codepoint_counts_as_one(self) -> None:
        assert grapheme_width("\U000E0FFF") in (0, 1)
        assert grapheme_width("\u0378") == 1

    def test_width_never_exceeds_two(self) -> None:
        for g in ["a", "\u4e16", "\U0001F600", "\u2764\ufe0f"]:
            assert 0 <= grapheme_width(g) <= 2


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure the visible terminal width of text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("\u4e16") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        assert visible_width("A\u4e16B") == 4

    def test_tab_counts_as_three_spaces(self) -> None:
        assert visible_width("\t") == 3

    def test_newline_does_not_count(self) -> None:
        assert visible_width("a\nb") == 2


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------


class TestClassification:
    """Control, whitespace and punctuation predicates."""

    def test_is_control(self) -> None:
        assert is_control("\n")
        assert is_control("\x1b")
        assert is_control("\x85")
        assert not is_control("a")
        assert not is_control("")

    def test_is_whitespace_char(self) -> None:
        assert is_whitespace_char(" ")
        assert is_whitespace_char("\t")
        assert not is_whitespace_char("a")
        assert not is_whitespace_char("")

    def test_is_punctuation_char(self) -> None:
        for ch in ".,;:!?()[]{}-":
            assert is_punctuation_char(ch), ch
        assert not is_punctuation_char("a")
        assert not is_punctuation_char(" ")
