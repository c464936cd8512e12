"""Tests for the Prompt widget and PromptState editing."""

from __future__ import annotations

from tuich.buffer import Buffer
from tuich.events import KeyCode, KeyEvent, KeyModifiers, PasteEvent, ResizeEvent
from tuich.layout import Rect
from tuich.prompt_state import PromptState
from tuich.span import Span
from tuich.style import Modifier, Style
from tuich.widgets import Borders, Prompt

CTRL = KeyModifiers.CTRL
ALT = KeyModifiers.ALT
REVERSED = Style(modifiers=Modifier.REVERSED)


def render(prompt: Prompt, width: int, height: int = 1) -> Buffer:
    buf = Buffer.empty(Rect(0, 0, width, height))
    prompt.draw(buf, buf.area)
    return buf


# ---------------------------------------------------------------------------
# Prompt rendering
# ---------------------------------------------------------------------------


class TestPromptRendering:
    """A label, the value and a cursor cell."""

    def test_value_and_cursor_at_end(self) -> None:
        buf = render(Prompt("hello"), 8)
        assert buf.lines() == ["hello   "]
        assert buf[5, 0].style == REVERSED
        assert buf[4, 0].style == Style()

    def test_label_precedes_value(self) -> None:
        buf = render(Prompt("hi", cursor=0).with_label("> "), 6)
        assert buf.lines() == ["> hi  "]
        assert buf[2, 0].style == REVERSED

    def test_placeholder_when_empty(self) -> None:
        buf = render(Prompt().with_placeholder("type here"), 10)
        assert buf.lines() == ["type here "]

    def test_scrolls_to_keep_cursor_visible(self) -> None:
        prompt = Prompt("abcdefghij")
        assert prompt.scroll(5) == 6
        buf = render(prompt, 5)
        assert buf.lines() == ["ghij "]
        assert buf[4, 0].style == REVERSED

    def test_unfocused_prompt_has_no_cursor_and_no_scroll(self) -> None:
        buf = render(Prompt("abcdefghij").with_focus(False), 5)
        assert buf.lines() == ["abcde"]
        assert all(buf[x, 0].style == Style() for x in range(5))

    def test_cursor_column_counts_cells(self) -> None:
        assert Prompt("a世b", cursor=2).cursor_column() == 3

    def test_borders_return_interior(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 5, 3))
        inner = Prompt("x").with_borders(Borders.single()).draw(buf, buf.area)
        assert inner == Rect(1, 1, 3, 1)
        assert buf.lines()[1] == "│x  │"


# ---------------------------------------------------------------------------
# PromptState: editing actions
# ---------------------------------------------------------------------------


class TestPromptStateEditing:
    """Direct editing calls."""

    def test_initial_cursor_defaults_to_end_and_is_clamped(self) -> None:
        assert PromptState("abc").cursor == 3
        assert PromptState("abc", 10).cursor == 3
        assert PromptState("abc", -1).cursor == 0

    def test_insert_at_cursor(self) -> None:
        state = PromptState("ac", 1)
        state.insert_char("b")
        assert (state.value, state.cursor) == ("abc", 2)

    def test_insert_str_drops_control_characters(self) -> None:
        state = PromptState()
        state.insert_str("a\nb\x1bc")
        assert state.value == "abc"

    def test_delete_left_and_right(self) -> None:
        state = PromptState("abcd", 2)
        state.delete_left()
        assert (state.value, state.cursor) == ("acd", 1)
        state.delete_right(2)
        assert (state.value, state.cursor) == ("a", 1)

    def test_delete_at_edges_is_a_no_op(self) -> None:
        state = PromptState("ab", 0)
        state.delete_left()
        assert state.value == "ab"
        state.move_end()
        state.delete_right()
        assert state.value == "ab"

    def test_grapheme_clusters_are_edited_whole(self) -> None:
        state = PromptState("xe\u0301")
        state.delete_left()
        assert (state.value, state.cursor) == ("x", 1)

    def test_move_to_snaps_to_grapheme_boundary(self) -> None:
        state = PromptState("e\u0301x")
        state.move_to(1)
        assert state.cursor == 0
        state.move_to(2)
        assert state.cursor == 2

    def test_word_motion(self) -> None:
        state = PromptState("hello world", 0)
        state.move_next_word()
        assert state.cursor == 5
        state.move_next_word()
        assert state.cursor == 11
        state.move_prev_word()
        assert state.cursor == 6

    def test_punctuation_is_its_own_word(self) -> None:
        state = PromptState("foo.bar")
        state.move_prev_word()
        assert state.cursor == 4
        state.move_prev_word()
        assert state.cursor == 3
        state.move_prev_word()
        assert state.cursor == 0

    def test_delete_words(self) -> None:
        state = PromptState("hello world")
        state.delete_prev_word()
        assert (state.value, state.cursor) == ("hello ", 6)
        state.move_start()
        state.delete_next_word()
        assert (state.value, state.cursor) == (" ", 0)

    def test_delete_to_start_and_end(self) -> None:
        state = PromptState("hello world", 6)
        state.delete_to_end()
        assert state.value == "hello "
        state = PromptState("hello world", 6)
        state.delete_to_start()
        assert (state.value, state.cursor) == ("world", 0)

    def test_clear(self) -> None:
        state = PromptState("abc")
        state.clear()
        assert (state.value, state.cursor) == ("", 0)


# ---------------------------------------------------------------------------
# PromptState: key bindings
# ---------------------------------------------------------------------------


class TestPromptStateKeys:
    """handle_key maps keys onto editing actions."""

    def test_printable_characters_insert(self) -> None:
        state = PromptState()
        assert state.handle_key(KeyEvent("a"))
        assert state.handle_key(KeyEvent("B", KeyModifiers.SHIFT))
        assert state.value == "aB"

    def test_unbound_keys_are_not_consumed(self) -> None:
        state = PromptState("x")
        assert not state.handle_key(KeyEvent(KeyCode.ENTER))
        assert not state.handle_key(KeyEvent("x", CTRL))
        assert not state.handle_key(KeyEvent(KeyCode.UP))
        assert state.value == "x"

    def test_cursor_keys(self) -> None:
        state = PromptState("abc")
        state.handle_key(KeyEvent(KeyCode.HOME))
        assert state.cursor == 0
        state.handle_key(KeyEvent(KeyCode.RIGHT))
        assert state.cursor == 1
        state.handle_key(KeyEvent("e", CTRL))
        assert state.cursor == 3
        state.handle_key(KeyEvent("b", CTRL))
        assert state.cursor == 2
        state.handle_key(KeyEvent("a", CTRL))
        assert state.cursor == 0
        state.handle_key(KeyEvent("f", CTRL))
        assert state.cursor == 1
        state.handle_key(KeyEvent(KeyCode.END))
        state.handle_key(KeyEvent(KeyCode.LEFT))
        assert state.cursor == 2

    def test_word_keys(self) -> None:
        state = PromptState("one two")
        state.handle_key(KeyEvent(KeyCode.LEFT, CTRL))
        assert state.cursor == 4
        state.handle_key(KeyEvent("b", ALT))
        assert state.cursor == 0
        state.handle_key(KeyEvent(KeyCode.RIGHT, CTRL))
        assert state.cursor == 3
        state.handle_key(KeyEvent("f", ALT))
        assert state.cursor == 7

    def test_deletion_keys(self) -> None:
        state = PromptState("one two three four")
        state.handle_key(KeyEvent("w", CTRL))
        assert state.value == "one two three "
        state.handle_key(KeyEvent(KeyCode.BACKSPACE, ALT))
        assert state.value == "one two "
        # Ctrl+h is what most terminals send for Ctrl+Backspace
        state.handle_key(KeyEvent("h", CTRL))
        assert state.value == "one "
        state.handle_key(KeyEvent(KeyCode.BACKSPACE))
        assert state.value == "one"
        state.handle_key(KeyEvent(KeyCode.HOME))
        state.handle_key(KeyEvent(KeyCode.DELETE))
        assert state.value == "ne"

    def test_alt_d_deletes_next_word(self) -> None:
        state = PromptState("one two", 0)
        state.handle_key(KeyEvent("d", ALT))
        assert state.value == " two"

    def test_kill_line_keys(self) -> None:
        state = PromptState("abcdef", 3)
        state.handle_key(KeyEvent("k", CTRL))
        assert state.value == "abc"
        state.handle_key(KeyEvent("u", CTRL))
        assert (state.value, state.cursor) == ("", 0)

    def test_handle_event_inserts_pastes(self) -> None:
        state = PromptState()
        assert state.handle_event(PasteEvent("a\nb"))
        assert state.value == "ab"
        assert not state.handle_event(ResizeEvent(1, 1))

    def test_prompt_reflects_state(self) -> None:
        state = PromptState("abc", 1)
        prompt = state.prompt(label=Span("> "))
        assert prompt.value == "abc"
        assert prompt.cursor == 1
        assert prompt.label == Span("> ")
