"""Tests for tuich.style and tuich.span."""

from __future__ import annotations

import pytest

from tuich.span import Span, spans_width, to_span, to_spans
from tuich.style import Ansi, Color, Modifier, Rgb, Style, UnderlineKind, contrast_fg

RED = Style(fg=Color.RED)
ON_BLUE = Style(bg=Color.BLUE)
BOLD = Style(modifiers=Modifier.BOLD)


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestColor:
    """Named, RGB and palette colors."""

    def test_from_index_maps_named_order(self) -> None:
        assert Color.from_index(0) is Color.RESET
        assert Color.from_index(1) is Color.BLACK
        assert Color.from_index(16) is Color.LIGHT_GRAY

    def test_from_index_out_of_range_is_reset(self) -> None:
        assert Color.from_index(17) is Color.RESET
        assert Color.from_index(-1) is Color.RESET

    def test_str_uses_spaces(self) -> None:
        assert str(Color.LIGHT_RED) == "light red"
        assert str(Rgb(1, 2, 3)) == "rgb 1, 2, 3"
        assert str(Ansi(42)) == "ansi 42"

    def test_rgb_hex_conversion(self) -> None:
        assert Rgb.from_hex("#ff8000") == Rgb(255, 128, 0)
        assert Rgb.from_hex("00ff00") == Rgb(0, 255, 0)
        assert Rgb(255, 128, 0).to_hex() == "#ff8000"

    def test_rgb_from_bad_hex_raises(self) -> None:
        with pytest.raises(ValueError):
            Rgb.from_hex("#fff")

    def test_contrast_fg(self) -> None:
        assert contrast_fg(Color.BLACK) is Color.LIGHT_GRAY
        assert contrast_fg(Color.YELLOW) is Color.BLACK
        assert contrast_fg(Rgb(10, 10, 10)) is Color.LIGHT_GRAY
        assert contrast_fg(Rgb(255, 255, 255)) is Color.BLACK


# ---------------------------------------------------------------------------
# Style.patch
# ---------------------------------------------------------------------------


class TestStylePatch:
    """Layering one style over another."""

    def test_empty_style_is_identity(self) -> None:
        for s in (Style(), RED, ON_BLUE, BOLD, RED.patch(ON_BLUE)):
            assert s.patch(Style()) == s
            assert Style().patch(s) == s

    def test_none_is_identity(self) -> None:
        assert RED.patch(None) == RED

    def test_set_fields_override(self) -> None:
        assert RED.patch(Style(fg=Color.GREEN)).fg is Color.GREEN

    def test_unset_fields_inherit(self) -> None:
        patched = RED.patch(ON_BLUE)
        assert patched.fg is Color.RED
        assert patched.bg is Color.BLUE

    def test_modifiers_are_merged(self) -> None:
        patched = BOLD.patch(Style(modifiers=Modifier.ITALIC))
        assert patched.modifiers == Modifier.BOLD | Modifier.ITALIC

    def test_underline_kind_overrides(self) -> None:
        base = Style(underline_kind=UnderlineKind.LINE)
        assert base.patch(Style(underline_kind=UnderlineKind.CURL)).underline_kind is UnderlineKind.CURL
        assert base.patch(RED).underline_kind is UnderlineKind.LINE

    def test_patch_is_associative(self) -> None:
        styles = [
            Style(),
            RED,
            ON_BLUE,
            BOLD,
            Style(fg=Rgb(1, 2, 3), modifiers=Modifier.DIM),
            Style(bg=Ansi(200), underline_kind=UnderlineKind.DOT),
        ]
        for a in styles:
            for b in styles:
                for c in styles:
                    assert a.patch(b).patch(c) == a.patch(b.patch(c))


# ---------------------------------------------------------------------------
# Style builders
# ---------------------------------------------------------------------------


class TestStyleBuilders:
    """with_* builders return new styles."""

    def test_with_fg_and_bg(self) -> None:
        s = Style().with_fg(Color.CYAN).with_bg(Color.BLACK)
        assert s == Style(fg=Color.CYAN, bg=Color.BLACK)

    def test_with_fg_none_clears(self) -> None:
        assert RED.with_fg(None).fg is None

    def test_with_modifiers_adds(self) -> None:
        s = BOLD.with_modifiers(Modifier.REVERSED)
        assert s.has(Modifier.BOLD)
        assert s.has(Modifier.REVERSED)

    def test_with_underline_kind_sets_underlined(self) -> None:
        s = Style().with_underline_kind(UnderlineKind.DASH)
        assert s.has(Modifier.UNDERLINED)
        assert s.underline_kind is UnderlineKind.DASH

    def test_contrast(self) -> None:
        assert Style.contrast(Color.BLUE) == Style(fg=Color.BLACK, bg=Color.BLUE)

    def test_is_empty(self) -> None:
        assert Style().is_empty
        assert not RED.is_empty


# ---------------------------------------------------------------------------
# Span
# ---------------------------------------------------------------------------


class TestSpan:
    """Styled runs of text."""

    def test_width_counts_cells(self) -> None:
        assert Span("ab世").width == 4

    def test_len_counts_characters(self) -> None:
        assert len(Span("abc")) == 3

    def test_patch_style_layers_over_own_style(self) -> None:
        span = Span("x", RED).patch_style(BOLD)
        assert span.style == Style(fg=Color.RED, modifiers=Modifier.BOLD)

    def test_patch_style_on_unstyled_span(self) -> None:
        assert Span("x").patch_style(RED).style == RED

    def test_with_style_replaces(self) -> None:
        assert Span("x", RED).with_style(None).style is None

    def test_to_span_and_to_spans(self) -> None:
        assert to_span("a") == Span("a")
        assert to_spans("a") == [Span("a")]
        assert to_spans(Span("a", RED)) == [Span("a", RED)]
        assert to_spans(["a", Span("b", RED)]) == [Span("a"), Span("b", RED)]

    def test_spans_width(self) -> None:
        assert spans_width([Span("ab"), Span("世")]) == 4
