"""tuich: immediate-mode terminal UI rendering with cell-level diffing."""

# Backends
from tuich.backend import AnsiBackend, Backend, EventSource

# Screen buffer
from tuich.buffer import Buffer, Cell, Change

# Configuration and errors
from tuich.config import TerminalConfig

# Input events
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
    ResizeEvent,
    UnknownEvent,
)
from tuich.exceptions import TeardownError, TerminalError

# Input decoding
from tuich.input import InputParser

# Layout
from tuich.layout import (
    Align,
    Clip,
    ClipKind,
    Constraint,
    Direction,
    Fill,
    Length,
    Margin,
    Percentage,
    Rect,
    split,
)

# Prompt editing
from tuich.prompt_state import PromptState

# Spans and styles
from tuich.span import Span, SpanLike, spans_width, to_span, to_spans
from tuich.style import Ansi, AnyColor, Color, Modifier, Rgb, Style, UnderlineKind, contrast_fg

# Terminal orchestration
from tuich.terminal import Terminal, TerminalState

# Unicode measurement
from tuich.utils import grapheme_width, graphemes, visible_width

# Widgets
from tuich.widgets import (
    Block,
    Borders,
    Clear,
    Line,
    List,
    ListItem,
    Paragraph,
    Prompt,
    Sides,
    Stack,
    Text,
    Widget,
)

# Wrapping
from tuich.wrap import StyledGrapheme, WrapMode, WrappedLines, wrap_spans

__all__ = [
    # Backends
    "AnsiBackend",
    "Backend",
    "EventSource",
    # Buffer
    "Buffer",
    "Cell",
    "Change",
    # Config / errors
    "TeardownError",
    "TerminalConfig",
    "TerminalError",
    # Events
    "Event",
    "FocusEvent",
    "InputParser",
    "KeyCode",
    "KeyEvent",
    "KeyModifiers",
    "MouseButton",
    "MouseEvent",
    "MouseKind",
    "PasteEvent",
    "ResizeEvent",
    "UnknownEvent",
    # Layout
    "Align",
    "Clip",
    "ClipKind",
    "Constraint",
    "Direction",
    "Fill",
    "Length",
    "Margin",
    "Percentage",
    "Rect",
    "split",
    # Prompt editing
    "PromptState",
    # Spans / styles
    "Ansi",
    "AnyColor",
    "Color",
    "Modifier",
    "Rgb",
    "Span",
    "SpanLike",
    "Style",
    "UnderlineKind",
    "contrast_fg",
    "spans_width",
    "to_span",
    "to_spans",
    # Terminal
    "Terminal",
    "TerminalState",
    # Unicode
    "grapheme_width",
    "graphemes",
    "visible_width",
    # Widgets
    "Block",
    "Borders",
    "Clear",
    "Line",
    "List",
    "ListItem",
    "Paragraph",
    "Prompt",
    "Sides",
    "Stack",
    "Text",
    "Widget",
    # Wrapping
    "StyledGrapheme",
    "WrapMode",
    "WrappedLines",
    "wrap_spans",
]
