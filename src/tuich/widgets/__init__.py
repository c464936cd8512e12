"""Widgets: everything that can be drawn into a buffer."""

from tuich.widgets.base import Widget
from tuich.widgets.block import Block
from tuich.widgets.borders import (
    BLOCK,
    DOUBLE,
    ROUNDED,
    SINGLE,
    THICK,
    BorderGlyphs,
    Borders,
    Sides,
)
from tuich.widgets.clear import Clear
from tuich.widgets.line import Line
from tuich.widgets.list import List, ListItem
from tuich.widgets.paragraph import Paragraph
from tuich.widgets.prompt import Prompt
from tuich.widgets.stack import Stack
from tuich.widgets.text import Text

__all__ = [
    "BLOCK",
    "Block",
    "BorderGlyphs",
    "Borders",
    "Clear",
    "DOUBLE",
    "Line",
    "List",
    "ListItem",
    "Paragraph",
    "Prompt",
    "ROUNDED",
    "SINGLE",
    "Sides",
    "Stack",
    "THICK",
    "Text",
    "Widget",
]
