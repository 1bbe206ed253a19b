"""Styled terminal printing.

``printc`` writes a single line to standard output with a text style and a
foreground colour applied through Rich.  The text is printed literally:
square brackets are never treated as Rich markup and long lines are not
wrapped, so ASCII art survives unchanged.
"""

from __future__ import annotations

from enum import Enum

from rich.style import Style

from pcss_cli.utils import console


class TextStyle(str, Enum):
    """Text attribute applied to a printed line."""

    NORMAL = "normal"
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"


class Color(str, Enum):
    """Standard ANSI foreground colours."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


def rich_style(style: TextStyle, color: Color) -> Style:
    """Translate a ``(style, color)`` pair into a Rich ``Style``."""
    return Style(
        color=color.value,
        bold=style is TextStyle.BOLD,
        dim=style is TextStyle.DIM,
        italic=style is TextStyle.ITALIC,
        underline=style is TextStyle.UNDERLINE,
    )


def printc(style: TextStyle, color: Color, text: str) -> None:
    """Print *text* to standard output using *style* and *color*."""
    console.print(
        text,
        style=rich_style(style, color),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
