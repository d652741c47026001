"""UI utilities for rich console output."""

from __future__ import annotations

import enum

from rich.style import Style
from rich.table import Table
from rich.text import Text

from quotekit.logging import console


class ConsoleColor(enum.Enum):
    """The sixteen classic console colours, mapped to Rich colour names."""

    Black = "black"
    DarkBlue = "blue"
    DarkGreen = "green"
    DarkCyan = "cyan"
    DarkRed = "red"
    DarkMagenta = "magenta"
    DarkYellow = "yellow"
    Gray = "white"
    DarkGray = "bright_black"
    Blue = "bright_blue"
    Green = "bright_green"
    Cyan = "bright_cyan"
    Red = "bright_red"
    Magenta = "bright_magenta"
    Yellow = "bright_yellow"
    White = "bright_white"


def line_style(foreground: ConsoleColor, light_mode: bool) -> Style:
    """Foreground on black, or on white in light mode."""
    background = ConsoleColor.White if light_mode else ConsoleColor.Black
    return Style(color=foreground.value, bgcolor=background.value)


def print_line(line: str, style: Style | None = None) -> None:
    """Print ``line`` verbatim: no markup, highlighting or wrapping."""
    console.print(Text(line, style=style or ""), soft_wrap=True)


def themed_grid(padding: tuple[int, int] = (0, 2)) -> Table:
    return Table.grid(padding=padding)
