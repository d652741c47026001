from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "cyan": "#56b6c2",
    "purple": "#c678dd",
    "red": "#e06c75",
}

_theme = Theme(
    {
        "text": PALETTE["fg"],
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "info": PALETTE["blue"],
        "alias": PALETTE["purple"],
        "section": f"bold {PALETTE['orange']}",
    }
)

console = Console(theme=_theme)
err_console = Console(theme=_theme, stderr=True)

LOGGER_NAME = "quotekit"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Route the ``quotekit`` logger to stderr through Rich."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    level = logging.DEBUG if debug else logging.WARNING
    handler = RichHandler(
        console=err_console,
        show_time=debug,
        show_path=debug,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
