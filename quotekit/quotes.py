"""File operations behind the read, delete and add commands.

Files are plain UTF-8 text, one entry line per line. ``add`` writes each
quote as a block: two blank lines, the quote, a blank line and the byline
prefixed with ``-``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from quotekit import ui
from quotekit.logging import console

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
BYLINE_PREFIX = "-"


def read_lines(path: Path) -> List[str]:
    """Return the file's lines without their line terminators."""
    with path.open("r", encoding=ENCODING) as handle:
        return [line.rstrip("\n") for line in handle]


def write_lines(path: Path, lines: Iterable[str]) -> None:
    with path.open("w", encoding=ENCODING) as handle:
        for line in lines:
            handle.write(f"{line}\n")


def pacing_delay(delay_ms: int, line: str) -> float:
    """Seconds to pause after printing ``line``."""
    return delay_ms * len(line) / 1000


def read_file(path: Path) -> None:
    """Print every line of ``path`` as-is."""
    for line in read_lines(path):
        ui.print_line(line)


async def read_file_paced(
    path: Path, delay: int, foreground: ui.ConsoleColor, light_mode: bool
) -> None:
    """Print ``path`` line by line in colour, pausing in proportion to line length."""
    style = ui.line_style(foreground, light_mode)
    lines = read_lines(path)
    logger.debug("reading %d lines from %s with %dms/char", len(lines), path, delay)
    for line in lines:
        ui.print_line(line, style)
        await asyncio.sleep(pacing_delay(delay, line))


def matches_any(line: str, search_terms: Sequence[str]) -> bool:
    return any(term in line for term in search_terms)


def delete_from_file(path: Path, search_terms: Sequence[str]) -> int:
    """Rewrite ``path`` without lines containing any of ``search_terms``.

    Matching is a case-sensitive substring test against every raw line,
    including the blank spacer lines written by ``add_to_file``. Returns the
    number of lines removed.
    """
    console.print("Deleting from file")
    lines = read_lines(path)
    kept = [line for line in lines if not matches_any(line, search_terms)]
    write_lines(path, kept)
    removed = len(lines) - len(kept)
    logger.debug("removed %d of %d lines from %s", removed, len(lines), path)
    return removed


def format_entry(quote: str, byline: str) -> str:
    return f"\n\n{quote}\n\n{BYLINE_PREFIX}{byline}\n"


def add_to_file(path: Path, quote: str, byline: str) -> None:
    """Append a quote block to ``path``, creating the file if needed."""
    console.print("Adding to file")
    with path.open("a", encoding=ENCODING) as handle:
        handle.write(format_entry(quote, byline))
