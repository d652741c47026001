"""Read command for displaying a file with colour and pacing."""

from __future__ import annotations

from typing import Optional

from quotekit.grammar import Command, Option
from quotekit.quotes import read_file_paced

from ..common import delay_option, fgcolor_option, light_mode_option


def register(parent: Command, *, file_option: Optional[Option] = None) -> Command:
    """Add ``read`` under ``parent``.

    Pass ``file_option`` when no ancestor already provides a global ``--file``.
    """
    read = Command("read", "Read and display the file.")
    if file_option is not None:
        read.declare_option(file_option)
    read.declare_option(delay_option())
    read.declare_option(fgcolor_option())
    read.declare_option(light_mode_option())
    read.bind_action(read_file_paced, "file", "delay", "fgcolor", "light_mode")
    return parent.add_child(read)
