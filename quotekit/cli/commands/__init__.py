"""Command registration for the three command-tree layouts."""

from __future__ import annotations

from quotekit.grammar import Command
from quotekit.quotes import read_file

from . import quotes, read
from ..common import (
    ROOT_COMMAND,
    ROOT_DESCRIPTION,
    file_option,
    quotes_file_option,
)


def build_root_layout() -> Command:
    """A single root command that prints ``--file``."""
    root = Command(ROOT_COMMAND, ROOT_DESCRIPTION)
    root.declare_option(file_option())
    root.bind_action(read_file, "file")
    return root


def build_read_layout() -> Command:
    """A root with one ``read`` subcommand owning its own ``--file``."""
    root = Command(ROOT_COMMAND, ROOT_DESCRIPTION)
    read.register(root, file_option=file_option())
    return root


def build_quotes_layout() -> Command:
    """A root with a global ``--file`` and the ``quotes`` command group."""
    root = Command(ROOT_COMMAND, ROOT_DESCRIPTION)
    root.declare_option(quotes_file_option())
    quotes.register(root)
    return root


__all__ = ["build_quotes_layout", "build_read_layout", "build_root_layout"]
