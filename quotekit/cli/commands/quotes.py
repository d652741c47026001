"""Quotes command group for reading, deleting and adding entries."""

from __future__ import annotations

from quotekit.grammar import Command
from quotekit.quotes import add_to_file, delete_from_file

from . import read
from ..common import COMMAND_ALIASES, search_terms_option


def _aliases_for(canonical: str) -> list[str]:
    return sorted(
        alias for alias, target in COMMAND_ALIASES.items() if target == canonical
    )


def register(parent: Command) -> Command:
    """Register the quotes group and its subcommands.

    ``--file`` is expected as a global option on ``parent``.
    """
    group = Command("quotes", "Work with a file that contains quotes.")
    read.register(group)

    delete = Command("delete", "Delete lines from the file.")
    delete.declare_option(search_terms_option())
    delete.bind_action(delete_from_file, "file", "search_terms")
    group.add_child(delete)

    add = Command("add", "Add an entry to the file.", aliases=_aliases_for("add"))
    add.declare_argument("quote", description="Text of quote.")
    add.declare_argument("byline", description="Byline of quote.")
    add.bind_action(add_to_file, "file", "quote", "byline")
    group.add_child(add)

    return parent.add_child(group)
