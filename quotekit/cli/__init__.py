"""Command-line entry points.

``run`` parses a token list against a sealed tree, renders help, version and
suggestions, dispatches the matched action and maps every outcome to an exit
code. ``main`` picks the layout from configuration; ``main_root``,
``main_read`` and ``main_quotes`` pin one layout each.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, Sequence

from rich.markup import escape

from quotekit.configuration import ConfigurationError, get_config
from quotekit.grammar import (
    ActionError,
    CommandTree,
    NoHandlerError,
    ParseError,
    Parser,
    dispatch,
)
from quotekit.logging import configure_logging, console, err_console

from .commands import build_quotes_layout, build_read_layout, build_root_layout
from .common import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, print_version
from .completions import SUGGEST_DIRECTIVE, suggest
from .help import show_command_help
from .type_defs import LayoutBuilder

logger = logging.getLogger(__name__)

LAYOUTS: Dict[str, LayoutBuilder] = {
    "root": build_root_layout,
    "read": build_read_layout,
    "quotes": build_quotes_layout,
}


def build_tree(layout: str) -> CommandTree:
    try:
        builder = LAYOUTS[layout]
    except KeyError:
        raise ConfigurationError(f"Unknown layout '{layout}'.") from None
    return CommandTree(builder())


def run(tree: CommandTree, argv: Optional[Sequence[str]] = None) -> int:
    """Parse ``argv`` against ``tree`` and run the matched action."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    debug = get_config().cli.debug

    if tokens and tokens[0] == SUGGEST_DIRECTIVE:
        words = tokens[1:]
        incomplete = words.pop() if words else ""
        for candidate in suggest(tree, words, incomplete):
            console.print(candidate, markup=False, highlight=False)
        return EXIT_OK

    try:
        invocation = Parser(tree).parse(tokens)
    except ParseError as exc:
        logger.debug("parse failed", exc_info=True)
        err_console.print(f"[error]{escape(str(exc))}[/]", soft_wrap=True)
        return EXIT_USAGE

    if invocation.version_requested:
        print_version()
        return EXIT_OK
    if invocation.help_requested:
        show_command_help(tree, invocation.command)
        return EXIT_OK

    try:
        dispatch(invocation)
    except NoHandlerError as exc:
        err_console.print(f"[error]{escape(str(exc))}[/]", soft_wrap=True)
        hint = f"{invocation.command.display_name} --help"
        err_console.print(
            f"[muted]Run '{escape(hint)}' to see the available commands.[/]",
            soft_wrap=True,
        )
        return EXIT_FAILURE
    except ActionError as exc:
        err_console.print(f"[error]{escape(str(exc))}[/]", soft_wrap=True)
        if debug:
            err_console.print_exception()
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None, layout: Optional[str] = None) -> None:
    try:
        config = get_config()
        configure_logging(config.cli.debug)
        tree = build_tree(layout or config.cli.layout)
    except ConfigurationError as exc:
        err_console.print(f"[error]{escape(str(exc))}[/]", soft_wrap=True)
        sys.exit(EXIT_FAILURE)
    sys.exit(run(tree, argv))


def main_root() -> None:
    main(layout="root")


def main_read() -> None:
    main(layout="read")


def main_quotes() -> None:
    main(layout="quotes")


__all__ = [
    "LAYOUTS",
    "build_tree",
    "main",
    "main_quotes",
    "main_read",
    "main_root",
    "run",
]
