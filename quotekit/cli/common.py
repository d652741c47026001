from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

from quotekit import __description__, __version__
from quotekit.configuration import get_config
from quotekit.grammar import Kind, Option, Rejection, reject
from quotekit.logging import console
from quotekit.ui import ConsoleColor

ROOT_COMMAND = "quotekit"
ROOT_DESCRIPTION = __description__ or "Read, add and delete quotes in a text file."

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

COMMAND_ALIASES = {
    "insert": "add",
}


def parse_existing_file(tokens: Tuple[str, ...]) -> Union[Path, Rejection]:
    """Accept a path only if it names an existing file."""
    path = Path(tokens[-1])
    if not path.is_file():
        return reject("File does not exist")
    return path


def default_quotes_file() -> Path:
    return Path(get_config().cli.default_file)


def file_option(*, required: bool = True) -> Option:
    return Option(
        "--file",
        Kind.PATH,
        "The file to read and display on the console.",
        required=required,
    )


def quotes_file_option() -> Option:
    return Option(
        "--file",
        Kind.PATH,
        "A file of quotes; must already exist when given explicitly.",
        default_factory=default_quotes_file,
        parser=parse_existing_file,
        is_global=True,
    )


def delay_option() -> Option:
    return Option(
        "--delay",
        Kind.INT,
        "Delay between lines, specified as milliseconds per character in a line.",
        default_factory=lambda: get_config().cli.delay,
    )


def fgcolor_option() -> Option:
    return Option(
        "--fgcolor",
        Kind.ENUM,
        "Foreground color of text displayed on the console.",
        choices=ConsoleColor,
        default_factory=lambda: get_config().cli.foreground_color,
    )


def light_mode_option() -> Option:
    return Option(
        "--light-mode",
        Kind.FLAG,
        "Background color of text displayed on the console: "
        "default is black, light mode is white.",
    )


def search_terms_option() -> Option:
    return Option(
        "--search-terms",
        Kind.STRING,
        "Strings to search for when deleting entries.",
        required=True,
        multi_valued=True,
    )


def print_version() -> None:
    console.print(f"[bold]{ROOT_COMMAND}[/bold] [accent]v{__version__}[/]")
