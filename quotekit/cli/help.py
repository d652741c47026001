"""Help text rendering and formatting for the CLI.

This module handles help display for any command in a sealed tree:
- Usage line derived from the command path, arguments and children
- Argument, option and subcommand tables with aliases
- Default values resolved the same way the parser resolves them
"""

from __future__ import annotations

import enum
from typing import Iterable, List, Sequence, Tuple

from rich.table import Table
from rich.text import Text

from quotekit import ui
from quotekit.grammar import Argument, Command, CommandTree, Kind, Option
from quotekit.grammar.tree import HELP_TOKENS, VERSION_TOKEN
from quotekit.logging import PALETTE, console

Row = Tuple[str, ...]


def show_command_help(tree: CommandTree, command: Command) -> None:
    if command.description:
        console.print(Text(command.description))
        console.print()
    console.print("[section]Usage[/section]")
    console.print(Text(f"  {usage_line(command)}"))
    arguments = argument_help_rows(command)
    if arguments:
        console.print()
        console.print("[section]Arguments[/section]")
        console.print(build_help_table(arguments))
    console.print()
    console.print("[section]Options[/section]")
    console.print(build_help_table(option_help_rows(tree, command)))
    commands = command_help_rows(command)
    if commands:
        console.print()
        console.print("[section]Commands[/section]")
        console.print(build_command_table(commands))


def usage_line(command: Command) -> str:
    parts = list(command.path)
    parts.extend(format_argument_hint(argument) for argument in command.arguments)
    parts.append("[options]")
    if command.children:
        parts.append("[command]")
    return " ".join(parts)


def build_help_table(
    rows: Iterable[Row],
    *,
    column_styles: Sequence[dict[str, object]] | None = None,
) -> Table:
    table = ui.themed_grid(padding=(0, 3))
    styles = column_styles or (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    for column in styles:
        table.add_column(**column)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    return table


def build_command_table(rows: Iterable[Row]) -> Table:
    column_styles = (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": f"bold {PALETTE['cyan']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    return build_help_table(rows, column_styles=column_styles)


def argument_help_rows(command: Command) -> List[Row]:
    rows = []
    for argument in command.arguments:
        state = "" if argument.required else "optional"
        rows.append((format_argument_hint(argument), state, argument.description))
    return rows


def option_help_rows(tree: CommandTree, command: Command) -> List[Row]:
    rows = []
    for option in tree.scope(command).options:
        label = option.name
        metavar = option_metavar(option)
        if metavar:
            label = f"{label} {metavar}"
        description = option.description
        if option.choices is not None:
            names = ", ".join(member.name for member in option.choices)
            description = f"{description} Choices: {names}."
        hint = default_hint(option)
        if hint:
            description = f"{description} {hint}".strip()
        rows.append((label, ", ".join(option.aliases), description))
    rows.append((", ".join(HELP_TOKENS), "", "Show help and usage information."))
    if command.parent is None:
        rows.append((VERSION_TOKEN, "", "Show version information."))
    return rows


def command_help_rows(command: Command) -> List[Row]:
    rows = []
    for child in command.children:
        alias_text = ", ".join(child.aliases)
        hint = command_param_hint(child)
        rows.append((child.name, alias_text, hint, child.description))
    return rows


def command_param_hint(command: Command) -> str:
    if command.arguments:
        return format_argument_hint(command.arguments[0])
    for option in command.options:
        if option.required:
            return option.name
    return ""


def format_argument_hint(argument: Argument) -> str:
    normalized = argument.name.replace("_", " ").strip()
    normalized = normalized.replace(" ", "-").upper()
    return f"<{normalized}>"


def option_metavar(option: Option) -> str:
    if option.kind is Kind.FLAG:
        return ""
    metavar = f"<{option.dest.upper()}>"
    if option.multi_valued:
        metavar = f"{metavar}..."
    return metavar


def default_hint(option: Option) -> str:
    if option.required and not option.has_default:
        return "(REQUIRED)"
    if not option.has_default:
        return ""
    value = option.resolve_default()
    if isinstance(value, enum.Enum):
        value = value.name
    return f"[default: {value}]"
