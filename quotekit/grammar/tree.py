"""Sealing a declared command hierarchy into an immutable tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import BindingError, DuplicateNameError, DuplicateOptionError
from .model import Argument, Command, Option

logger = logging.getLogger(__name__)

HELP_TOKENS: Tuple[str, ...] = ("-h", "--help", "-?")
VERSION_TOKEN = "--version"


@dataclass(frozen=True)
class Scope:
    """Options and arguments a command can bind, computed once at seal time."""

    command: Command
    options: Tuple[Option, ...]
    arguments: Tuple[Argument, ...]
    tokens: Mapping[str, Option]

    def lookup(self, token: str) -> Optional[Option]:
        return self.tokens.get(token)

    def option_names(self) -> List[str]:
        return list(self.tokens)

    def bindable_names(self) -> List[str]:
        names = [option.dest for option in self.options]
        names.extend(argument.name for argument in self.arguments)
        return names


class CommandTree:
    """A sealed command hierarchy rooted at ``root``.

    Sealing computes every command's effective option scope (its own options
    plus the global options of its ancestors), validates the names each
    bound action needs, and freezes all commands against further changes.
    """

    def __init__(self, root: Command):
        if root.parent is not None:
            raise DuplicateNameError(f"'{root.display_name}' is not a root command.")
        self.root = root
        scopes: Dict[Command, Scope] = {}
        for command in root.walk():
            scope = _build_scope(command)
            _check_binding(command, scope)
            scopes[command] = scope
        self._scopes = scopes
        for command in root.walk():
            command._seal()
        logger.debug(
            "sealed command tree '%s' with %d commands", root.name, len(scopes)
        )

    def scope(self, command: Command) -> Scope:
        return self._scopes[command]

    def commands(self) -> Iterator[Command]:
        return self.root.walk()

    def find(self, *path: str) -> Command:
        """Return the command reached by walking ``path`` names from the root."""
        command = self.root
        for name in path:
            child = command.find_child(name)
            if child is None:
                raise KeyError(" ".join((self.root.name, *path)))
            command = child
        return command


def _build_scope(command: Command) -> Scope:
    tokens: Dict[str, Option] = {}
    dests: Dict[str, Option] = {}
    reserved = set(HELP_TOKENS)
    if command.parent is None:
        reserved.add(VERSION_TOKEN)
    options = command.visible_options()
    for option in options:
        for name in option.names:
            if name in tokens or name in reserved:
                raise DuplicateOptionError(
                    f"Option '{name}' is declared more than once in the scope of "
                    f"'{command.display_name}'."
                )
            tokens[name] = option
        if option.dest in dests:
            raise DuplicateOptionError(
                f"Options '{dests[option.dest].name}' and '{option.name}' bind "
                f"the same value '{option.dest}' on '{command.display_name}'."
            )
        dests[option.dest] = option
    for argument in command.arguments:
        if argument.name in dests:
            raise DuplicateNameError(
                f"Argument '{argument.name}' shadows option "
                f"'{dests[argument.name].name}' on '{command.display_name}'."
            )
    return Scope(
        command=command,
        options=tuple(options),
        arguments=command.arguments,
        tokens=MappingProxyType(tokens),
    )


def _check_binding(command: Command, scope: Scope) -> None:
    if command.action is None:
        return
    available = set(scope.bindable_names())
    for name in command.needs:
        if name not in available:
            raise BindingError(
                f"Action for '{command.display_name}' needs '{name}', which is not "
                f"declared in its scope."
            )
