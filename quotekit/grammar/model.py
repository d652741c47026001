"""Declarations for commands, options and positional arguments."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Type, Union

from .errors import (
    ArgumentOrderError,
    DuplicateNameError,
    DuplicateOptionError,
    SealedCommandError,
)


class Kind(str, enum.Enum):
    """Semantic type of an option or argument value."""

    STRING = "string"
    INT = "int"
    PATH = "path"
    FLAG = "flag"
    ENUM = "enum"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

TRUE_TOKENS = ("true",)
FALSE_TOKENS = ("false",)


@dataclass(frozen=True)
class Rejection:
    """Returned by a custom option parser to refuse its tokens."""

    message: str


def reject(message: str) -> Rejection:
    return Rejection(message)


OptionParser = Callable[[Tuple[str, ...]], Any]
Action = Callable[..., Any]


def convert_token(
    kind: Kind, token: str, choices: Optional[Type[enum.Enum]] = None
) -> Any:
    """Convert a raw token to ``kind``; raises ``ValueError`` on failure."""
    if kind is Kind.STRING:
        return token
    if kind is Kind.INT:
        return int(token)
    if kind is Kind.PATH:
        return Path(token)
    if kind is Kind.FLAG:
        lowered = token.lower()
        if lowered in TRUE_TOKENS:
            return True
        if lowered in FALSE_TOKENS:
            return False
        raise ValueError(token)
    if kind is Kind.ENUM and choices is not None:
        lowered = token.lower()
        for member in choices:
            if member.name.lower() == lowered:
                return member
        raise ValueError(token)
    raise ValueError(f"cannot convert {token!r} to {kind.value}")


@dataclass(frozen=True)
class Option:
    """A named input such as ``--delay 10``."""

    name: str
    kind: Kind = Kind.STRING
    description: str = ""
    aliases: Tuple[str, ...] = ()
    default: Any = MISSING
    default_factory: Optional[Callable[[], Any]] = None
    parser: Optional[OptionParser] = None
    required: bool = False
    multi_valued: bool = False
    is_global: bool = False
    choices: Optional[Type[enum.Enum]] = None

    def __post_init__(self) -> None:
        for name in self.names:
            if len(name) < 2 or not name.startswith("-"):
                raise ValueError(f"option names must start with '-': {name!r}")
        if self.kind is Kind.ENUM and self.choices is None:
            raise ValueError(f"enum option {self.name} needs choices")
        if self.default is not MISSING and self.default_factory is not None:
            raise ValueError(f"option {self.name} has both default and default_factory")
        if self.kind is Kind.FLAG and self.multi_valued:
            raise ValueError(f"flag option {self.name} cannot be multi-valued")

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name, *self.aliases)

    @property
    def dest(self) -> str:
        """Key under which the resolved value is bound."""
        return self.name.lstrip("-").replace("-", "_")

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not None

    def resolve_default(self) -> Any:
        """Value used when the option is absent; factories run only here."""
        if self.default_factory is not None:
            return self.default_factory()
        if self.default is not MISSING:
            return self.default
        if self.kind is Kind.FLAG:
            return False
        if self.multi_valued:
            return []
        return None

    def convert(self, token: str) -> Any:
        return convert_token(self.kind, token, self.choices)


@dataclass(frozen=True)
class Argument:
    """A positional input bound in declaration order."""

    name: str
    kind: Kind = Kind.STRING
    description: str = ""
    required: bool = True
    default: Any = None
    choices: Optional[Type[enum.Enum]] = None

    def __post_init__(self) -> None:
        if self.kind is Kind.FLAG:
            raise ValueError(f"argument {self.name} cannot be a flag")
        if self.kind is Kind.ENUM and self.choices is None:
            raise ValueError(f"enum argument {self.name} needs choices")

    def convert(self, token: str) -> Any:
        return convert_token(self.kind, token, self.choices)


class Command:
    """A node in the command tree.

    A command with children routes to them; a command with an action is a
    leaf. Declarations are only accepted until the owning tree is sealed.
    """

    def __init__(
        self, name: str, description: str = "", *, aliases: Sequence[str] = ()
    ):
        self.name = name
        self.description = description
        self.parent: Optional[Command] = None
        self.action: Optional[Action] = None
        self.needs: Tuple[str, ...] = ()
        self._aliases: List[str] = []
        self._options: List[Option] = []
        self._arguments: List[Argument] = []
        self._children: List[Command] = []
        self._sealed = False
        for alias in aliases:
            self.add_alias(alias)

    def __repr__(self) -> str:
        return f"Command({' '.join(self.path)!r})"

    @property
    def aliases(self) -> Tuple[str, ...]:
        return tuple(self._aliases)

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name, *self._aliases)

    @property
    def options(self) -> Tuple[Option, ...]:
        return tuple(self._options)

    @property
    def arguments(self) -> Tuple[Argument, ...]:
        return tuple(self._arguments)

    @property
    def children(self) -> Tuple["Command", ...]:
        return tuple(self._children)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def path(self) -> Tuple[str, ...]:
        names = [command.name for command in self.lineage()]
        return tuple(reversed(names))

    @property
    def display_name(self) -> str:
        return " ".join(self.path)

    def lineage(self) -> Iterator["Command"]:
        """Yield this command followed by each ancestor up to the root."""
        current: Optional[Command] = self
        while current is not None:
            yield current
            current = current.parent

    def walk(self) -> Iterator["Command"]:
        """Yield this command and all descendants depth-first."""
        yield self
        for child in self._children:
            yield from child.walk()

    def find_child(self, token: str) -> Optional["Command"]:
        for child in self._children:
            if token in child.names:
                return child
        return None

    def visible_options(self) -> List[Option]:
        """Own options followed by global options inherited from ancestors."""
        visible = list(self._options)
        for ancestor in list(self.lineage())[1:]:
            visible.extend(option for option in ancestor._options if option.is_global)
        return visible

    def declare_option(
        self, option: Union[Option, str], kind: Kind = Kind.STRING, **settings: Any
    ) -> Option:
        """Register an option on this command and return it."""
        self._ensure_mutable()
        if isinstance(option, str):
            option = Option(option, kind, **settings)
        taken = {name for known in self.visible_options() for name in known.names}
        if option.is_global:
            for descendant in list(self.walk())[1:]:
                for known in descendant._options:
                    taken.update(known.names)
        for name in option.names:
            if name in taken:
                raise DuplicateOptionError(
                    f"Option '{name}' is already declared in the scope of "
                    f"'{self.display_name}'."
                )
        self._options.append(option)
        return option

    def declare_argument(
        self,
        argument: Union[Argument, str],
        kind: Kind = Kind.STRING,
        required: bool = True,
        **settings: Any,
    ) -> Argument:
        """Append a positional argument; required arguments must come first."""
        self._ensure_mutable()
        if isinstance(argument, str):
            argument = Argument(argument, kind, required=required, **settings)
        if any(existing.name == argument.name for existing in self._arguments):
            raise DuplicateNameError(
                f"Argument '{argument.name}' is already declared on "
                f"'{self.display_name}'."
            )
        optional_declared = any(not existing.required for existing in self._arguments)
        if argument.required and optional_declared:
            raise ArgumentOrderError(
                f"Required argument '{argument.name}' cannot follow an optional "
                f"argument on '{self.display_name}'."
            )
        self._arguments.append(argument)
        return argument

    def add_child(self, child: "Command") -> "Command":
        self._ensure_mutable()
        if child.parent is not None:
            raise DuplicateNameError(
                f"Command '{child.name}' already belongs to "
                f"'{child.parent.display_name}'."
            )
        for name in child.names:
            if self.find_child(name) is not None:
                raise DuplicateNameError(
                    f"Command name '{name}' is already used under "
                    f"'{self.display_name}'."
                )
        child.parent = self
        self._children.append(child)
        return child

    def add_alias(self, alias: str) -> None:
        self._ensure_mutable()
        if alias in self.names:
            raise DuplicateNameError(
                f"'{alias}' is already a name of '{self.display_name}'."
            )
        if self.parent is not None and self.parent.find_child(alias) is not None:
            raise DuplicateNameError(
                f"Alias '{alias}' collides with a command under "
                f"'{self.parent.display_name}'."
            )
        self._aliases.append(alias)

    def bind_action(self, action: Action, *needs: str) -> Action:
        """Attach ``action``; it receives the values named in ``needs`` in order."""
        self._ensure_mutable()
        self.action = action
        self.needs = tuple(needs)
        return action

    def _seal(self) -> None:
        self._sealed = True

    def _ensure_mutable(self) -> None:
        if self._sealed:
            raise SealedCommandError(f"Command '{self.display_name}' is sealed.")
