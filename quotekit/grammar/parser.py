"""Turn a token sequence into a bound invocation."""

from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import (
    ArgumentValidationError,
    ExtraArgumentsError,
    MissingArgumentError,
    MissingOptionError,
    OptionValidationError,
    UnknownOptionError,
)
from .model import FALSE_TOKENS, TRUE_TOKENS, Command, Kind, Option, Rejection
from .tree import HELP_TOKENS, VERSION_TOKEN, CommandTree, Scope

logger = logging.getLogger(__name__)

END_OF_OPTIONS = "--"
ATTACHED_SEPARATORS = ("=", ":")


@dataclass(frozen=True)
class BoundInvocation:
    """A matched command together with its resolved values."""

    command: Command
    options: Mapping[str, Any] = field(default_factory=dict)
    arguments: Tuple[Tuple[str, Any], ...] = ()
    help_requested: bool = False
    version_requested: bool = False

    @property
    def path(self) -> Tuple[str, ...]:
        return self.command.path

    def value(self, name: str) -> Any:
        if name in self.options:
            return self.options[name]
        for argument, value in self.arguments:
            if argument == name:
                return value
        raise KeyError(name)

    def values(self, names: Sequence[str]) -> Tuple[Any, ...]:
        return tuple(self.value(name) for name in names)


def is_option_token(token: str) -> bool:
    return len(token) > 1 and token.startswith("-")


def split_attached(token: str) -> Tuple[str, Optional[str]]:
    """Split ``--name=value`` / ``--name:value`` into name and value."""
    if not token.startswith("--"):
        return token, None
    for separator in ATTACHED_SEPARATORS:
        name, found, value = token.partition(separator)
        if found:
            return name, value
    return token, None


class Parser:
    """Match tokens against a sealed ``CommandTree``.

    Parsing happens in passes so that the class of error reported does not
    depend on token order: tokens are first matched to a command and
    classified (unknown options fail here), then option values are
    converted and validated, then defaults and required options are
    resolved, and finally positional tokens are bound to arguments.
    """

    def __init__(self, tree: CommandTree):
        self.tree = tree

    def parse(self, tokens: Sequence[str]) -> BoundInvocation:
        command, remaining = self._match(list(tokens))
        logger.debug(
            "matched command '%s' with tokens %s", command.display_name, remaining
        )
        directives = _directive_tokens(remaining)
        if any(token in HELP_TOKENS for token in directives):
            return BoundInvocation(command=command, help_requested=True)
        if command is self.tree.root and VERSION_TOKEN in directives:
            return BoundInvocation(command=command, version_requested=True)

        scope = self.tree.scope(command)
        occurrences, positionals = self._classify(scope, remaining)
        options = self._resolve_options(scope, occurrences)
        arguments = self._bind_arguments(command, positionals)
        return BoundInvocation(
            command=command,
            options=MappingProxyType(options),
            arguments=arguments,
        )

    def _match(self, tokens: List[str]) -> Tuple[Command, List[str]]:
        command = self.tree.root
        remaining: List[str] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token == END_OF_OPTIONS:
                break
            child = command.find_child(token)
            if child is not None:
                command = child
                index += 1
                continue
            if not is_option_token(token):
                break
            name, attached = split_attached(token)
            scope = self.tree.scope(command)
            option = scope.lookup(name)
            if option is None:
                break
            width = 1
            if attached is None:
                width += _value_width(scope, option, tokens, index + 1)
            remaining.extend(tokens[index : index + width])
            index += width
        remaining.extend(tokens[index:])
        return command, remaining

    def _classify(
        self, scope: Scope, tokens: List[str]
    ) -> Tuple[List[Tuple[Option, List[str]]], List[str]]:
        occurrences: List[Tuple[Option, List[str]]] = []
        positionals: List[str] = []
        only_positionals = False
        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1
            if only_positionals or not is_option_token(token):
                positionals.append(token)
                continue
            if token == END_OF_OPTIONS:
                only_positionals = True
                continue
            name, attached = split_attached(token)
            option = scope.lookup(name)
            if option is None:
                raise UnknownOptionError(token, _suggest(name, scope.option_names()))
            if attached is not None:
                occurrences.append((option, [attached]))
                continue
            width = _value_width(scope, option, tokens, index)
            occurrences.append((option, tokens[index : index + width]))
            index += width
        return occurrences, positionals

    def _resolve_options(
        self, scope: Scope, occurrences: List[Tuple[Option, List[str]]]
    ) -> Dict[str, Any]:
        supplied: Dict[str, List[str]] = {}
        for option, raw in occurrences:
            if option.multi_valued:
                supplied.setdefault(option.dest, []).extend(raw)
            else:
                supplied[option.dest] = list(raw)

        values: Dict[str, Any] = {}
        for option in scope.options:
            if option.dest in supplied:
                values[option.dest] = _convert_option(option, supplied[option.dest])
        for option in scope.options:
            if option.dest in values:
                continue
            if option.required and not option.has_default:
                raise MissingOptionError(option.name, scope.command.display_name)
            values[option.dest] = option.resolve_default()
        return values

    def _bind_arguments(
        self, command: Command, positionals: List[str]
    ) -> Tuple[Tuple[str, Any], ...]:
        declared = command.arguments
        required = [argument for argument in declared if argument.required]
        if len(positionals) < len(required):
            missing = required[len(positionals)]
            raise MissingArgumentError(missing.name, command.display_name)
        if len(positionals) > len(declared):
            extra = positionals[len(declared) :]
            child_names = [name for child in command.children for name in child.names]
            raise ExtraArgumentsError(extra, _suggest(extra[0], child_names))

        bound: List[Tuple[str, Any]] = []
        for position, argument in enumerate(declared):
            if position >= len(positionals):
                bound.append((argument.name, argument.default))
                continue
            token = positionals[position]
            try:
                bound.append((argument.name, argument.convert(token)))
            except ValueError as exc:
                raise ArgumentValidationError(
                    argument.name,
                    f"Cannot parse argument '{token}' for '{argument.name}' as "
                    f"expected type '{argument.kind.value}'.",
                ) from exc
        return tuple(bound)


def _directive_tokens(tokens: List[str]) -> List[str]:
    if END_OF_OPTIONS in tokens:
        return tokens[: tokens.index(END_OF_OPTIONS)]
    return tokens


def _value_width(scope: Scope, option: Option, tokens: List[str], start: int) -> int:
    """Number of tokens after ``start`` that belong to ``option``."""
    if start >= len(tokens):
        return 0
    following = tokens[start]
    if option.kind is Kind.FLAG:
        return 1 if following.lower() in TRUE_TOKENS + FALSE_TOKENS else 0
    if not option.multi_valued:
        if following == END_OF_OPTIONS or following in HELP_TOKENS:
            return 0
        if scope.lookup(split_attached(following)[0]) is not None:
            return 0
        return 1
    width = 0
    for token in tokens[start:]:
        if token == END_OF_OPTIONS or token in HELP_TOKENS:
            break
        if scope.lookup(split_attached(token)[0]) is not None:
            break
        width += 1
    return width


def _convert_option(option: Option, raw: List[str]) -> Any:
    if option.kind is Kind.FLAG and option.parser is None:
        return option.convert(raw[-1]) if raw else True
    if not raw and option.kind is not Kind.FLAG:
        raise OptionValidationError(
            option.name, f"Required argument missing for option: '{option.name}'."
        )
    if option.parser is not None:
        result = option.parser(tuple(raw))
        if isinstance(result, Rejection):
            raise OptionValidationError(option.name, result.message)
        return result
    converted = []
    for token in raw:
        try:
            converted.append(option.convert(token))
        except ValueError as exc:
            expected = option.kind.value
            if option.choices is not None:
                expected = ", ".join(member.name for member in option.choices)
            raise OptionValidationError(
                option.name,
                f"Cannot parse argument '{token}' for option '{option.name}' as "
                f"expected type '{expected}'.",
            ) from exc
    return converted if option.multi_valued else converted[0]


def _suggest(token: str, candidates: Sequence[str]) -> List[str]:
    return difflib.get_close_matches(token, list(candidates), n=3, cutoff=0.6)
