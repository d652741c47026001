"""Completion helpers for partially typed command lines."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from quotekit.grammar import CommandTree, Kind
from quotekit.grammar.parser import split_attached

SUGGEST_DIRECTIVE = "[suggest]"


def suggest(tree: CommandTree, words: Sequence[str], incomplete: str = "") -> List[str]:
    """Return what may follow ``words``, filtered by the partial ``incomplete``.

    After an enum option the choices are offered; otherwise the subcommands
    and options visible to the deepest command named in ``words``.
    """
    command = tree.root
    for word in words:
        child = command.find_child(word)
        if child is not None:
            command = child
    scope = tree.scope(command)

    if words:
        option = scope.lookup(split_attached(words[-1])[0])
        if option is not None and option.kind is Kind.ENUM and option.choices:
            choices = [member.name for member in option.choices]
            return _match_candidates(choices, incomplete)

    candidates = [name for child in command.children for name in child.names]
    candidates.extend(sorted(scope.option_names()))
    return _match_candidates(dict.fromkeys(candidates), incomplete)


def _match_candidates(candidates: Iterable[str], needle: str) -> List[str]:
    term = (needle or "").lower()
    return [candidate for candidate in candidates if candidate.lower().startswith(term)]


__all__ = ["SUGGEST_DIRECTIVE", "suggest"]
