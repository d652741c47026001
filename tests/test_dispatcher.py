from __future__ import annotations

import pytest

from quotekit.grammar import (
    ActionError,
    Command,
    CommandTree,
    Kind,
    MissingArgumentError,
    MissingOptionError,
    NoHandlerError,
    OptionValidationError,
    Parser,
    dispatch,
    reject,
)


def _tree(action, *needs):
    root = Command("app")
    root.declare_option("--file", Kind.PATH, is_global=True, required=True)
    leaf = root.add_child(Command("add"))
    leaf.declare_option("--count", Kind.INT, default=1)
    leaf.declare_option("--tag", parser=lambda tokens: reject("tags are closed"))
    leaf.declare_argument("quote")
    leaf.bind_action(action, *needs)
    return CommandTree(root)


def test_values_passed_in_declared_order():
    calls = []

    def action(quote, count, file):
        calls.append((quote, count, file))

    tree = _tree(action, "quote", "count", "file")

    invocation = Parser(tree).parse(["add", "hi", "--file", "q.txt", "--count", "3"])
    dispatch(invocation)

    assert len(calls) == 1
    quote, count, file = calls[0]
    assert (quote, count, str(file)) == ("hi", 3, "q.txt")


def test_action_result_is_returned():
    tree = _tree(lambda quote: quote.upper(), "quote")

    assert dispatch(Parser(tree).parse(["add", "hi", "--file", "q"])) == "HI"


def test_coroutine_action_runs_to_completion():
    seen = []

    async def action(quote):
        seen.append(quote)
        return len(quote)

    tree = _tree(action, "quote")

    assert dispatch(Parser(tree).parse(["add", "hello", "--file", "q"])) == 5
    assert seen == ["hello"]


@pytest.mark.parametrize(
    ("tokens", "error"),
    [
        (["add", "hi"], MissingOptionError),
        (["add", "--file", "q"], MissingArgumentError),
        (["add", "hi", "--file", "q", "--tag", "x"], OptionValidationError),
    ],
)
def test_parse_errors_never_reach_action(tokens, error):
    calls = []
    tree = _tree(lambda quote: calls.append(quote), "quote")

    with pytest.raises(error):
        dispatch(Parser(tree).parse(tokens))

    assert calls == []


def test_router_without_action_raises_no_handler():
    tree = _tree(lambda: None)

    with pytest.raises(NoHandlerError) as excinfo:
        dispatch(Parser(tree).parse(["--file", "q"]))

    assert excinfo.value.command == "app"


def test_action_failure_is_wrapped():
    def action(file):
        raise FileNotFoundError(2, "No such file or directory", str(file))

    tree = _tree(action, "file")

    with pytest.raises(ActionError) as excinfo:
        dispatch(Parser(tree).parse(["add", "hi", "--file", "missing.txt"]))

    assert excinfo.value.command == "app add"
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert excinfo.value.__cause__ is excinfo.value.cause


def test_async_action_failure_is_wrapped():
    async def action(quote):
        raise PermissionError("denied")

    tree = _tree(action, "quote")

    with pytest.raises(ActionError) as excinfo:
        dispatch(Parser(tree).parse(["add", "hi", "--file", "q"]))

    assert "denied" in str(excinfo.value)
