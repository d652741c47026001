from __future__ import annotations

import quotekit.cli.completions as cli_completions


def test_root_suggestions_include_group_and_global_option(quotes_tree):
    result = cli_completions.suggest(quotes_tree, [])

    assert result == ["quotes", "--file"]


def test_subcommand_suggestions_include_aliases(quotes_tree):
    result = cli_completions.suggest(quotes_tree, ["quotes"], "")

    assert result[:4] == ["read", "delete", "add", "insert"]


def test_leaf_option_suggestions_filter_partial(quotes_tree):
    result = cli_completions.suggest(quotes_tree, ["quotes", "read"], "--f")

    assert result == ["--fgcolor", "--file"]


def test_enum_option_offers_choices(quotes_tree):
    result = cli_completions.suggest(quotes_tree, ["quotes", "read", "--fgcolor"], "dark")

    assert result[0] == "DarkBlue"
    assert all(name.startswith("Dark") for name in result)


def test_unknown_words_are_ignored(quotes_tree):
    result = cli_completions.suggest(quotes_tree, ["nope", "quotes"], "a")

    assert result == ["add"]
