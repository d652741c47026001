from __future__ import annotations

from pathlib import Path

import pytest

from quotekit.cli import build_tree, main, run
from quotekit.cli.common import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from quotekit.configuration import ConfigurationError


def _invoke(tree, args, capsys):
    code = run(tree, args)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_add_then_read(quotes_tree, workdir, capsys, sleeps):
    Path("sampleQuotes.txt").write_text("", encoding="utf-8")

    code, out, _ = _invoke(quotes_tree, ["quotes", "add", "hello", "author"], capsys)
    assert code == EXIT_OK
    assert out.strip() == "Adding to file"

    code, out, _ = _invoke(quotes_tree, ["quotes", "read", "--delay", "0"], capsys)
    assert code == EXIT_OK
    assert out.splitlines() == ["", "", "hello", "", "-author"]


def test_delete_then_read_omits_term(quotes_tree, workdir, capsys, sleeps):
    _invoke(quotes_tree, ["quotes", "add", "hello", "author"], capsys)
    _invoke(quotes_tree, ["quotes", "add", "goodbye", "someone"], capsys)

    code, out, _ = _invoke(
        quotes_tree, ["quotes", "delete", "--search-terms", "hello", "nothing"], capsys
    )
    assert code == EXIT_OK
    assert out.strip() == "Deleting from file"

    _, out, _ = _invoke(quotes_tree, ["quotes", "read"], capsys)
    assert "hello" not in out
    assert "goodbye" in out
    assert "-author" in out


def test_delete_dash_prefixed_byline(quotes_tree, workdir, capsys, sleeps):
    _invoke(quotes_tree, ["quotes", "add", "hello", "author"], capsys)

    code, _, err = _invoke(
        quotes_tree, ["quotes", "delete", "--search-terms", "-author"], capsys
    )
    assert code == EXIT_OK
    assert err == ""
    assert (workdir / "sampleQuotes.txt").read_text(encoding="utf-8") == "\n\nhello\n\n"


def test_insert_alias_adds(quotes_tree, workdir, capsys):
    code, _, _ = _invoke(quotes_tree, ["quotes", "insert", "q", "b"], capsys)

    assert code == EXIT_OK
    assert (workdir / "sampleQuotes.txt").read_text(encoding="utf-8") == "\n\nq\n\n-b\n"


def test_global_file_option_from_every_leaf(quotes_tree, workdir, capsys, sleeps):
    target = workdir / "mine.txt"
    target.write_text("keep\ndrop\n", encoding="utf-8")

    assert run(quotes_tree, ["quotes", "add", "q", "b", "--file", str(target)]) == EXIT_OK
    assert run(quotes_tree, ["--file", str(target), "quotes", "delete", "--search-terms", "drop"]) == EXIT_OK
    capsys.readouterr()
    assert run(quotes_tree, ["quotes", "read", "--file", str(target)]) == EXIT_OK

    assert capsys.readouterr().out.splitlines() == ["keep", "", "", "q", "", "-b"]
    assert not (workdir / "sampleQuotes.txt").exists()


def test_read_sleeps_default_delay(quotes_tree, workdir, capsys, sleeps):
    (workdir / "sampleQuotes.txt").write_text("hello\n", encoding="utf-8")

    assert run(quotes_tree, ["quotes", "read"]) == EXIT_OK
    assert sleeps == [pytest.approx(0.21)]

    assert run(quotes_tree, ["quotes", "read", "--delay", "100"]) == EXIT_OK
    assert sleeps[-1] == pytest.approx(0.5)


def test_missing_file_is_rejected_before_action(quotes_tree, workdir, capsys):
    code, out, err = _invoke(
        quotes_tree, ["quotes", "add", "q", "b", "--file", "nope.txt"], capsys
    )

    assert code == EXIT_USAGE
    assert out == ""
    assert "File does not exist" in err
    assert not (workdir / "nope.txt").exists()


def test_required_search_terms(quotes_tree, workdir, capsys):
    (workdir / "sampleQuotes.txt").write_text("keep\n", encoding="utf-8")

    code, out, err = _invoke(quotes_tree, ["quotes", "delete"], capsys)

    assert code == EXIT_USAGE
    assert out == ""
    assert "--search-terms" in err
    assert (workdir / "sampleQuotes.txt").read_text(encoding="utf-8") == "keep\n"


def test_missing_argument_writes_nothing(quotes_tree, workdir, capsys):
    code, out, err = _invoke(quotes_tree, ["quotes", "add", "only-quote"], capsys)

    assert code == EXIT_USAGE
    assert out == ""
    assert "byline" in err
    assert not (workdir / "sampleQuotes.txt").exists()


def test_unknown_option_reports_error(quotes_tree, workdir, capsys):
    code, out, err = _invoke(quotes_tree, ["quotes", "read", "--colour", "Red"], capsys)

    assert code == EXIT_USAGE
    assert out == ""
    assert "Unrecognized option '--colour'" in err


def test_read_of_default_missing_file_is_action_error(quotes_tree, workdir, capsys):
    code, out, err = _invoke(quotes_tree, ["quotes", "read"], capsys)

    assert code == EXIT_FAILURE
    assert "sampleQuotes.txt" in err


def test_group_without_subcommand(quotes_tree, capsys):
    code, _, err = _invoke(quotes_tree, ["quotes"], capsys)

    assert code == EXIT_FAILURE
    assert "Required command was not provided" in err
    assert "quotekit quotes --help" in err


def test_root_layout_prints_file(root_tree, workdir, capsys):
    (workdir / "notes.txt").write_text("one\ntwo\n", encoding="utf-8")

    code, out, _ = _invoke(root_tree, ["--file", "notes.txt"], capsys)

    assert code == EXIT_OK
    assert out.splitlines() == ["one", "two"]


def test_root_layout_requires_file(root_tree, capsys):
    code, out, err = _invoke(root_tree, [], capsys)

    assert code == EXIT_USAGE
    assert out == ""
    assert "--file" in err


def test_read_layout(read_tree, workdir, capsys, sleeps):
    (workdir / "notes.txt").write_text("abc\n", encoding="utf-8")

    code, out, _ = _invoke(
        read_tree,
        ["read", "--file", "notes.txt", "--delay", "1", "--fgcolor", "cyan", "--light-mode"],
        capsys,
    )

    assert code == EXIT_OK
    assert out.splitlines() == ["abc"]
    assert sleeps == [pytest.approx(0.003)]


def test_read_layout_has_no_quotes_group(read_tree, capsys):
    code, _, err = _invoke(read_tree, ["quotes", "read"], capsys)

    assert code == EXIT_USAGE
    assert "quotes" in err


def test_read_layout_missing_file_is_action_error(read_tree, workdir, capsys):
    code, _, err = _invoke(read_tree, ["read", "--file", "absent.txt"], capsys)

    assert code == EXIT_FAILURE
    assert "absent.txt" in err


def test_version_flag(quotes_tree, capsys):
    code, out, _ = _invoke(quotes_tree, ["--version"], capsys)

    assert code == EXIT_OK
    assert "quotekit" in out


def test_suggest_directive(quotes_tree, capsys):
    code, out, _ = _invoke(quotes_tree, ["[suggest]", "quotes", "d"], capsys)

    assert code == EXIT_OK
    assert out.splitlines() == ["delete"]


def test_build_tree_rejects_unknown_layout():
    with pytest.raises(ConfigurationError):
        build_tree("sideways")


def test_main_uses_configured_layout(tmp_path, monkeypatch, workdir, capsys):
    config = tmp_path / "quotekit.toml"
    config.write_text('[cli]\nlayout = "root"\n', encoding="utf-8")
    monkeypatch.setenv("QUOTEKIT_CONFIG", str(config))
    (workdir / "notes.txt").write_text("from root layout\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--file", "notes.txt"])

    assert excinfo.value.code == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["from root layout"]


def test_main_reports_invalid_config(tmp_path, monkeypatch, capsys):
    config = tmp_path / "quotekit.toml"
    config.write_text("[cli]\ndelay = -1\n", encoding="utf-8")
    monkeypatch.setenv("QUOTEKIT_CONFIG", str(config))

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == EXIT_FAILURE
    assert "Invalid configuration" in capsys.readouterr().err
