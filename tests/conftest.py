from __future__ import annotations

import pytest

from quotekit.cli import build_tree
from quotekit.configuration import loader as loader_module
from quotekit.configuration import clear_config_cache


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep user and repository configuration files out of every test."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.delenv("QUOTEKIT_CONFIG", raising=False)
    monkeypatch.setattr(loader_module, "detect_repo_root", lambda: None)

    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def sleeps(monkeypatch):
    """Record pacing pauses instead of sleeping."""
    recorded: list[float] = []

    async def _fake_sleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr("quotekit.quotes.asyncio.sleep", _fake_sleep)
    return recorded


@pytest.fixture
def quotes_tree():
    return build_tree("quotes")


@pytest.fixture
def read_tree():
    return build_tree("read")


@pytest.fixture
def root_tree():
    return build_tree("root")
