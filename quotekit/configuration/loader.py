"""Configuration loading, merging, and caching."""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib

from .defaults import DEFAULT_CONFIG_DICT
from .errors import ConfigurationError
from .schema import QuotekitConfig

CONFIG_ENV_VAR = "QUOTEKIT_CONFIG"
REPO_SENTINELS: Iterable[str] = (".git", "pyproject.toml")


def detect_repo_root(start: Optional[Path] = None) -> Optional[Path]:
    """Nearest directory at or above ``start`` (default: cwd) holding a sentinel."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if any((candidate / marker).exists() for marker in REPO_SENTINELS):
            return candidate
    return None


@lru_cache(maxsize=1)
def locate_config_file() -> Optional[Path]:
    """Locate the configuration file using the documented priority order."""
    env_override = os.environ.get(CONFIG_ENV_VAR)
    if env_override:
        path = Path(env_override).expanduser()
        if not path.exists():
            raise ConfigurationError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path.resolve()

    repo_root = detect_repo_root()
    if repo_root:
        for candidate in (
            repo_root / "configs" / "quotekit.toml",
            repo_root / "quotekit.toml",
        ):
            if candidate.exists():
                return candidate.resolve()

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        candidate = Path(xdg_home).expanduser() / "quotekit" / "config.toml"
        if candidate.exists():
            return candidate.resolve()

    candidate = Path.home() / ".config" / "quotekit" / "config.toml"
    if candidate.exists():
        return candidate.resolve()

    return None


def load_toml(path: Path) -> Dict[str, Any]:
    """Load a TOML file with helpful error reporting."""
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:  # pragma: no cover - file permission/path errors
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge dictionaries, returning a new dict."""
    result: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config() -> QuotekitConfig:
    """Load and validate the effective configuration."""
    config_data = copy.deepcopy(DEFAULT_CONFIG_DICT)
    if config_path := locate_config_file():
        config_data = merge_configs(config_data, load_toml(config_path))
    try:
        return QuotekitConfig.from_dict(config_data)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


_CONFIG_INSTANCE: Optional[QuotekitConfig] = None


def get_config() -> QuotekitConfig:
    """Get the cached configuration object."""
    global _CONFIG_INSTANCE
    if _CONFIG_INSTANCE is None:
        _CONFIG_INSTANCE = load_config()
    return _CONFIG_INSTANCE


def reload_config() -> QuotekitConfig:
    """Force reload configuration from disk."""
    global _CONFIG_INSTANCE
    locate_config_file.cache_clear()
    _CONFIG_INSTANCE = load_config()
    return _CONFIG_INSTANCE


def clear_config_cache() -> None:
    """Drop cached lookups so the next ``get_config`` reads from disk."""
    global _CONFIG_INSTANCE
    locate_config_file.cache_clear()
    _CONFIG_INSTANCE = None
