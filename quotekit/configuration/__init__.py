"""TOML configuration for quotekit, validated and cached."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import clear_config_cache, get_config, reload_config
from .schema import QuotekitConfig

__all__ = [
    "ConfigurationError",
    "QuotekitConfig",
    "clear_config_cache",
    "get_config",
    "reload_config",
]
