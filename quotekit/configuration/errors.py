"""Custom exceptions for configuration handling."""

from __future__ import annotations

from quotekit.grammar.errors import QuotekitError


class ConfigurationError(QuotekitError, ValueError):
    """Raised when configuration files are missing or invalid."""
