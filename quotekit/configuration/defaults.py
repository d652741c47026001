"""Built-in default configuration for quotekit."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    "meta": {
        "version": "1.0",
    },
    "cli": {
        "layout": "quotes",
        "default_file": "sampleQuotes.txt",
        "delay": 42,
        "foreground": "White",
        "debug": False,
    },
}
