"""Type definitions for the CLI module.

Type aliases shared by the layout builders.
"""

from __future__ import annotations

from typing import Callable

from quotekit.grammar import Command

# Builds the root command of one command-tree layout
LayoutBuilder = Callable[[], Command]
