"""Exception hierarchy for the command grammar.

Errors fall into three families so callers can tell them apart:

- ``TreeConstructionError``: the command tree itself is malformed. Raised
  while the tree is being declared or sealed and fatal to startup.
- ``ParseError``: the user's input does not match the grammar. Raised before
  any action runs.
- ``DispatchError``: something went wrong after parsing succeeded, either a
  grammar defect (no handler) or a failure inside the action.
"""

from __future__ import annotations

from typing import Sequence


class QuotekitError(Exception):
    """Base class for all quotekit specific errors."""


class TreeConstructionError(QuotekitError):
    """Raised when a command tree is declared inconsistently."""


class DuplicateOptionError(TreeConstructionError):
    """Raised when an option name collides within a command's visible scope."""


class DuplicateNameError(TreeConstructionError):
    """Raised when a command name, alias or argument name collides."""


class ArgumentOrderError(TreeConstructionError):
    """Raised when a required argument is declared after an optional one."""


class BindingError(TreeConstructionError):
    """Raised when an action needs a value its command cannot provide."""


class SealedCommandError(TreeConstructionError):
    """Raised when a command is modified after its tree was sealed."""


class ParseError(QuotekitError):
    """Base class for errors in the user's command line."""


def _with_suggestions(message: str, suggestions: Sequence[str]) -> str:
    if not suggestions:
        return message
    quoted = ", ".join(f"'{item}'" for item in suggestions)
    return f"{message} Did you mean {quoted}?"


class UnknownOptionError(ParseError):
    """Raised for option tokens that are not declared in the matched scope."""

    def __init__(self, token: str, suggestions: Sequence[str] = ()):
        self.token = token
        self.suggestions = tuple(suggestions)
        super().__init__(
            _with_suggestions(f"Unrecognized option '{token}'.", self.suggestions)
        )


class OptionValidationError(ParseError):
    """Raised when an option's value cannot be converted or is rejected."""

    def __init__(self, option: str, message: str):
        self.option = option
        self.message = message
        super().__init__(message)


class ArgumentValidationError(ParseError):
    """Raised when a positional value cannot be converted to its kind."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(message)


class MissingOptionError(ParseError):
    """Raised when a required option is absent and has no default."""

    def __init__(self, option: str, command: str):
        self.option = option
        self.command = command
        super().__init__(f"Option '{option}' is required for command '{command}'.")


class MissingArgumentError(ParseError):
    """Raised when fewer positional tokens than required arguments remain."""

    def __init__(self, argument: str, command: str):
        self.argument = argument
        self.command = command
        super().__init__(
            f"Required argument '{argument}' missing for command '{command}'."
        )


class ExtraArgumentsError(ParseError):
    """Raised when positional tokens remain after all arguments are bound."""

    def __init__(self, tokens: Sequence[str], suggestions: Sequence[str] = ()):
        self.tokens = tuple(tokens)
        self.suggestions = tuple(suggestions)
        listed = ", ".join(f"'{token}'" for token in self.tokens)
        noun = "argument" if len(self.tokens) == 1 else "arguments"
        super().__init__(
            _with_suggestions(
                f"Unrecognized command or {noun} {listed}.", self.suggestions
            )
        )


class DispatchError(QuotekitError):
    """Base class for failures after a successful parse."""


class NoHandlerError(DispatchError):
    """Raised when the matched command has no action bound to it."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Required command was not provided for '{command}'.")


class ActionError(DispatchError):
    """Wraps an exception raised while an action was running."""

    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        detail = str(cause) or cause.__class__.__name__
        super().__init__(f"'{command}' failed: {detail}")
