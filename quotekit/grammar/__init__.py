"""Declarative command grammar: tree building, parsing and dispatch."""

from __future__ import annotations

from .dispatcher import dispatch
from .errors import (
    ActionError,
    ArgumentOrderError,
    ArgumentValidationError,
    BindingError,
    DispatchError,
    DuplicateNameError,
    DuplicateOptionError,
    ExtraArgumentsError,
    MissingArgumentError,
    MissingOptionError,
    NoHandlerError,
    OptionValidationError,
    ParseError,
    QuotekitError,
    SealedCommandError,
    TreeConstructionError,
    UnknownOptionError,
)
from .model import Argument, Command, Kind, Option, Rejection, reject
from .parser import BoundInvocation, Parser
from .tree import CommandTree, Scope

__all__ = [
    "ActionError",
    "Argument",
    "ArgumentOrderError",
    "ArgumentValidationError",
    "BindingError",
    "BoundInvocation",
    "Command",
    "CommandTree",
    "DispatchError",
    "DuplicateNameError",
    "DuplicateOptionError",
    "ExtraArgumentsError",
    "Kind",
    "MissingArgumentError",
    "MissingOptionError",
    "NoHandlerError",
    "Option",
    "OptionValidationError",
    "ParseError",
    "Parser",
    "QuotekitError",
    "Rejection",
    "Scope",
    "SealedCommandError",
    "TreeConstructionError",
    "UnknownOptionError",
    "dispatch",
    "reject",
]
