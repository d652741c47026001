"""Run the action bound to a parsed invocation."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any

from .errors import ActionError, NoHandlerError
from .parser import BoundInvocation

logger = logging.getLogger(__name__)


def dispatch(invocation: BoundInvocation) -> Any:
    """Invoke the matched command's action with its declared values.

    Coroutine actions are driven to completion on a fresh event loop. Any
    exception escaping the action is re-raised as ``ActionError`` so callers
    can tell runtime failures from parse errors.
    """
    command = invocation.command
    if command.action is None:
        raise NoHandlerError(command.display_name)
    values = invocation.values(command.needs)
    logger.debug(
        "dispatching '%s' with %s",
        command.display_name,
        dict(zip(command.needs, values)),
    )
    try:
        result = command.action(*values)
        if inspect.iscoroutine(result):
            result = asyncio.run(result)
    except ActionError:
        raise
    except Exception as exc:
        raise ActionError(command.display_name, exc) from exc
    return result
