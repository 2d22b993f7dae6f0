"""Adapters from raising/awaiting code to Result values.

``wrap_sync`` runs a callable once; ``wrap_async`` awaits an
already-started awaitable once. Any ``Exception`` raised along the way,
including a ``TypeError`` for something that cannot be called or awaited,
is absorbed into a failure whose error is a plain message string.
Cancellation and interpreter-exit signals (``BaseException`` outside
``Exception``) are not absorbed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Never

from tagged_result._dev_flags import log_tracebacks_enabled
from tagged_result.result import Result, failure, success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = ["wrap_async", "wrap_sync"]

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_PREFIX = "An unknown error occurred: "


def _describe_error(reason: object) -> str:
    """Normalize a raised or rejected value into a message string.

    An exception built from a single string argument yields that string
    as-is; ``KeyError("k")`` gives ``"k"``, not its quoted rendering.
    """
    if isinstance(reason, BaseException):
        args = reason.args
        if len(args) == 1 and isinstance(args[0], str):
            return args[0]
        return str(reason)
    return f"{UNKNOWN_ERROR_PREFIX}{reason}"


def _label(obj: object) -> str:
    name = getattr(obj, "__qualname__", None)
    if isinstance(name, str):
        return name
    return type(obj).__name__


def _absorb(label: str, exc: Exception) -> Result[Never, str]:
    message = _describe_error(exc)
    logger.debug(
        "Absorbed %s from %s: %s",
        type(exc).__name__,
        label,
        message,
        exc_info=exc if log_tracebacks_enabled() else None,
    )
    return failure(message)


def wrap_sync[T](fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, str]:
    """Call ``fn(*args, **kwargs)`` once and capture the outcome.

    Returns:
        ``success(return_value)`` on a normal return, otherwise
        ``failure(message)`` built from the raised exception. A non-callable
        ``fn`` is reported the same way, as a failure.
    """
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:
        return _absorb(_label(fn), exc)
    return success(value)


async def wrap_async[T](operation: Awaitable[T]) -> Result[T, str]:
    """Await an already-started operation and capture how it settles.

    The operation is awaited exactly once; a rejection is final. Passing
    something that cannot be awaited, such as a coroutine function that was
    never called, settles to a failure. To cancel, cancel the original task
    or future: the resulting ``CancelledError`` propagates through this
    adapter.
    """
    try:
        value = await operation
    except Exception as exc:
        return _absorb(_label(operation), exc)
    return success(value)
