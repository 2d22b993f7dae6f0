"""Two-field Result record for explicit error handling.

A Result is either a success (``value`` set, ``error`` is ``None``) or a
failure (``value`` is ``None``, ``error`` set). Callers branch on
``is_success``/``is_failure`` instead of wrapping code in try/except.
"""

from __future__ import annotations

import dataclasses
from typing import Never, TypeGuard

__all__ = ["Result", "failure", "is_failure", "is_success", "success"]


@dataclasses.dataclass(frozen=True, slots=True)
class Result[T, E]:
    """Success-with-value or failure-with-error, mutually exclusive.

    The variant is decided by ``error`` alone: a success may legitimately
    carry ``None`` as its value.
    """

    value: T | None = None
    error: E | None = None


def success[T](value: T) -> Result[T, Never]:
    """Build a success result holding ``value``."""
    return Result(value=value, error=None)


def failure[E](error: E) -> Result[Never, E]:
    """Build a failure result holding ``error``."""
    return Result(value=None, error=error)


def is_success[T, E](result: Result[T, E]) -> TypeGuard[Result[T, Never]]:
    """Return True when ``result`` carries no error."""
    return result.error is None


def is_failure[T, E](result: Result[T, E]) -> TypeGuard[Result[Never, E]]:
    """Return True when ``result`` carries an error."""
    return not is_success(result)
