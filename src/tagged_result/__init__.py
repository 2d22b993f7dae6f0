"""tagged_result: a two-field Result value instead of exceptions.

Public API:
    - Result: the ``value``/``error`` record
    - success() / failure(): constructors
    - is_success() / is_failure(): predicates
    - wrap_sync(): run a raising callable into a Result
    - wrap_async(): await a rejecting operation into a Result
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
import logging

from tagged_result.adapters import wrap_async, wrap_sync
from tagged_result.result import Result, failure, is_failure, is_success, success

try:
    __version__ = version("tagged-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tagged_result").addHandler(logging.NullHandler())

__all__ = [
    "Result",
    "failure",
    "is_failure",
    "is_success",
    "success",
    "wrap_async",
    "wrap_sync",
]
