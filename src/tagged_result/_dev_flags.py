"""Internal helpers for development-time feature flags.

Centralizes how opt-in debugging toggles are read so every call site
shares the same semantics.
"""

from __future__ import annotations

import os

__all__ = ["log_tracebacks_enabled"]


def log_tracebacks_enabled(*, override: bool | None = None) -> bool:
    """Return True when absorbed exceptions should be logged with tracebacks.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``TAGGED_RESULT_LOG_TRACEBACKS`` is exactly ``"1"``.

    The environment is read on every call so the flag can be flipped at
    runtime.
    """
    if override is not None:
        return bool(override)
    return os.getenv("TAGGED_RESULT_LOG_TRACEBACKS") == "1"
