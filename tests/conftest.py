"""Pytest configuration and fixtures.

Provides environment isolation for the library's opt-in dev flags. All
fixtures here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_flag_env(request, monkeypatch):
    """Ensure a clean TAGGED_RESULT_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("TAGGED_RESULT_"):
            monkeypatch.delenv(key, raising=False)
