"""Pytest configuration and fixtures.

Provides environment isolation and settings-cache hygiene. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from optresult import config as optresult_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_settings_env(monkeypatch):
    """Clear OPTRESULT_* env vars and the cached default settings per test."""
    for key in list(os.environ.keys()):
        if key.startswith(optresult_config.ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    optresult_config.default_settings.cache_clear()
    yield
    optresult_config.default_settings.cache_clear()


# =============================================================================
# Shared Test Doubles
# =============================================================================


class CallRecorder:
    """Callable that records its arguments and returns a fixed value."""

    def __init__(self, returns=None):
        self.calls: list[tuple] = []
        self.returns = returns

    def __call__(self, *args):
        self.calls.append(args)
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder():
    """Factory for CallRecorder instances (not autouse)."""
    return CallRecorder
