"""Pytest configuration and shared fixtures for pending-option tests."""

from unittest.mock import MagicMock

import pytest

from pending_option import Some
from pending_option._config import reset_config
from pending_option._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test from an environment-derived, silent configuration."""
    monkeypatch.delenv("PENDING_OPTION_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PENDING_OPTION_JSON_LOGS", raising=False)
    monkeypatch.delenv("PENDING_OPTION_TRACE_FAILURES", raising=False)
    reset_config()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    return Some("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from pending_option import none

    return none()


@pytest.fixture
def spy():
    """Records calls made by SpiedSome instances."""
    return MagicMock()


@pytest.fixture
def spied_some(spy):
    """A Some subclass that reports clone/inspect/match/ok_or/or_ calls to `spy`.

    Struct instances are frozen and slotted, so methods cannot be patched on
    an instance; a subclass is the way to count delegations.
    """

    class SpiedSome(Some):
        def clone(self):
            spy.clone()
            return Some.clone(self)

        def inspect(self, f):
            spy.inspect(f)
            return Some.inspect(self, f)

        def match(self, on_some, on_none):
            spy.match(on_some, on_none)
            return Some.match(self, on_some, on_none)

        def ok_or(self, err):
            spy.ok_or(err)
            return Some.ok_or(self, err)

        def or_(self, other):
            spy.or_(other)
            return Some.or_(self, other)

    return SpiedSome
