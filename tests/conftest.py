"""Shared test fixtures for graphql-config tests."""

import pytest


@pytest.fixture(autouse=True)
def _clear_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep logger levels independent of the calling environment."""
    monkeypatch.delenv("GRAPHQL_CONFIG_DEBUG", raising=False)
    monkeypatch.delenv("GRAPHQL_CONFIG_LOG_LEVEL", raising=False)
