"""Fixtures for server integration tests."""

import pytest


@pytest.fixture
def memory_env(monkeypatch, bundles_dir):
    """Point the application settings at the in-memory store and test bundles."""
    monkeypatch.setenv("TRANSLATION_STORE_BACKEND", "memory")
    monkeypatch.setenv("TRANSLATION_BUNDLES_DIR", str(bundles_dir))
    monkeypatch.setenv("TRANSLATION_CACHE_TTL_SECONDS", "60")
    monkeypatch.delenv("DEFAULT_LOCALE", raising=False)
