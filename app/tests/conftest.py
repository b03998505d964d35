"""Shared fixtures for the site translation service tests.

The application package root (app/) is put on sys.path by the pytest
configuration in pyproject.toml, so application modules import as
`infrastructure...`, `modules...` and `tests...`.
"""

import json

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services import providers
from tests.factories.i18n import make_bundle_data


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset lru_cache providers so each test builds its own resolver."""
    providers.get_settings.cache_clear()
    providers.get_translation_resolver.cache_clear()
    providers.get_locale_negotiator.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_translation_resolver.cache_clear()
    providers.get_locale_negotiator.cache_clear()


@pytest.fixture
def bundles_dir(tmp_path):
    """Create a bundle directory with en, fr and de bundles.

    Returns a directory structure like:
    - en.json (complete)
    - fr.json (complete)
    - de.json (partial)
    """
    directory = tmp_path / "locales"
    directory.mkdir()
    for code in ("en", "fr", "de"):
        with open(directory / f"{code}.json", "w", encoding="utf-8") as f:
            json.dump(make_bundle_data(code), f, ensure_ascii=False)
    return directory


@pytest.fixture
def mock_settings(bundles_dir):
    """Settings using the in-memory store and the temporary bundles."""
    return Settings(
        GIT_SHA="abc123",
        i18n=I18nSettings(
            TRANSLATION_STORE_BACKEND="memory",
            TRANSLATION_BUNDLES_DIR=bundles_dir,
            TRANSLATION_CACHE_TTL_SECONDS=60,
        ),
    )
