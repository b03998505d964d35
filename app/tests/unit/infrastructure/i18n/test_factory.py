"""Tests for infrastructure.i18n.factory module."""

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n.factory import (
    create_translation_resolver,
    create_translation_store,
)
from infrastructure.i18n.models import Locale
from infrastructure.i18n.store import (
    DynamoDBTranslationStore,
    InMemoryTranslationStore,
)


class TestCreateTranslationStore:
    def test_memory_backend(self, mock_settings):
        assert isinstance(
            create_translation_store(mock_settings), InMemoryTranslationStore
        )

    def test_dynamodb_backend_uses_table_name(self, bundles_dir):
        settings = Settings(
            i18n=I18nSettings(
                TRANSLATION_STORE_BACKEND="dynamodb",
                TRANSLATIONS_TABLE_NAME="dev_translations",
                TRANSLATION_BUNDLES_DIR=bundles_dir,
            )
        )
        store = create_translation_store(settings)
        assert isinstance(store, DynamoDBTranslationStore)
        assert store.table_name == "dev_translations"


class TestCreateTranslationResolver:
    def test_wires_settings(self, mock_settings):
        resolver = create_translation_resolver(mock_settings)

        assert resolver.default_locale is Locale.EN
        assert resolver.cache.ttl_seconds == 60
        assert isinstance(resolver.store, InMemoryTranslationStore)
        assert Locale.FR in resolver.loader.available_locales()

    def test_each_resolver_gets_its_own_cache(self, mock_settings):
        first = create_translation_resolver(mock_settings)
        second = create_translation_resolver(mock_settings)
        assert first.cache is not second.cache

    def test_store_override(self, mock_settings):
        store = InMemoryTranslationStore()
        resolver = create_translation_resolver(mock_settings, store=store)
        assert resolver.store is store

    def test_missing_bundles_dir_raises(self, mock_settings, tmp_path):
        with pytest.raises(ValueError):
            create_translation_resolver(mock_settings, bundles_dir=tmp_path / "nope")
