"""Feature-level fixtures for translation pipeline tests.

Provides bundle loaders, a controllable clock for cache expiry, stores
(in-memory, failing and counting) and a wired resolver.
"""

from typing import List

import pytest

from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.errors import StoreUnavailableError
from infrastructure.i18n.loader import JSONBundleLoader
from infrastructure.i18n.models import Locale, TranslationRecord
from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.i18n.store import InMemoryTranslationStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingStore(InMemoryTranslationStore):
    """In-memory store that records every locale query."""

    def __init__(self, records=None):
        super().__init__(records)
        self.queries: List[Locale] = []

    async def query_records_by_locale(self, locale: Locale) -> List[TranslationRecord]:
        self.queries.append(locale)
        return await super().query_records_by_locale(locale)


class FailingStore(CountingStore):
    """Store whose locale query fails while `available` is False."""

    def __init__(self, records=None):
        super().__init__(records)
        self.available = False

    async def query_records_by_locale(self, locale: Locale) -> List[TranslationRecord]:
        if not self.available:
            self.queries.append(locale)
            raise StoreUnavailableError("connection refused", error_code="Timeout")
        return await super().query_records_by_locale(locale)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TranslationCache(ttl_seconds=300, clock=clock)


@pytest.fixture
def bundle_loader(bundles_dir):
    return JSONBundleLoader(bundles_dir)


@pytest.fixture
def store():
    return CountingStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def resolver(store, bundle_loader, cache):
    return TranslationResolver(store=store, loader=bundle_loader, cache=cache)
