"""Fixtures for the translations admin module tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.errors import setup_error_handlers
from infrastructure.i18n.errors import StoreUnavailableError
from infrastructure.i18n.factory import create_translation_resolver
from infrastructure.i18n.models import Locale
from infrastructure.i18n.store import InMemoryTranslationStore
from infrastructure.services.providers import get_translation_resolver
from modules.translations import controllers
from tests.factories.i18n import make_record


class FlakyStore(InMemoryTranslationStore):
    """In-memory store that fails every write after `fail_after` upserts."""

    def __init__(self, records=None, fail_after: int = 0):
        super().__init__(records)
        self.fail_after = fail_after
        self.upserts = 0

    async def upsert_record(self, record):
        if self.upserts >= self.fail_after:
            raise StoreUnavailableError("throttled", error_code="ThrottlingException")
        self.upserts += 1
        return await super().upsert_record(record)

    async def list_records(self, locale=None, namespace=None, search=None):
        raise StoreUnavailableError("connection refused")


@pytest.fixture
def seeded_records():
    return [
        make_record(key="nav.home", locale=Locale.EN, value="Home (edited)"),
        make_record(key="nav.aboutUs", locale=Locale.FR, value="Qui sommes-nous"),
        make_record(key="footer.rights", locale=Locale.FR, value="Droits réservés"),
    ]


@pytest.fixture
def store(seeded_records):
    return InMemoryTranslationStore(seeded_records)


@pytest.fixture
def resolver(mock_settings, store):
    return create_translation_resolver(mock_settings, store=store)


@pytest.fixture
def flaky_resolver(mock_settings):
    return create_translation_resolver(mock_settings, store=FlakyStore(fail_after=1))


def _create_app(resolver):
    app = FastAPI()
    app.include_router(controllers.router)
    setup_error_handlers(app)
    app.dependency_overrides[get_translation_resolver] = lambda: resolver
    return app


@pytest.fixture
def client(resolver):
    return TestClient(_create_app(resolver))


@pytest.fixture
def flaky_client(flaky_resolver):
    return TestClient(_create_app(flaky_resolver))
