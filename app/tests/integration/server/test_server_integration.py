"""Integration tests for server module."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n.errors import StoreUnavailableError
from infrastructure.i18n.factory import create_translation_resolver
from infrastructure.i18n.store import InMemoryTranslationStore
from infrastructure.services.providers import get_translation_resolver
from server.middleware import CORRELATION_ID_HEADER


class UnreachableStore(InMemoryTranslationStore):
    async def query_records_by_locale(self, locale):
        raise StoreUnavailableError("connection refused", error_code="Timeout")

    async def list_records(self, locale=None, namespace=None, search=None):
        raise StoreUnavailableError("connection refused", error_code="Timeout")


@pytest.fixture
def integration_server_app():
    """Server app with its dependency overrides reset after each test."""
    from server import server

    yield server.handler
    server.handler.dependency_overrides.clear()


@pytest.fixture
def unreachable_client(integration_server_app, mock_settings):
    resolver = create_translation_resolver(mock_settings, store=UnreachableStore())
    integration_server_app.dependency_overrides[get_translation_resolver] = (
        lambda: resolver
    )
    return TestClient(integration_server_app)


@pytest.mark.integration
def test_server_app_initializes_with_handlers(integration_server_app):
    assert len(integration_server_app.user_middleware) > 0
    assert StoreUnavailableError in integration_server_app.exception_handlers
    assert integration_server_app.state.limiter is not None


@pytest.mark.integration
def test_server_has_middleware_configured(integration_server_app):
    middleware_classes = [
        m.cls.__name__ for m in integration_server_app.user_middleware
    ]
    assert "CORSMiddleware" in middleware_classes
    assert "CorrelationIdMiddleware" in middleware_classes


@pytest.mark.integration
def test_server_registers_all_routes(integration_server_app):
    paths = {route.path for route in integration_server_app.routes}

    assert {
        "/health",
        "/version",
        "/health/translations",
        "/api/translations",
        "/api/translations/refresh",
        "/api/admin/translations/",
        "/api/admin/translations/bulk",
        "/api/admin/translations/{locale}/{key}",
    } <= paths


@pytest.mark.integration
def test_correlation_id_generated_and_returned(integration_server_app):
    response = TestClient(integration_server_app).get("/health")

    assert response.status_code == 200
    assert response.headers[CORRELATION_ID_HEADER]


@pytest.mark.integration
def test_correlation_id_echoed_from_request(integration_server_app):
    response = TestClient(integration_server_app).get(
        "/health", headers={CORRELATION_ID_HEADER: "req-abc"}
    )

    assert response.headers[CORRELATION_ID_HEADER] == "req-abc"


@pytest.mark.integration
def test_public_route_degrades_when_store_unreachable(unreachable_client):
    response = unreachable_client.get("/api/translations", params={"locale": "fr"})

    assert response.status_code == 200
    assert response.json()["data"]["nav"]["home"] == "Accueil"


@pytest.mark.integration
def test_admin_route_returns_503_when_store_unreachable(unreachable_client):
    response = unreachable_client.get("/api/admin/translations/")

    assert response.status_code == 503
    assert response.json() == {"detail": "Translation store unavailable"}
    assert response.headers[CORRELATION_ID_HEADER]
