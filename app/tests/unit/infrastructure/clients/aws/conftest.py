"""Fixtures for AWS client tests.

Provides factory-as-fixture pattern for creating configurable fake boto3 clients
used across AWS client unit tests.
"""

from typing import Any, Dict, List, Optional

import pytest

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.session_provider import SessionProvider
from tests.fixtures.aws_clients import FakeClient


@pytest.fixture
def make_fake_client():
    """Factory fixture for creating configurable fake boto3 clients.

    Usage:
        def test_something(make_fake_client):
            client = make_fake_client(paginated_pages=[{...}, {...}])
            monkeypatch.setattr(executor, "get_boto3_client", lambda *a, **k: client)
    """

    def _factory(
        paginated_pages: Optional[List[Dict[str, Any]]] = None,
        api_responses: Optional[Dict[str, Any]] = None,
    ) -> FakeClient:
        return FakeClient(paginated_pages=paginated_pages, api_responses=api_responses)

    return _factory


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip retry backoff delays."""
    from infrastructure.clients.aws import executor

    delays = []
    monkeypatch.setattr(executor.time, "sleep", delays.append)
    return delays


@pytest.fixture
def dynamodb_client():
    """Fixture for DynamoDBClient with a plain SessionProvider."""
    session_provider = SessionProvider(region="us-east-1")
    return DynamoDBClient(
        session_provider=session_provider,
        default_role_arn=None,
    )
