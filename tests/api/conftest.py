"""Shared fixtures for API tests."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from greentrip.api.app import app
from greentrip.api.auth import UserClaims, verify_firebase_token
from greentrip.services.flight_provider import StaticFlightProvider
from tests.persistence.fake_cache import FakeCacheStore
from tests.persistence.fake_firestore import FakeFirestoreClient

TEST_USER_ID = "api-test-user"
TEST_USER_NAME = "Api Tester"


@pytest.fixture
def fake_client():
    """In-memory Firestore fake, shared across all repos in a single test."""
    return FakeFirestoreClient()


@pytest.fixture
def report_cache():
    return FakeCacheStore()


@pytest.fixture
def test_app(fake_client, report_cache):
    """FastAPI app with dependency overrides for testing."""
    # Override auth to return a fixed test user
    app.dependency_overrides[verify_firebase_token] = lambda: UserClaims(
        uid=TEST_USER_ID, email="tester@example.com", name=TEST_USER_NAME
    )

    with patch(
        "greentrip.persistence.repositories.base.get_firestore_client",
        return_value=fake_client,
    ):
        app.state.report_cache = report_cache
        app.state.flight_provider = StaticFlightProvider()
        yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
