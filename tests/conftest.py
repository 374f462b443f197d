"""
Pytest configuration and fixtures for the test suite.

This file is automatically loaded by pytest before running tests.
It keeps the vendor credential out of the real environment and provides a
stubbed outbound transport so no test reaches the network.
"""

import os
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Must be cleared BEFORE provider_config is imported and reads it
os.environ.pop("GEMINI_API_KEY", None)

from gemini_relay.api.http_api import app  # noqa: E402
from gemini_relay.llm import provider_config  # noqa: E402


TEST_API_KEY = "test-key-123"


def make_vendor_response(status_code: int, body) -> MagicMock:
    """Build a stand-in for a `requests.Response` with a JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body
    return response


@pytest.fixture
def api_key(monkeypatch) -> str:
    """Configure the process-wide credential for one test."""
    monkeypatch.setattr(provider_config, "GEMINI_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def no_api_key(monkeypatch) -> None:
    monkeypatch.setattr(provider_config, "GEMINI_API_KEY", None)


@pytest.fixture
def mock_post():
    """Patch the outbound `requests.post` used by the Gemini client."""
    with patch("gemini_relay.llm.client.requests.post") as mocked:
        yield mocked


@pytest.fixture
def test_client() -> TestClient:
    return TestClient(app)
