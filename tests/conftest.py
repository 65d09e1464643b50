"""Shared fixtures for toolkit tests."""

import json
from unittest.mock import Mock

import httpx
import pytest

from hubspot_toolkit.core.models import Session
from hubspot_toolkit.core.session import reset_session
from hubspot_toolkit.client.executor import HubSpotClient


@pytest.fixture(autouse=True)
def clean_session():
    """Reset the default session before and after each test."""
    reset_session()
    yield
    reset_session()


@pytest.fixture
def make_response():
    """Build a mock httpx response."""
    def _make(data=None, status_code=200):
        response = Mock()
        response.status_code = status_code
        if data is None:
            response.content = b""
            response.text = ""
        else:
            response.content = json.dumps(data).encode()
            response.text = json.dumps(data)
        response.json.return_value = data
        return response
    return _make


@pytest.fixture
def session():
    """Create a populated session."""
    return Session(base_url="https://api.test.com", api_key="test_token")


@pytest.fixture
def mock_http_client():
    """Create a mock HTTP client."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def client(session, mock_http_client):
    """Create a client for testing."""
    return HubSpotClient(session=session, http_client=mock_http_client, search_delay_seconds=0.5)
