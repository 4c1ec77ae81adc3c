"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest
import requests


def _make_response(status_code=200, text="", reason="OK"):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.text = text
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects usable as context managers."""
    return _make_response


@pytest.fixture
def mock_session():
    """Mock requests.Session whose get() is configured per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def fake_fetcher():
    """Fetcher stub mapping URLs to bodies or exceptions."""

    class FakeFetcher:
        def __init__(self):
            self.responses = {}
            self.calls = []
            self.closed = False

        def fetch(self, url, timeout=None):
            self.calls.append((url, timeout))
            outcome = self.responses[url]
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        def close(self):
            self.closed = True

    return FakeFetcher()
