"""Pytest configuration and shared fixtures for untappd-client tests."""

import pytest

from untappd_client import new_authenticated_client, new_client
from untappd_client.testing import RecordingTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Untappd environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("UNTAPPD_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def transport():
    """Recording transport answering with an empty successful envelope."""
    return RecordingTransport()


@pytest.fixture
def client(transport):
    """Key pair client wired to the recording transport."""
    return new_client("foo", "bar", transport)


@pytest.fixture
def token_client(transport):
    """Access token client wired to the recording transport."""
    return new_authenticated_client("baz", transport)
