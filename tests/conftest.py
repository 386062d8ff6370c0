"""Pytest configuration and shared fixtures."""

import pytest

from nntp_session import MockTransport, NntpConnection, RecordingObserver


@pytest.fixture
def transport() -> MockTransport:
    """Mock transport that greets with 200."""
    return MockTransport(greeting="200 Service ready")


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def connection(transport, observer):
    """Connected connection with the greeting still unread."""
    conn = NntpConnection(transport=transport, observer=observer)
    conn.connect("news.example.com")
    yield conn
    conn.close()
