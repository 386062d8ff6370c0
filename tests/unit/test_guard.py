"""Unit tests for the connection state machine."""

import pytest

from nntp_session.errors import NotConnectedError
from nntp_session.transport.base import ConnectionGuard, TransportState


class TestConnectionGuard:
    """Test ConnectionGuard transitions."""

    def test_initial_state(self):
        guard = ConnectionGuard()

        assert guard.state == TransportState.DISCONNECTED
        assert guard.is_connected is False

    def test_connect_cycle(self):
        guard = ConnectionGuard()

        guard.begin_connect()
        assert guard.state == TransportState.CONNECTING
        guard.connect_succeeded()
        assert guard.is_connected

        guard.mark_closed()
        assert guard.state == TransportState.CLOSED

    def test_failed_connect_returns_to_disconnected(self):
        guard = ConnectionGuard()

        guard.begin_connect()
        guard.connect_failed()

        assert guard.state == TransportState.DISCONNECTED
        guard.begin_connect()

    def test_cannot_connect_twice(self):
        guard = ConnectionGuard()
        guard.begin_connect()
        guard.connect_succeeded()

        with pytest.raises(RuntimeError, match="already established"):
            guard.begin_connect()

    def test_closed_is_terminal(self):
        guard = ConnectionGuard()
        guard.mark_closed()

        with pytest.raises(RuntimeError, match="closed"):
            guard.begin_connect()
        assert guard.state == TransportState.CLOSED


class TestRequireConnected:
    """Test the guard on interactive operations."""

    @pytest.mark.parametrize("setup", ["fresh", "connecting", "closed"])
    def test_rejects_unless_connected(self, setup):
        guard = ConnectionGuard()
        if setup == "connecting":
            guard.begin_connect()
        elif setup == "closed":
            guard.mark_closed()

        with pytest.raises(NotConnectedError):
            guard.require_connected()

    def test_accepts_when_connected(self):
        guard = ConnectionGuard()
        guard.begin_connect()
        guard.connect_succeeded()

        guard.require_connected()


class TestTransportStateEnum:
    def test_values(self):
        assert TransportState.DISCONNECTED.value == "disconnected"
        assert TransportState.CONNECTING.value == "connecting"
        assert TransportState.CONNECTED.value == "connected"
        assert TransportState.CLOSED.value == "closed"
