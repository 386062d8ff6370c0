"""Transport abstraction and connection lifecycle.

Architecture:
- Transport is the PROTOCOL (interface) for byte-stream providers
- TcpTransport opens real sockets, MockTransport scripts a fake server
- ConnectionGuard owns the lifecycle state machine and gates every
  interactive operation on the connection
"""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Protocol, runtime_checkable

from ..errors import NotConnectedError


class TransportState(str, Enum):
    """Connection state machine.

    DISCONNECTED -> CONNECTING -> CONNECTED -> CLOSED
    A failed connect falls back from CONNECTING to DISCONNECTED.
    CLOSED is terminal.
    """

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"


@runtime_checkable
class Transport(Protocol):
    """Protocol for byte-stream transports.

    All transports must implement:
    - open: connect (and optionally upgrade to TLS), return the stream
    - close: release every resource acquired by open
    """

    def open(self, host: str, port: int, use_ssl: bool) -> BinaryIO:
        """Establish the connection and return a binary read/write stream.

        Raises:
            NntpConnectionError: If the connect or the TLS handshake fails
        """
        ...

    def close(self) -> None:
        """Release the stream and the socket. Safe to call twice."""
        ...


class ConnectionGuard:
    """Tracks connection state and rejects operations in the wrong state."""

    def __init__(self) -> None:
        self._state = TransportState.DISCONNECTED

    @property
    def state(self) -> TransportState:
        """Current connection state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if the connection is usable."""
        return self._state == TransportState.CONNECTED

    def begin_connect(self) -> None:
        """Enter CONNECTING.

        Raises:
            RuntimeError: If already connected, or the connection was closed
        """
        if self._state == TransportState.CLOSED:
            raise RuntimeError("Connection is closed; create a new connection.")
        if self._state != TransportState.DISCONNECTED:
            raise RuntimeError("Connection already established.")
        self._state = TransportState.CONNECTING

    def connect_succeeded(self) -> None:
        self._state = TransportState.CONNECTED

    def connect_failed(self) -> None:
        self._state = TransportState.DISCONNECTED

    def mark_closed(self) -> None:
        self._state = TransportState.CLOSED

    def require_connected(self) -> None:
        """Raise NotConnectedError unless the connection is CONNECTED."""
        if self._state != TransportState.CONNECTED:
            raise NotConnectedError(f"Client not connected (state={self._state.value}).")
