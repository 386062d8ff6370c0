"""Exceptions raised by the session layer.

Every failure is attributable to the call that detected it:
- NntpConnectionError: TCP connect or TLS handshake failed
- NotConnectedError: interactive operation without a live connection
- ProtocolError: missing or malformed status line
"""

from __future__ import annotations


class NntpError(Exception):
    """Base class for all session layer errors."""


class NntpConnectionError(NntpError, ConnectionError):
    """Connecting to the server failed (socket connect or TLS handshake)."""

    def __init__(self, message: str, host: str | None = None, port: int | None = None):
        super().__init__(message)
        self.host = host
        self.port = port


class NotConnectedError(NntpError):
    """An operation needed a connected session and there was none.

    Raised before the transport is touched.
    """


class ProtocolError(NntpError):
    """The server's response could not be read as a status line."""

    def __init__(self, message: str, line: str | None = None):
        super().__init__(message)
        self.line = line
