"""In-memory transport for testing.

Usage:
    transport = MockTransport(greeting="200 Service ready")
    transport.set_response("LIST", ["215 list follows", "a", "b", "."])

    conn = NntpConnection(transport=transport)
    conn.connect("news.example.com")
    conn.read_response()

    assert transport.recorded_lines == []
"""

from __future__ import annotations

from collections import deque

from ..errors import NntpConnectionError
from .channel import CRLF, DEFAULT_ENCODING


class MockStream:
    """Binary stream double backed by a queue of scripted server lines."""

    def __init__(self, transport: MockTransport):
        self._transport = transport
        self._incoming: deque[bytes] = deque()
        self._pending = b""
        self.closed = False

    def feed(self, data: bytes) -> None:
        self._incoming.append(data)

    def readline(self) -> bytes:
        if self.closed:
            raise ValueError("I/O operation on closed stream.")
        if not self._incoming:
            return b""
        return self._incoming.popleft()

    def write(self, data: bytes) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed stream.")
        self._pending += data
        return len(data)

    def flush(self) -> None:
        while CRLF in self._pending:
            raw, self._pending = self._pending.split(CRLF, 1)
            self._transport._on_line(raw)

    def close(self) -> None:
        self.closed = True


class MockTransport:
    """Transport double that scripts server replies and records client lines.

    No actual I/O - everything is in-memory.
    """

    def __init__(
        self,
        greeting: str | None = None,
        encoding: str = DEFAULT_ENCODING,
        connect_error: Exception | None = None,
    ):
        self.encoding = encoding
        self.greeting = greeting
        self.connect_error = connect_error
        self.opened_with: tuple[str, int, bool] | None = None
        self.closed = False
        self.stream: MockStream | None = None
        self._responses: dict[str, list[str]] = {}
        self._recorded: list[bytes] = []

    @property
    def recorded_lines(self) -> list[str]:
        """Lines written by the client, decoded, without terminators."""
        return [raw.decode(self.encoding) for raw in self._recorded]

    @property
    def recorded_bytes(self) -> list[bytes]:
        """Lines written by the client exactly as they reached the wire."""
        return [raw + CRLF for raw in self._recorded]

    def set_response(self, command: str, lines: list[str]) -> None:
        """Set the canned reply the server sends after receiving `command`."""
        self._responses[command] = lines

    def queue(self, *lines: str) -> None:
        """Queue server lines to be read without waiting for a command."""
        if self.stream is None:
            raise RuntimeError("Transport not open.")
        for line in lines:
            self.stream.feed(line.encode(self.encoding) + CRLF)

    def queue_raw(self, data: bytes) -> None:
        if self.stream is None:
            raise RuntimeError("Transport not open.")
        self.stream.feed(data)

    def open(self, host: str, port: int, use_ssl: bool) -> MockStream:
        if self.connect_error is not None:
            raise NntpConnectionError(
                f"Failed to connect {host}:{port} - {self.connect_error}", host=host, port=port
            ) from self.connect_error
        self.opened_with = (host, port, use_ssl)
        self.stream = MockStream(self)
        if self.greeting is not None:
            self.queue(self.greeting)
        return self.stream

    def close(self) -> None:
        if self.stream is not None:
            self.stream.close()
        self.closed = True

    def _on_line(self, raw: bytes) -> None:
        self._recorded.append(raw)
        reply = self._responses.get(raw.decode(self.encoding))
        if reply is not None:
            self.queue(*reply)
