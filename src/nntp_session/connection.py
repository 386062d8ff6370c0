"""NNTP connection: the command/response exchange over one transport.

Architecture:
- NntpConnection owns a Transport, the LineChannel built on its stream and
  a ConnectionGuard tracking the lifecycle
- Each exchange is strictly half-duplex: write one line, read the status
  line, then read the data block if the caller's parser expects one
- What a status code means is decided by the parser passed per call

The connection does no locking. Callers sharing one connection between
threads must serialize access themselves.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .config import NNTP_PORT, ConnectionConfig
from .observers import ExchangeObserver, LoggingObserver, redact_command
from .protocol.block import read_block
from .protocol.parsers import MultiLineParser, ResponseParser, SingleLineParser
from .protocol.response import decode_response
from .transport.base import ConnectionGuard, Transport, TransportState
from .transport.channel import DEFAULT_ENCODING, LineChannel
from .transport.tcp import TcpTransport

T = TypeVar("T")

_DEFAULT_PARSER = ResponseParser()


class NntpConnection:
    """A single client connection to an NNTP-style server.

    Usage:
        with NntpConnection() as conn:
            greeting = conn.connect("news.example.com", 563, use_ssl=True,
                                    parser=ResponseParser())
            group = conn.command("GROUP alt.test")
            listing = conn.multi_line_command("LIST", MultiLineResponseParser())

    A connection is one-shot: once closed it cannot be connected again.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        observer: ExchangeObserver | None = None,
        encoding: str = DEFAULT_ENCODING,
    ):
        self.transport: Transport = transport or TcpTransport()
        self.observer = observer or LoggingObserver()
        self.encoding = encoding
        self.host: str | None = None
        self.port: int | None = None
        self.use_ssl = False
        self._guard = ConnectionGuard()
        self._channel: LineChannel | None = None

    @property
    def state(self) -> TransportState:
        """Current connection state."""
        return self._guard.state

    @property
    def is_connected(self) -> bool:
        return self._guard.is_connected

    def connect(
        self,
        host: str,
        port: int = NNTP_PORT,
        use_ssl: bool = False,
        parser: SingleLineParser[T] | None = None,
    ) -> T | None:
        """Open the connection.

        Args:
            host: Server host name, also used for TLS hostname verification
            port: Server port
            use_ssl: Upgrade the connection to TLS before any exchange
            parser: If given, the server greeting is read and parsed with it

        Returns:
            The parsed greeting, or None when no parser was given (read the
            greeting later with read_response())

        Raises:
            NntpConnectionError: If the connect or the TLS handshake fails
            RuntimeError: If already connected, or the connection was closed
        """
        self._guard.begin_connect()
        self.observer.on_connect(host, port, use_ssl)
        try:
            stream = self.transport.open(host, port, use_ssl)
        except Exception as e:
            self._guard.connect_failed()
            self.observer.on_connect_failed(host, port, e)
            raise

        self.host, self.port, self.use_ssl = host, port, use_ssl
        self._channel = LineChannel(stream, self.encoding)
        self._guard.connect_succeeded()
        self.observer.on_connected(host, port)

        if parser is None:
            return None
        return self.read_response(parser)

    def command(self, text: str, parser: SingleLineParser[T] = _DEFAULT_PARSER) -> T:
        """Send a command and parse its status line.

        Raises:
            NotConnectedError: If the connection is not connected
            ProtocolError: If no valid status line was received
            ValueError: If text spans more than one line or cannot be encoded
        """
        self.write_line(text)
        return self.read_response(parser)

    def multi_line_command(self, text: str, parser: MultiLineParser[T]) -> T:
        """Send a command whose successful response carries a data block.

        The block is read only when parser.is_success(code) is true;
        otherwise the parser receives an empty list.

        Raises:
            NotConnectedError: If the connection is not connected
            ProtocolError: If no valid status line was received
        """
        response = self.command(text, _DEFAULT_PARSER)

        lines: list[str] = []
        if parser.is_success(response.code):
            lines = read_block(self._channel)
            self.observer.on_block(lines)

        return parser.parse(response.code, response.message, lines)

    def write_line(self, text: str) -> None:
        """Send a raw line without reading any response.

        The line is encoded before the observer hears about it, so a
        rejected line is never reported as sent.

        Raises:
            NotConnectedError: If the connection is not connected
            ValueError: If text spans more than one line or cannot be encoded
        """
        self._guard.require_connected()
        data = self._channel.encode_line(text)
        self.observer.on_command(redact_command(text))
        self._channel.write_encoded(data)

    def read_response(self, parser: SingleLineParser[T] = _DEFAULT_PARSER) -> T:
        """Read one status line, e.g. the greeting sent after connect.

        Raises:
            NotConnectedError: If the connection is not connected
            ProtocolError: If no valid status line was received
        """
        self._guard.require_connected()
        line = self._channel.read_line()
        self.observer.on_response(line)
        response = decode_response(line)
        return parser.parse(response.code, response.message)

    def close(self) -> None:
        """Release the channel and the transport. Safe to call twice."""
        if self._guard.state == TransportState.CLOSED:
            return
        self._guard.mark_closed()
        channel, self._channel = self._channel, None
        try:
            if channel is not None:
                channel.close()
        finally:
            self.transport.close()
            self.observer.on_close()

    def __enter__(self) -> NntpConnection:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<NntpConnection {self.host}:{self.port} state={self.state.value}>"


def create_connection(
    config: ConnectionConfig,
    observer: ExchangeObserver | None = None,
    transport: Transport | None = None,
) -> NntpConnection:
    """Create and connect a NntpConnection from a ConnectionConfig.

    The greeting is left unread; call read_response() to get it.

    Raises:
        NntpConnectionError: If the connect or the TLS handshake fails
    """
    conn = NntpConnection(
        transport=transport or TcpTransport(connect_timeout=config.connect_timeout),
        observer=observer,
        encoding=config.encoding,
    )
    try:
        conn.connect(config.host, config.port, config.use_ssl)
    except Exception:
        conn.close()
        raise
    return conn
