"""nntp-session - connection and exchange layer for NNTP-style protocols.

Owns one client connection (optionally TLS) and runs the command/response
discipline: send a command line, decode the status line, and collect the
"."-terminated data block for multi-line commands. What a response means is
left to caller-supplied parsers.
"""

from .config import NNTP_PORT, NNTP_SSL_PORT, ConnectionConfig
from .connection import NntpConnection, create_connection
from .errors import NntpConnectionError, NntpError, NotConnectedError, ProtocolError
from .observers import ExchangeObserver, LoggingObserver, RecordingObserver, redact_command
from .protocol import (
    MultiLineParser,
    MultiLineResponse,
    MultiLineResponseParser,
    Response,
    ResponseParser,
    SingleLineParser,
    callable_parser,
    decode_response,
)
from .transport import MockTransport, TcpTransport, TransportState

__version__ = "0.1.0"

__all__ = [
    # Connection
    "NntpConnection",
    "create_connection",
    "ConnectionConfig",
    "NNTP_PORT",
    "NNTP_SSL_PORT",
    # Errors
    "NntpError",
    "NntpConnectionError",
    "NotConnectedError",
    "ProtocolError",
    # Responses & parsers
    "Response",
    "MultiLineResponse",
    "decode_response",
    "SingleLineParser",
    "MultiLineParser",
    "ResponseParser",
    "MultiLineResponseParser",
    "callable_parser",
    # Observers
    "ExchangeObserver",
    "LoggingObserver",
    "RecordingObserver",
    "redact_command",
    # Transports
    "TcpTransport",
    "MockTransport",
    "TransportState",
]
