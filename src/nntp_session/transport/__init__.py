"""Transport layer: byte streams, line framing and connection lifecycle.

Key concepts:
- Transport: opens the socket (optionally TLS) and hands back a stream
- LineChannel: CRLF line framing in one fixed text encoding
- ConnectionGuard: DISCONNECTED/CONNECTED/CLOSED state machine
"""

from .base import ConnectionGuard, Transport, TransportState
from .channel import DEFAULT_ENCODING, LineChannel
from .mock import MockTransport
from .tcp import TcpTransport

__all__ = [
    "ConnectionGuard",
    "Transport",
    "TransportState",
    "LineChannel",
    "DEFAULT_ENCODING",
    "TcpTransport",
    "MockTransport",
]
