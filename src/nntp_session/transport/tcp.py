"""TCP transport with optional TLS upgrade."""

from __future__ import annotations

import contextlib
import socket
import ssl
from typing import BinaryIO

from ..errors import NntpConnectionError


class TcpTransport:
    """Opens one TCP connection, upgraded to TLS when requested.

    Exactly one connection attempt per open(). Everything acquired along the
    way (socket, TLS wrapper, stream file) is registered on an ExitStack, so
    a failure part way through releases what was already acquired.
    """

    def __init__(self, connect_timeout: float | None = None):
        self.connect_timeout = connect_timeout
        self._resources: contextlib.ExitStack | None = None

    def open(self, host: str, port: int, use_ssl: bool) -> BinaryIO:
        if self._resources is not None:
            raise RuntimeError("Transport already open.")

        with contextlib.ExitStack() as stack:
            try:
                sock = socket.create_connection((host, port), timeout=self.connect_timeout)
                stack.callback(sock.close)

                if use_ssl:
                    context = ssl.create_default_context()
                    sock = context.wrap_socket(sock, server_hostname=host)
                    stack.callback(sock.close)

                # The connect timeout covers the handshake; exchanges block
                # without a deadline.
                sock.settimeout(None)

                stream = sock.makefile("rwb")
                stack.callback(stream.close)
            except (OSError, UnicodeError) as e:
                # UnicodeError: host name that cannot be IDNA-encoded.
                kind = "TLS handshake" if isinstance(e, ssl.SSLError) else "connect"
                raise NntpConnectionError(
                    f"Failed to {kind} {host}:{port} - {e}", host=host, port=port
                ) from e

            self._resources = stack.pop_all()

        return stream

    def close(self) -> None:
        if self._resources is None:
            return
        resources, self._resources = self._resources, None
        with contextlib.suppress(OSError):
            resources.close()
