"""Line-oriented reader/writer over a transport stream."""

from __future__ import annotations

from typing import BinaryIO

CRLF = b"\r\n"

# Usenet text is 8-bit; latin-1 maps every byte to a character and back.
DEFAULT_ENCODING = "latin-1"


class LineChannel:
    """Reads and writes protocol lines using one fixed text encoding.

    Writes are flushed immediately so each command reaches the peer before
    a response is awaited. Reads return one line at a time, without the
    line terminator, or None once the stream is closed.
    """

    def __init__(self, stream: BinaryIO, encoding: str = DEFAULT_ENCODING):
        self._stream = stream
        self.encoding = encoding

    def encode_line(self, text: str) -> bytes:
        """Encode one line for the wire, terminator included.

        Raises:
            ValueError: If text contains CR or LF, or cannot be encoded
        """
        if "\r" in text or "\n" in text:
            raise ValueError("Command must be a single line")
        try:
            return text.encode(self.encoding) + CRLF
        except UnicodeEncodeError as e:
            raise ValueError(f"Command cannot be encoded as {self.encoding}: {e.reason}") from e

    def write_line(self, text: str) -> None:
        self.write_encoded(self.encode_line(text))

    def write_encoded(self, data: bytes) -> None:
        """Write a line already produced by encode_line() and flush it."""
        self._stream.write(data)
        self._stream.flush()

    def read_line(self) -> str | None:
        raw = self._stream.readline()
        if not raw:
            return None
        if raw.endswith(CRLF):
            raw = raw[:-2]
        elif raw.endswith((b"\n", b"\r")):
            raw = raw[:-1]
        return raw.decode(self.encoding)

    def close(self) -> None:
        self._stream.close()
