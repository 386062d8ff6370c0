"""Status line model and decoder.

A status line is three ASCII digits followed by free text:

    211 100 1 100 alt.test

The decoder only checks the shape of the line. What a code means is up to
the parser that receives it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ProtocolError


class Response(BaseModel):
    """A decoded status line."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(ge=0, le=999)
    message: str = ""

    @property
    def category(self) -> int:
        """First digit of the code (1 = info, 2 = ok, 3 = continue, 4/5 = error)."""
        return self.code // 100

    def __str__(self) -> str:
        return f"{self.code} {self.message}".rstrip()


class MultiLineResponse(Response):
    """A status line together with the data block that followed it."""

    lines: tuple[str, ...] = ()


def decode_response(line: str | None) -> Response:
    """Decode one status line.

    Args:
        line: The line as read from the channel, None if the stream closed

    Returns:
        Response with the numeric code and the trimmed message

    Raises:
        ProtocolError: "no response" if line is None, "invalid response" if
            the line does not start with three digits
    """
    if line is None:
        raise ProtocolError("no response")

    prefix = line[:3]
    if len(prefix) < 3 or not (prefix.isascii() and prefix.isdigit()):
        raise ProtocolError("invalid response", line=line)

    return Response(code=int(prefix), message=line[3:].strip())
