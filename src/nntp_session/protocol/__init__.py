"""Protocol layer: status line decoding, data blocks and parser strategies.

Key concepts:
- Response: immutable (code, message) decoded from a status line
- Data block: lines after a status line, up to a "." terminator
- Parsers: caller-supplied strategies that give codes their meaning
"""

from .block import read_block, unstuff
from .parsers import (
    MultiLineParser,
    MultiLineResponseParser,
    ResponseParser,
    SingleLineParser,
    callable_parser,
)
from .response import MultiLineResponse, Response, decode_response

__all__ = [
    "Response",
    "MultiLineResponse",
    "decode_response",
    "read_block",
    "unstuff",
    "SingleLineParser",
    "MultiLineParser",
    "ResponseParser",
    "MultiLineResponseParser",
    "callable_parser",
]
