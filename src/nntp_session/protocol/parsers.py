"""Parser capabilities consumed by the connection.

The connection never interprets status codes itself. Callers pass a parser
strategy with each command:

- SingleLineParser: turns (code, message) into a result
- MultiLineParser: decides whether a data block follows (is_success) and
  turns (code, message, lines) into a result

Any object with the right methods qualifies; no base class is required.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from .response import MultiLineResponse, Response

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SingleLineParser(Protocol[T_co]):
    """Parses a status line."""

    def parse(self, code: int, message: str) -> T_co: ...


@runtime_checkable
class MultiLineParser(Protocol[T_co]):
    """Parses a status line plus the data block that may follow it."""

    def is_success(self, code: int) -> bool:
        """True if a data block follows a status line with this code."""
        ...

    def parse(self, code: int, message: str, lines: Sequence[str]) -> T_co: ...


class ResponseParser:
    """Returns the decoded status line as a Response."""

    def parse(self, code: int, message: str) -> Response:
        return Response(code=code, message=message)


class MultiLineResponseParser:
    """Returns a MultiLineResponse.

    A block is expected when the code is one of `success_codes`, or, if none
    are given, for any 2xx code.
    """

    def __init__(self, success_codes: Iterable[int] | None = None):
        self.success_codes = frozenset(success_codes) if success_codes else None

    def is_success(self, code: int) -> bool:
        if self.success_codes is None:
            return 200 <= code < 300
        return code in self.success_codes

    def parse(self, code: int, message: str, lines: Sequence[str]) -> MultiLineResponse:
        return MultiLineResponse(code=code, message=message, lines=tuple(lines))


class _CallableParser:
    def __init__(self, fn: Callable[[int, str], T]):
        self._fn = fn

    def parse(self, code: int, message: str) -> T:
        return self._fn(code, message)


def callable_parser(fn: Callable[[int, str], T]) -> SingleLineParser[T]:
    """Wrap a plain function as a SingleLineParser.

    Example:
        conn.command("DATE", callable_parser(lambda code, msg: msg))
    """
    return _CallableParser(fn)
