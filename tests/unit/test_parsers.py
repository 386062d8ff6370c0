"""Unit tests for the built-in parser strategies."""

from nntp_session.protocol.parsers import (
    MultiLineParser,
    MultiLineResponseParser,
    ResponseParser,
    SingleLineParser,
    callable_parser,
)
from nntp_session.protocol.response import MultiLineResponse, Response


class GroupParser:
    """Collaborator-style parser with no base class."""

    def parse(self, code, message):
        count, first, last, name = message.split()
        return name, int(count), int(first), int(last)


class TestCapabilities:
    """Parsers are recognized structurally."""

    def test_single_line_parsers(self):
        assert isinstance(ResponseParser(), SingleLineParser)
        assert isinstance(GroupParser(), SingleLineParser)
        assert isinstance(callable_parser(lambda code, message: code), SingleLineParser)

    def test_multi_line_parser(self):
        assert isinstance(MultiLineResponseParser(), MultiLineParser)
        assert not isinstance(GroupParser(), MultiLineParser)


class TestResponseParser:
    def test_returns_response(self):
        assert ResponseParser().parse(200, "ok") == Response(code=200, message="ok")


class TestMultiLineResponseParser:
    """Test success detection and result building."""

    def test_default_success_is_2xx(self):
        parser = MultiLineResponseParser()

        assert parser.is_success(215)
        assert parser.is_success(200)
        assert not parser.is_success(199)
        assert not parser.is_success(300)
        assert not parser.is_success(411)

    def test_explicit_success_codes(self):
        parser = MultiLineResponseParser(success_codes=[220, 221])

        assert parser.is_success(221)
        assert not parser.is_success(215)

    def test_empty_success_codes_fall_back_to_2xx(self):
        """An empty tuple (e.g. no CLI option given) means the default."""
        assert MultiLineResponseParser(success_codes=()).is_success(215)

    def test_parse(self):
        result = MultiLineResponseParser().parse(215, "list follows", ["a", "b"])

        assert result == MultiLineResponse(code=215, message="list follows", lines=("a", "b"))


class TestCallableParser:
    def test_wraps_function(self):
        parser = callable_parser(lambda code, message: f"{code}:{message}")

        assert parser.parse(111, "20260101000000") == "111:20260101000000"
