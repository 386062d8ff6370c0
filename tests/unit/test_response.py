"""Unit tests for status line decoding."""

import pytest
from pydantic import ValidationError

from nntp_session.errors import ProtocolError
from nntp_session.protocol.response import MultiLineResponse, Response, decode_response


class TestDecodeResponse:
    """Test decode_response() on well-formed lines."""

    @pytest.mark.parametrize(
        ("line", "code", "message"),
        [
            ("200 Service ready", 200, "Service ready"),
            ("211 100 1 100 alt.test", 211, "100 1 100 alt.test"),
            ("480   Authentication required  ", 480, "Authentication required"),
            ("205", 205, ""),
            ("111 ", 111, ""),
            ("500\tunknown", 500, "unknown"),
        ],
    )
    def test_code_and_trimmed_message(self, line, code, message):
        """Code is the numeric prefix, message the trimmed remainder."""
        response = decode_response(line)

        assert response.code == code
        assert response.message == message

    def test_does_not_interpret_code(self):
        """Error codes decode like any other code."""
        response = decode_response("503 program fault")

        assert response.code == 503
        assert response.category == 5


class TestDecodeResponseErrors:
    """Test decode_response() failures."""

    def test_none_is_no_response(self):
        """A closed stream is reported as 'no response'."""
        with pytest.raises(ProtocolError, match="no response"):
            decode_response(None)

    @pytest.mark.parametrize("line", ["ok", "", "20", "2x0 nope", " 200 ok", "-12 x", "２００ ok"])
    def test_malformed_prefix_is_invalid_response(self, line):
        """Lines without three leading ASCII digits are rejected."""
        with pytest.raises(ProtocolError, match="invalid response") as exc_info:
            decode_response(line)

        assert exc_info.value.line == line


class TestResponseModel:
    """Test Response value semantics."""

    def test_immutable(self):
        response = Response(code=200, message="ok")

        with pytest.raises(ValidationError):
            response.code = 500

    def test_str(self):
        assert str(Response(code=200, message="ok")) == "200 ok"
        assert str(Response(code=205)) == "205"

    def test_multi_line_response_lines(self):
        response = MultiLineResponse(code=215, message="list follows", lines=("a", "b"))

        assert response.lines == ("a", "b")
        assert response.category == 2
