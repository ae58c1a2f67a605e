"""Tests for the newline-delimited JSON codec."""

from __future__ import annotations

import json

import pytest

from mcpwire.codec import decode_line, encode_line, iter_lines
from mcpwire.errors import PARSE_ERROR, ParseError
from mcpwire.schema.jsonrpc import JSONRPCNotification, JSONRPCRequest


class TestEncode:
    def test_single_line(self) -> None:
        data = encode_line(JSONRPCRequest(id=1, method="ping"))
        assert data.endswith(b"\n")
        assert data.count(b"\n") == 1
        assert json.loads(data) == {"jsonrpc": "2.0", "id": 1, "method": "ping"}

    def test_compact_and_utf8(self) -> None:
        data = encode_line(JSONRPCNotification(method="x", params={"text": "héllo"}))
        assert b" " not in data
        assert "héllo".encode() in data


class TestDecode:
    def test_bytes_and_str(self) -> None:
        assert decode_line(b'{"a": 1}\n') == {"a": 1}
        assert decode_line('{"a": 1}') == {"a": 1}

    def test_any_json_value(self) -> None:
        assert decode_line("[1, 2]") == [1, 2]

    def test_bad_json(self) -> None:
        with pytest.raises(ParseError) as info:
            decode_line("{nope")
        assert info.value.code == PARSE_ERROR

    def test_bad_utf8(self) -> None:
        with pytest.raises(ParseError, match="invalid UTF-8"):
            decode_line(b'{"a": "\xff"}')


class TestIterLines:
    def test_skips_blank_lines(self) -> None:
        lines = [b"one\n", b"\n", b"   \n", b"two\n"]
        assert list(iter_lines(lines)) == [(1, b"one\n"), (4, b"two\n")]
