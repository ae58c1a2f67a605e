"""Tests for JSON-RPC envelope classification."""

from __future__ import annotations

import pytest

from mcpwire.envelope import classify_envelope, envelope_kind, parse_envelope
from mcpwire.errors import INVALID_REQUEST, InvalidEnvelopeError
from mcpwire.schema.jsonrpc import (
    EnvelopeKind,
    JSONRPCError,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
)


class TestClassify:
    @pytest.mark.parametrize(
        ("raw", "kind"),
        [
            ({"jsonrpc": "2.0", "id": 1, "method": "ping"}, EnvelopeKind.REQUEST),
            ({"jsonrpc": "2.0", "method": "notifications/initialized"}, EnvelopeKind.NOTIFICATION),
            ({"jsonrpc": "2.0", "id": "a", "result": {}}, EnvelopeKind.RESPONSE),
            ({"jsonrpc": "2.0", "id": 1, "error": {"code": -1, "message": "x"}}, EnvelopeKind.ERROR),
        ],
    )
    def test_four_shapes(self, raw: dict[str, object], kind: EnvelopeKind) -> None:
        assert classify_envelope(raw) is kind

    @pytest.mark.parametrize("raw", [[], "ping", 3, None])
    def test_non_object(self, raw: object) -> None:
        with pytest.raises(InvalidEnvelopeError, match="expected a JSON object"):
            classify_envelope(raw)

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(InvalidEnvelopeError, match="unexpected top-level keys"):
            classify_envelope({"jsonrpc": "2.0", "id": 1, "method": "ping", "extra": True})

    @pytest.mark.parametrize("version", [None, "1.0", 2.0])
    def test_wrong_jsonrpc(self, version: object) -> None:
        raw: dict[str, object] = {"id": 1, "method": "ping"}
        if version is not None:
            raw["jsonrpc"] = version
        with pytest.raises(InvalidEnvelopeError, match="jsonrpc must be"):
            classify_envelope(raw)

    def test_result_and_error(self) -> None:
        with pytest.raises(InvalidEnvelopeError, match="both 'result' and 'error'"):
            classify_envelope({"jsonrpc": "2.0", "id": 1, "result": {}, "error": {"code": 1, "message": "x"}})

    def test_response_without_id(self) -> None:
        with pytest.raises(InvalidEnvelopeError, match="matches no"):
            classify_envelope({"jsonrpc": "2.0", "result": {}})


class TestParse:
    def test_request(self) -> None:
        env = parse_envelope({"jsonrpc": "2.0", "id": 7, "method": "tools/list", "params": {"x": 1}})
        assert isinstance(env, JSONRPCRequest)
        assert env.id == 7
        assert env.params == {"x": 1}

    def test_notification(self) -> None:
        env = parse_envelope({"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert isinstance(env, JSONRPCNotification)
        assert env.params is None

    def test_error(self) -> None:
        env = parse_envelope({"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "nope"}})
        assert isinstance(env, JSONRPCError)
        assert env.error.code == -32601

    def test_boolean_id_rejected(self) -> None:
        with pytest.raises(InvalidEnvelopeError) as info:
            parse_envelope({"jsonrpc": "2.0", "id": True, "method": "ping"})
        assert info.value.code == INVALID_REQUEST
        assert info.value.detail.startswith("request: id")

    def test_null_id_rejected(self) -> None:
        with pytest.raises(InvalidEnvelopeError):
            parse_envelope({"jsonrpc": "2.0", "id": None, "result": {}})

    def test_non_object_result_rejected(self) -> None:
        with pytest.raises(InvalidEnvelopeError) as info:
            parse_envelope({"jsonrpc": "2.0", "id": 1, "result": [1]})
        assert info.value.data[0]["loc"] == ["result"]

    def test_envelope_kind(self) -> None:
        env = JSONRPCResponse(id=1, result={})
        assert envelope_kind(env) is EnvelopeKind.RESPONSE

    def test_envelope_kind_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            envelope_kind({"jsonrpc": "2.0"})  # type: ignore[arg-type]
