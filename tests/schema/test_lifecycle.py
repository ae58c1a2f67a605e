"""Tests for initialize, ping and progress shapes."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from mcpwire.schema.lifecycle import (
    PROTOCOL_VERSION,
    PROTOCOL_VERSION_MISMATCH,
    InitializeRequestParams,
    InitializeResult,
    ProgressNotificationParams,
)

_CLIENT_INFO = {"name": "client", "version": "0.1"}


class TestProtocolVersion:
    def test_accepts_exact(self) -> None:
        params = InitializeRequestParams.model_validate({"protocolVersion": PROTOCOL_VERSION, "clientInfo": _CLIENT_INFO})
        assert params.protocol_version == 1
        assert params.capabilities.to_wire() == {}

    @pytest.mark.parametrize("version", ["1", 2, 0, True, 1.0, None])
    def test_rejects_anything_else(self, version: Any) -> None:
        with pytest.raises(ValidationError) as info:
            InitializeRequestParams.model_validate({"protocolVersion": version, "clientInfo": _CLIENT_INFO})
        assert info.value.errors()[0]["type"] == PROTOCOL_VERSION_MISMATCH

    def test_required(self) -> None:
        with pytest.raises(ValidationError):
            InitializeRequestParams.model_validate({"clientInfo": _CLIENT_INFO})

    def test_result_checked_too(self) -> None:
        with pytest.raises(ValidationError):
            InitializeResult.model_validate({"protocolVersion": 3, "serverInfo": _CLIENT_INFO})

    def test_wire_names(self) -> None:
        result = InitializeResult.model_validate(
            {"protocolVersion": 1, "capabilities": {"tools": {}}, "serverInfo": _CLIENT_INFO}
        )
        assert result.to_wire() == {
            "protocolVersion": 1,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": "client", "version": "0.1"},
        }


class TestProgress:
    def test_float_progress(self) -> None:
        params = ProgressNotificationParams.model_validate({"progressToken": 7, "progress": 0.5})
        assert params.progress == 0.5
        assert params.total is None

    def test_boolean_token_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProgressNotificationParams.model_validate({"progressToken": True, "progress": 1})

    @pytest.mark.parametrize("progress", ["5", "0.5", True])
    def test_non_numeric_progress_rejected(self, progress: Any) -> None:
        with pytest.raises(ValidationError):
            ProgressNotificationParams.model_validate({"progressToken": 7, "progress": progress})

    def test_integer_progress_stays_integer(self) -> None:
        params = ProgressNotificationParams.model_validate({"progressToken": 7, "progress": 3, "total": 4})
        assert type(params.progress) is int
