"""Tests for tool shapes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mcpwire.schema.tools import CallToolResult, Tool


class TestTool:
    def test_non_object_schema_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tool.model_validate({"name": "t", "inputSchema": {"type": "array"}})

    def test_input_schema_required(self) -> None:
        with pytest.raises(ValidationError):
            Tool.model_validate({"name": "t"})

    def test_schema_keywords_preserved(self) -> None:
        tool = Tool.model_validate({"name": "t", "inputSchema": {"type": "object", "required": ["q"]}})
        assert tool.input_schema.to_wire() == {"type": "object", "required": ["q"]}

    def test_wire_shape_only(self) -> None:
        tool = Tool.model_validate({"name": "t", "description": "d", "inputSchema": {"type": "object"}})
        assert set(Tool.model_fields) == {"name", "description", "input_schema"}
        assert not hasattr(tool, "to_function_schema")
        assert tool.to_wire() == {"name": "t", "description": "d", "inputSchema": {"type": "object"}}


class TestCallToolResult:
    def test_opaque_result(self) -> None:
        result = CallToolResult.model_validate({"toolResult": {"rows": [1, 2]}})
        assert result.tool_result == {"rows": [1, 2]}
