"""Tools: named, schema-described actions the server exposes."""

from __future__ import annotations

from typing import Any, Literal

from mcpwire.schema.base import MCPModel, Notification, Request, RequestParams, Result


class ToolInputSchema(MCPModel):
    """JSON Schema for a tool's arguments.  Always an object schema."""

    type: Literal["object"] = "object"
    properties: dict[str, dict[str, Any]] | None = None


class Tool(MCPModel):
    """Definition for a tool the client can call."""

    name: str
    description: str | None = None
    input_schema: ToolInputSchema


class ListToolsRequest(Request):
    method: Literal["tools/list"] = "tools/list"


class ListToolsResult(Result):
    tools: list[Tool]


class CallToolRequestParams(RequestParams):
    name: str
    arguments: dict[str, Any] | None = None


class CallToolRequest(Request):
    """Invoke a tool provided by the server."""

    method: Literal["tools/call"] = "tools/call"
    params: CallToolRequestParams


class CallToolResult(Result):
    """The server's response to a tool call.  ``tool_result`` is opaque."""

    tool_result: Any = None


class ToolListChangedNotification(Notification):
    method: Literal["notifications/tools/list_changed"] = "notifications/tools/list_changed"
