"""JSON-RPC 2.0 envelopes.

The four wire shapes every MCP message travels in.  Envelopes are closed
at the top level (unknown keys are rejected) while ``params`` and
``result`` stay open maps; the method catalog narrows them later.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict

from mcpwire.schema.base import JSONRPC_VERSION, RequestId

if TYPE_CHECKING:
    from mcpwire.errors import McpError
    from mcpwire.schema.base import Notification, Request, Result


class EnvelopeKind(str, Enum):
    """Which of the four envelope variants a message is."""

    REQUEST = "request"
    NOTIFICATION = "notification"
    RESPONSE = "response"
    ERROR = "error"


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict sent on the wire."""
        return self.model_dump(mode="json", exclude_none=True)


# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JSONRPCRequest(_Envelope):
    """A request that expects a response."""

    id: RequestId
    method: str
    params: dict[str, Any] | None = None

    @classmethod
    def wrap(cls, request_id: str | int | float, request: Request) -> JSONRPCRequest:
        """Put a typed request into an envelope."""
        body = request.to_wire()
        return cls(id=request_id, method=body["method"], params=body.get("params"))


class JSONRPCNotification(_Envelope):
    """A notification which does not expect a response."""

    method: str
    params: dict[str, Any] | None = None

    @classmethod
    def wrap(cls, notification: Notification) -> JSONRPCNotification:
        """Put a typed notification into an envelope."""
        body = notification.to_wire()
        return cls(method=body["method"], params=body.get("params"))


class ErrorObject(BaseModel):
    """The ``error`` member of an error response."""

    model_config = ConfigDict(strict=True)

    code: int
    message: str
    data: Any = None


class JSONRPCResponse(_Envelope):
    """A successful (non-error) response to a request."""

    id: RequestId
    result: dict[str, Any]

    @classmethod
    def wrap(cls, request_id: str | int | float, result: Result) -> JSONRPCResponse:
        """Put a typed result into an envelope."""
        return cls(id=request_id, result=result.to_wire())


class JSONRPCError(_Envelope):
    """A response to a request that indicates an error occurred."""

    id: RequestId
    error: ErrorObject

    @classmethod
    def wrap(cls, request_id: str | int | float, error: McpError) -> JSONRPCError:
        """Build an error response from a raised :class:`~mcpwire.errors.McpError`."""
        return cls(id=request_id, error=error.to_error_object())

    def to_exception(self) -> McpError:
        """Rebuild the peer's error as an exception, fields untouched."""
        from mcpwire.errors import McpError

        return McpError.from_error_object(self.error)


JSONRPCMessage = JSONRPCRequest | JSONRPCNotification | JSONRPCResponse | JSONRPCError

ENVELOPE_TYPES: dict[EnvelopeKind, type[_Envelope]] = {
    EnvelopeKind.REQUEST: JSONRPCRequest,
    EnvelopeKind.NOTIFICATION: JSONRPCNotification,
    EnvelopeKind.RESPONSE: JSONRPCResponse,
    EnvelopeKind.ERROR: JSONRPCError,
}
