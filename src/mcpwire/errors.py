"""Error codes and exception types for the protocol layer.

Every protocol-level failure is an :class:`McpError` carrying the JSON-RPC
``code`` a dispatcher would reply with, so it can be logged or turned into
an error envelope without access to the original request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from pydantic import ValidationError

    from mcpwire.schema.jsonrpc import ErrorObject

# Standard JSON-RPC error codes
PARSE_ERROR: Final[int] = -32700
INVALID_REQUEST: Final[int] = -32600
METHOD_NOT_FOUND: Final[int] = -32601
INVALID_PARAMS: Final[int] = -32602
INTERNAL_ERROR: Final[int] = -32603

# Local sentinel: the channel closed before any response arrived.  Never sent.
CONNECTION_CLOSED_ERROR: Final[int] = -1


class McpError(Exception):
    """Base error for all protocol-layer failures."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"MCP error {code}: {message}")

    def to_error_object(self) -> ErrorObject:
        """Return the ``error`` member for a JSON-RPC error response."""
        from mcpwire.schema.jsonrpc import ErrorObject

        return ErrorObject(code=self.code, message=self.message, data=self.data)

    @classmethod
    def from_error_object(cls, error: ErrorObject) -> McpError:
        """Wrap an error received from the peer.  The payload is not interpreted."""
        return cls(error.code, error.message, error.data)


class ParseError(McpError):
    """The input was not valid UTF-8 JSON text."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(PARSE_ERROR, "Parse error" + (f": {detail}" if detail else ""))


class InvalidRequestError(McpError):
    """The message is not an acceptable JSON-RPC request."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(INVALID_REQUEST, message, data)


class InvalidEnvelopeError(InvalidRequestError):
    """The object matches none (or more than one) of the four envelope shapes."""

    def __init__(self, detail: str, data: Any = None) -> None:
        self.detail = detail
        super().__init__(f"Invalid envelope: {detail}", data)


class RoleViolationError(InvalidRequestError):
    """The peer sent a method its role is not allowed to originate."""

    def __init__(self, method: str, role: str) -> None:
        self.method = method
        self.role = role
        super().__init__(f"Method {method!r} may not be sent by a {role}")


class MethodNotFoundError(McpError):
    """The method is not in the catalog."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(METHOD_NOT_FOUND, f"Method not found: {method}")


class InvalidParamsError(McpError):
    """The method is known but its params do not match the declared shape."""

    def __init__(self, method: str, detail: str = "", data: Any = None) -> None:
        self.method = method
        self.detail = detail
        msg = f"Invalid params for {method}"
        if detail:
            msg += f": {detail}"
        super().__init__(INVALID_PARAMS, msg, data)

    @classmethod
    def from_validation_error(cls, method: str, exc: ValidationError) -> InvalidParamsError:
        return cls(method, _summarize(exc), _error_list(exc))


class ProtocolVersionMismatchError(InvalidParamsError):
    """The peer's ``protocolVersion`` is not the one this package speaks."""

    def __init__(self, method: str, received: Any, expected: int) -> None:
        self.received = received
        self.expected = expected
        super().__init__(
            method,
            f"protocol version {received!r} does not match {expected}",
            {"received": received, "expected": expected},
        )


class InvalidResultError(McpError):
    """A response ``result`` does not match the expected shape.

    ``method`` names the request being answered.  When it is unknown the
    result was checked against everything ``sender`` may reply with.
    """

    def __init__(
        self,
        method: str | None,
        detail: str = "",
        data: Any = None,
        *,
        sender: str | None = None,
    ) -> None:
        self.method = method
        self.sender = sender
        self.detail = detail
        msg = f"Invalid result for {method}" if method else f"Invalid {sender or 'peer'} result"
        if detail:
            msg += f": {detail}"
        super().__init__(INTERNAL_ERROR, msg, data)

    @classmethod
    def from_validation_error(
        cls,
        method: str | None,
        exc: ValidationError,
        *,
        sender: str | None = None,
    ) -> InvalidResultError:
        return cls(method, _summarize(exc), _error_list(exc), sender=sender)


class ResultVersionMismatchError(InvalidResultError):
    """The server answered ``initialize`` with a foreign ``protocolVersion``."""

    def __init__(self, method: str | None, received: Any, expected: int, *, sender: str | None = None) -> None:
        self.received = received
        self.expected = expected
        super().__init__(
            method,
            f"protocol version {received!r} does not match {expected}",
            {"received": received, "expected": expected},
            sender=sender,
        )


class ConnectionClosedError(McpError):
    """The channel closed before a response was received."""

    def __init__(self, message: str = "Connection closed") -> None:
        super().__init__(CONNECTION_CLOSED_ERROR, message)


class SettingsError(Exception):
    """Raised when a settings file fails parsing or validation."""


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<root>"
    more = exc.error_count() - 1
    text = f"{loc}: {first['msg']}"
    if more:
        text += f" (+{more} more)"
    return text


def _error_list(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False, include_context=False)
    ]
