"""Role-scoped unions: which messages a client or a server may send.

Requests and notifications are tagged by ``method``.  Results carry no
tag, so they are told apart by marker keys (``protocolVersion``,
``completion``, ``tools`` ...) with :class:`EmptyResult` as the fallback.
When the originating method is known, prefer
:meth:`~mcpwire.catalog.MethodCatalog.parse_result`.

The :class:`~pydantic.TypeAdapter` for each union is built on first use.
"""

from __future__ import annotations

from functools import cache
from typing import Annotated, Any, cast

from pydantic import Discriminator, Field, Tag, TypeAdapter, ValidationError

from mcpwire.catalog import CATALOG, PeerRole, raise_for_result_version_mismatch, raise_for_version_mismatch
from mcpwire.errors import (
    InvalidParamsError,
    InvalidRequestError,
    InvalidResultError,
    MethodNotFoundError,
    RoleViolationError,
)
from mcpwire.schema.base import EmptyResult, Notification, Request, Result
from mcpwire.schema.completion import CompleteRequest, CompleteResult
from mcpwire.schema.jsonrpc import EnvelopeKind
from mcpwire.schema.lifecycle import (
    InitializedNotification,
    InitializeRequest,
    InitializeResult,
    PingRequest,
    ProgressNotification,
)
from mcpwire.schema.log import LoggingMessageNotification, SetLevelRequest
from mcpwire.schema.prompts import GetPromptRequest, GetPromptResult, ListPromptsRequest, ListPromptsResult
from mcpwire.schema.resources import (
    ListResourcesRequest,
    ListResourcesResult,
    ReadResourceRequest,
    ReadResourceResult,
    ResourceListChangedNotification,
    ResourceUpdatedNotification,
    SubscribeRequest,
    UnsubscribeRequest,
)
from mcpwire.schema.sampling import CreateMessageRequest, CreateMessageResult
from mcpwire.schema.tools import (
    CallToolRequest,
    CallToolResult,
    ListToolsRequest,
    ListToolsResult,
    ToolListChangedNotification,
)

# ---------------------------------------------------------------------------
# Client messages
# ---------------------------------------------------------------------------

ClientRequest = Annotated[
    PingRequest
    | InitializeRequest
    | CompleteRequest
    | SetLevelRequest
    | GetPromptRequest
    | ListPromptsRequest
    | ListResourcesRequest
    | ReadResourceRequest
    | SubscribeRequest
    | UnsubscribeRequest
    | CallToolRequest
    | ListToolsRequest,
    Field(discriminator="method"),
]

ClientNotification = Annotated[
    ProgressNotification | InitializedNotification,
    Field(discriminator="method"),
]

# Marker keys, checked in order; the first key present picks the result type.
_CLIENT_RESULT_MARKERS: tuple[tuple[str, type[Result]], ...] = (
    ("stopReason", CreateMessageResult),
    ("model", CreateMessageResult),
)

_SERVER_RESULT_MARKERS: tuple[tuple[str, type[Result]], ...] = (
    ("protocolVersion", InitializeResult),
    ("completion", CompleteResult),
    ("messages", GetPromptResult),
    ("prompts", ListPromptsResult),
    ("contents", ReadResourceResult),
    ("tools", ListToolsResult),
    ("resources", ListResourcesResult),
    ("resourceTemplates", ListResourcesResult),
    ("toolResult", CallToolResult),
)


def _result_tag(markers: tuple[tuple[str, type[Result]], ...]) -> Any:
    def tag(value: Any) -> str:
        if isinstance(value, dict):
            for key, result_type in markers:
                if key in value:
                    return result_type.__name__
            return EmptyResult.__name__
        return type(value).__name__

    return tag


ClientResult = Annotated[
    Annotated[CreateMessageResult, Tag("CreateMessageResult")] | Annotated[EmptyResult, Tag("EmptyResult")],
    Discriminator(_result_tag(_CLIENT_RESULT_MARKERS)),
]

# ---------------------------------------------------------------------------
# Server messages
# ---------------------------------------------------------------------------

ServerRequest = Annotated[
    PingRequest | CreateMessageRequest,
    Field(discriminator="method"),
]

ServerNotification = Annotated[
    ProgressNotification
    | LoggingMessageNotification
    | ResourceUpdatedNotification
    | ResourceListChangedNotification
    | ToolListChangedNotification,
    Field(discriminator="method"),
]

ServerResult = Annotated[
    Annotated[EmptyResult, Tag("EmptyResult")]
    | Annotated[InitializeResult, Tag("InitializeResult")]
    | Annotated[CompleteResult, Tag("CompleteResult")]
    | Annotated[GetPromptResult, Tag("GetPromptResult")]
    | Annotated[ListPromptsResult, Tag("ListPromptsResult")]
    | Annotated[ListResourcesResult, Tag("ListResourcesResult")]
    | Annotated[ReadResourceResult, Tag("ReadResourceResult")]
    | Annotated[CallToolResult, Tag("CallToolResult")]
    | Annotated[ListToolsResult, Tag("ListToolsResult")],
    Discriminator(_result_tag(_SERVER_RESULT_MARKERS)),
]

_UNIONS: dict[str, Any] = {
    "ClientRequest": ClientRequest,
    "ClientNotification": ClientNotification,
    "ClientResult": ClientResult,
    "ServerRequest": ServerRequest,
    "ServerNotification": ServerNotification,
    "ServerResult": ServerResult,
}


@cache
def adapter(name: str) -> TypeAdapter[Any]:
    """Return the (cached) :class:`TypeAdapter` for a role union by name."""
    return TypeAdapter(_UNIONS[name])


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_message(
    union: str,
    role: PeerRole,
    kind: EnvelopeKind,
    method: str,
    params: dict[str, Any] | None,
) -> Any:
    body: dict[str, Any] = {"method": method}
    if params is not None:
        body["params"] = params
    try:
        return adapter(union).validate_python(body)
    except ValidationError as exc:
        if exc.errors()[0]["type"] == "union_tag_invalid":
            spec = CATALOG.lookup(method)
            if spec is None:
                raise MethodNotFoundError(method) from exc
            if spec.kind is not kind:
                msg = f"{method!r} must be sent as a {spec.kind.value}, got a {kind.value}"
                raise InvalidRequestError(msg) from exc
            raise RoleViolationError(method, role.value) from exc
        raise_for_version_mismatch(method, exc)
        raise InvalidParamsError.from_validation_error(method, exc) from exc


def _parse_result(union: str, role: PeerRole, result: dict[str, Any]) -> Result:
    try:
        return cast("Result", adapter(union).validate_python(result))
    except ValidationError as exc:
        raise_for_result_version_mismatch(None, exc, sender=role.value)
        raise InvalidResultError.from_validation_error(None, exc, sender=role.value) from exc


def parse_client_request(method: str, params: dict[str, Any] | None = None) -> Request:
    """Validate a request a client sent.  Server-only methods raise :class:`RoleViolationError`."""
    return cast("Request", _parse_message("ClientRequest", PeerRole.CLIENT, EnvelopeKind.REQUEST, method, params))


def parse_client_notification(method: str, params: dict[str, Any] | None = None) -> Notification:
    return cast(
        "Notification",
        _parse_message("ClientNotification", PeerRole.CLIENT, EnvelopeKind.NOTIFICATION, method, params),
    )


def parse_client_result(result: dict[str, Any]) -> Result:
    return _parse_result("ClientResult", PeerRole.CLIENT, result)


def parse_server_request(method: str, params: dict[str, Any] | None = None) -> Request:
    """Validate a request a server sent.  Client-only methods raise :class:`RoleViolationError`."""
    return cast("Request", _parse_message("ServerRequest", PeerRole.SERVER, EnvelopeKind.REQUEST, method, params))


def parse_server_notification(method: str, params: dict[str, Any] | None = None) -> Notification:
    return cast(
        "Notification",
        _parse_message("ServerNotification", PeerRole.SERVER, EnvelopeKind.NOTIFICATION, method, params),
    )


def parse_server_result(result: dict[str, Any]) -> Result:
    return _parse_result("ServerResult", PeerRole.SERVER, result)


def parse_result_from(sender: PeerRole, result: dict[str, Any]) -> Result:
    """Validate a result by marker keys, against everything *sender* may reply with."""
    if sender is PeerRole.SERVER:
        return parse_server_result(result)
    return parse_client_result(result)
