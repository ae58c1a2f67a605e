"""Method catalog: method name -> params/result shapes and sender roles.

The catalog is a static table.  Looking up an unknown method is not an
error in itself: :meth:`MethodCatalog.lookup` returns ``None`` and leaves
the ``MethodNotFound`` decision to the dispatcher, while
:meth:`MethodCatalog.parse_message` keeps "no such method" and "bad
params" apart as :class:`~mcpwire.errors.MethodNotFoundError` and
:class:`~mcpwire.errors.InvalidParamsError`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from mcpwire.errors import (
    InvalidParamsError,
    InvalidResultError,
    MethodNotFoundError,
    ProtocolVersionMismatchError,
    ResultVersionMismatchError,
)
from mcpwire.schema.base import EmptyResult, Notification, Request, Result
from mcpwire.schema.completion import CompleteRequest, CompleteResult
from mcpwire.schema.jsonrpc import EnvelopeKind
from mcpwire.schema.lifecycle import (
    PROTOCOL_VERSION,
    PROTOCOL_VERSION_MISMATCH,
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

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


class PeerRole(str, Enum):
    """Which party originates a message."""

    CLIENT = "client"
    SERVER = "server"


_CLIENT = frozenset({PeerRole.CLIENT})
_SERVER = frozenset({PeerRole.SERVER})
_BOTH = frozenset({PeerRole.CLIENT, PeerRole.SERVER})


@dataclass(frozen=True)
class MethodSpec:
    """One catalog entry."""

    method: str
    kind: EnvelopeKind
    message_type: type[Request] | type[Notification]
    senders: frozenset[PeerRole]
    result_type: type[Result] | None = None
    allowed_before_initialize: bool = False

    @property
    def is_request(self) -> bool:
        return self.kind is EnvelopeKind.REQUEST


def _request(
    message_type: type[Request],
    result_type: type[Result],
    senders: frozenset[PeerRole],
    *,
    allowed_before_initialize: bool = False,
) -> MethodSpec:
    return MethodSpec(
        method=_method_of(message_type),
        kind=EnvelopeKind.REQUEST,
        message_type=message_type,
        senders=senders,
        result_type=result_type,
        allowed_before_initialize=allowed_before_initialize,
    )


def _notification(
    message_type: type[Notification],
    senders: frozenset[PeerRole],
    *,
    allowed_before_initialize: bool = False,
) -> MethodSpec:
    return MethodSpec(
        method=_method_of(message_type),
        kind=EnvelopeKind.NOTIFICATION,
        message_type=message_type,
        senders=senders,
        allowed_before_initialize=allowed_before_initialize,
    )


def _method_of(message_type: type[Request] | type[Notification]) -> str:
    default = message_type.model_fields["method"].default
    if not isinstance(default, str):
        msg = f"{message_type.__name__} has no literal method name"
        raise TypeError(msg)
    return default


DEFAULT_ENTRIES: tuple[MethodSpec, ...] = (
    # Lifecycle
    _request(InitializeRequest, InitializeResult, _CLIENT, allowed_before_initialize=True),
    _request(PingRequest, EmptyResult, _BOTH),
    _notification(InitializedNotification, _CLIENT, allowed_before_initialize=True),
    _notification(ProgressNotification, _BOTH),
    # Resources
    _request(ListResourcesRequest, ListResourcesResult, _CLIENT),
    _request(ReadResourceRequest, ReadResourceResult, _CLIENT),
    _request(SubscribeRequest, EmptyResult, _CLIENT),
    _request(UnsubscribeRequest, EmptyResult, _CLIENT),
    _notification(ResourceListChangedNotification, _SERVER),
    _notification(ResourceUpdatedNotification, _SERVER),
    # Prompts
    _request(ListPromptsRequest, ListPromptsResult, _CLIENT),
    _request(GetPromptRequest, GetPromptResult, _CLIENT),
    # Tools
    _request(ListToolsRequest, ListToolsResult, _CLIENT),
    _request(CallToolRequest, CallToolResult, _CLIENT),
    _notification(ToolListChangedNotification, _SERVER),
    # Logging
    _request(SetLevelRequest, EmptyResult, _CLIENT),
    _notification(LoggingMessageNotification, _SERVER),
    # Sampling
    _request(CreateMessageRequest, CreateMessageResult, _SERVER),
    # Completion
    _request(CompleteRequest, CompleteResult, _CLIENT),
)


class MethodCatalog:
    """Exact-match table of MCP methods."""

    def __init__(self, entries: Iterable[MethodSpec] = DEFAULT_ENTRIES) -> None:
        self._entries: dict[str, MethodSpec] = {}
        for entry in entries:
            if entry.method in self._entries:
                msg = f"duplicate catalog entry for {entry.method!r}"
                raise ValueError(msg)
            self._entries[entry.method] = entry

    def __contains__(self, method: object) -> bool:
        return method in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, method: str) -> MethodSpec | None:
        """Return the entry for *method*, or ``None`` if it is unknown."""
        return self._entries.get(method)

    def require(self, method: str) -> MethodSpec:
        """Return the entry for *method*.

        Raises:
            MethodNotFoundError: If the method is not in the catalog.
        """
        spec = self._entries.get(method)
        if spec is None:
            raise MethodNotFoundError(method)
        return spec

    def methods(
        self,
        *,
        sender: PeerRole | None = None,
        kind: EnvelopeKind | None = None,
    ) -> list[MethodSpec]:
        """List entries, optionally filtered by sender role and kind."""
        return [
            spec
            for spec in self._entries.values()
            if (sender is None or sender in spec.senders) and (kind is None or spec.kind is kind)
        ]

    def may_send(self, role: PeerRole, method: str) -> bool:
        """Return ``True`` if *role* may originate *method*.  Unknown methods are ``False``."""
        spec = self._entries.get(method)
        return spec is not None and role in spec.senders

    def allowed_before_initialize(self, method: str) -> bool:
        """Return ``True`` if *method* may be sent before the handshake completes."""
        spec = self._entries.get(method)
        return spec is not None and spec.allowed_before_initialize

    def parse_message(self, method: str, params: dict[str, Any] | None = None) -> Request | Notification:
        """Validate *params* against the shape declared for *method*.

        Keys the shape does not declare are kept on the returned model.

        Raises:
            MethodNotFoundError: If the method is not in the catalog.
            InvalidParamsError: If *params* does not match the declared shape.
            ProtocolVersionMismatchError: If an ``initialize`` carries a
                foreign ``protocolVersion``.
        """
        spec = self.require(method)
        body: dict[str, Any] = {"method": method}
        if params is not None:
            body["params"] = params
        try:
            return spec.message_type.model_validate(body)
        except ValidationError as exc:
            raise_for_version_mismatch(method, exc)
            raise InvalidParamsError.from_validation_error(method, exc) from exc

    def parse_result(self, method: str, result: dict[str, Any]) -> Result:
        """Validate a response ``result`` against the shape for *method*.

        Raises:
            MethodNotFoundError: If the method is not in the catalog.
            InvalidResultError: If the method is a notification or the
                result does not match.
            ResultVersionMismatchError: If an ``initialize`` result
                carries a foreign ``protocolVersion``.
        """
        spec = self.require(method)
        if spec.result_type is None:
            raise InvalidResultError(method, "notifications have no result")
        try:
            return spec.result_type.model_validate(result)
        except ValidationError as exc:
            raise_for_result_version_mismatch(method, exc)
            raise InvalidResultError.from_validation_error(method, exc) from exc


def raise_for_version_mismatch(method: str, exc: ValidationError) -> None:
    """Re-raise a foreign ``protocolVersion`` in params as :class:`ProtocolVersionMismatchError`."""
    err = _version_mismatch(exc)
    if err is not None:
        raise ProtocolVersionMismatchError(method, err.get("ctx", {}).get("received"), PROTOCOL_VERSION) from exc


def raise_for_result_version_mismatch(method: str | None, exc: ValidationError, *, sender: str | None = None) -> None:
    """Re-raise a foreign ``protocolVersion`` in a result as :class:`ResultVersionMismatchError`."""
    err = _version_mismatch(exc)
    if err is not None:
        received = err.get("ctx", {}).get("received")
        raise ResultVersionMismatchError(method, received, PROTOCOL_VERSION, sender=sender) from exc


def _version_mismatch(exc: ValidationError) -> ErrorDetails | None:
    for err in exc.errors():
        if err["type"] == PROTOCOL_VERSION_MISMATCH:
            return err
    return None


CATALOG = MethodCatalog()
