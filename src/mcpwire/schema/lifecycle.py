"""Initialization handshake, ping, and progress notifications."""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from mcpwire.schema.base import (
    EmptyResult,
    MCPModel,
    Notification,
    NotificationParams,
    ProgressToken,
    Request,
    RequestParams,
    Result,
)
from mcpwire.schema.capabilities import ClientCapabilities, Implementation, ServerCapabilities

PROTOCOL_VERSION: Final[int] = 1

PING_REQUEST_METHOD: Final = "ping"
PROGRESS_NOTIFICATION_METHOD: Final = "notifications/progress"

# pydantic error type raised for a foreign protocolVersion
PROTOCOL_VERSION_MISMATCH: Final = "protocol_version_mismatch"


def _check_protocol_version(value: Any) -> int:
    # Exact match only: no "1", 1.0 or True.
    if type(value) is not int or value != PROTOCOL_VERSION:
        raise PydanticCustomError(
            PROTOCOL_VERSION_MISMATCH,
            "protocol version {received} does not match {expected}",
            {"received": value, "expected": PROTOCOL_VERSION},
        )
    return value


class _VersionedModel(MCPModel):
    protocol_version: int

    @field_validator("protocol_version", mode="before")
    @classmethod
    def _exact_version(cls, value: Any) -> int:
        return _check_protocol_version(value)


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------


class InitializeRequestParams(_VersionedModel, RequestParams):
    capabilities: ClientCapabilities = Field(default_factory=ClientCapabilities)
    client_info: Implementation


class InitializeRequest(Request):
    """Sent from the client to the server when it first connects."""

    method: Literal["initialize"] = "initialize"
    params: InitializeRequestParams


class InitializeResult(_VersionedModel, Result):
    """The server's answer to ``initialize``."""

    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: Implementation


class InitializedNotification(Notification):
    """Sent from the client after initialization has finished."""

    method: Literal["notifications/initialized"] = "notifications/initialized"


# ---------------------------------------------------------------------------
# ping
# ---------------------------------------------------------------------------


class PingRequest(Request):
    """Liveness check, issued by either side."""

    method: Literal["ping"] = PING_REQUEST_METHOD


PingResult = EmptyResult


# ---------------------------------------------------------------------------
# progress
# ---------------------------------------------------------------------------


class Progress(MCPModel):
    """Progress so far, and the total if known."""

    progress: int | float
    total: int | float | None = None


class ProgressNotificationParams(NotificationParams, Progress):
    progress_token: ProgressToken


class ProgressNotification(Notification):
    """Out-of-band progress update for a long-running request."""

    method: Literal["notifications/progress"] = PROGRESS_NOTIFICATION_METHOD
    params: ProgressNotificationParams
