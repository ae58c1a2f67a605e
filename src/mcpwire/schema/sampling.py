"""Sampling: the server asks the client to run an LLM completion."""

from __future__ import annotations

from typing import Any, Literal

from mcpwire.schema.base import Request, RequestParams, Result
from mcpwire.schema.content import Content, Role, SamplingMessage

IncludeContext = Literal["none", "thisServer", "allServers"]
StopReason = Literal["endTurn", "stopSequence", "maxTokens"]


class CreateMessageRequestParams(RequestParams):
    messages: list[SamplingMessage]
    system_prompt: str | None = None
    include_context: IncludeContext | None = None
    temperature: int | float | None = None
    max_tokens: int
    stop_sequences: list[str] | None = None
    metadata: dict[str, Any] | None = None


class CreateMessageRequest(Request):
    """Server-initiated request to sample an LLM via the client.

    The client picks the model and may modify or drop ``system_prompt``
    and ``include_context``.
    """

    method: Literal["sampling/createMessage"] = "sampling/createMessage"
    params: CreateMessageRequestParams


class CreateMessageResult(Result):
    """The client's sampled message."""

    model: str
    stop_reason: StopReason
    role: Role
    content: Content
