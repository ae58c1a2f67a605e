"""Prompts: named, parameterizable templates offered by the server."""

from __future__ import annotations

from typing import Literal

from mcpwire.schema.base import MCPModel, Request, RequestParams, Result
from mcpwire.schema.content import SamplingMessage


class PromptArgument(MCPModel):
    """Describes an argument that a prompt can accept."""

    name: str
    description: str | None = None
    required: bool | None = None


class Prompt(MCPModel):
    """A prompt or prompt template that the server offers."""

    name: str
    description: str | None = None
    arguments: list[PromptArgument] | None = None


class ListPromptsRequest(Request):
    method: Literal["prompts/list"] = "prompts/list"


class ListPromptsResult(Result):
    prompts: list[Prompt]


class GetPromptRequestParams(RequestParams):
    name: str
    arguments: dict[str, str] | None = None


class GetPromptRequest(Request):
    """Render a prompt, optionally templated with ``arguments``."""

    method: Literal["prompts/get"] = "prompts/get"
    params: GetPromptRequestParams


class GetPromptResult(Result):
    description: str | None = None
    messages: list[SamplingMessage]
