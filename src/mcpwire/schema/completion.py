"""Argument autocompletion (``completion/complete``)."""

from __future__ import annotations

from typing import Annotated, Final, Literal

from pydantic import Field

from mcpwire.schema.base import MCPModel, Request, RequestParams, Result

MAX_COMPLETION_VALUES: Final[int] = 100


class PromptReference(MCPModel):
    """Identifies a prompt."""

    type: Literal["ref/prompt"] = "ref/prompt"
    name: str


class ResourceReference(MCPModel):
    """A resource or resource template, by URI or URI template."""

    type: Literal["ref/resource"] = "ref/resource"
    uri: str


Reference = Annotated[PromptReference | ResourceReference, Field(discriminator="type")]


class CompletionArgument(MCPModel):
    name: str
    value: str


class CompleteRequestParams(RequestParams):
    ref: Reference
    argument: CompletionArgument


class CompleteRequest(Request):
    method: Literal["completion/complete"] = "completion/complete"
    params: CompleteRequestParams


class Completion(MCPModel):
    """Completion options for one argument.

    ``values`` never exceeds 100 entries; ``total`` may be larger.
    """

    values: list[str] = Field(max_length=MAX_COMPLETION_VALUES)
    total: int | None = None
    has_more: bool | None = None


class CompleteResult(Result):
    completion: Completion
