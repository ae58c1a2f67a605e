"""Message content and resource contents.

``Content`` is tagged by an explicit ``type`` field.  ``ResourceContents``
has no tag and is told apart by which payload field is present: exactly
one of ``text`` or ``blob``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Discriminator, Field, Tag

from mcpwire.schema.base import MCPModel, Uri

Role = Literal["user", "assistant"]


class TextContent(MCPModel):
    """Text provided to or from an LLM."""

    type: Literal["text"] = "text"
    text: str


class ImageContent(MCPModel):
    """An image provided to or from an LLM."""

    type: Literal["image"] = "image"
    data: str  # base64
    mime_type: str


Content = Annotated[TextContent | ImageContent, Field(discriminator="type")]


class SamplingMessage(MCPModel):
    """A message issued to or received from an LLM API."""

    role: Role
    content: Content


# ---------------------------------------------------------------------------
# Resource contents
# ---------------------------------------------------------------------------


class ResourceContents(MCPModel):
    """Fields shared by both kinds of resource contents."""

    uri: Uri
    mime_type: str | None = None


class TextResourceContents(ResourceContents):
    text: str


class BlobResourceContents(ResourceContents):
    blob: str  # base64


def _contents_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        has_text, has_blob = "text" in value, "blob" in value
    else:
        has_text, has_blob = isinstance(value, TextResourceContents), isinstance(value, BlobResourceContents)
    if has_text == has_blob:
        return None
    return "text" if has_text else "blob"


AnyResourceContents = Annotated[
    Annotated[TextResourceContents, Tag("text")] | Annotated[BlobResourceContents, Tag("blob")],
    Discriminator(
        _contents_kind,
        custom_error_type="resource_contents_ambiguous",
        custom_error_message="resource contents need exactly one of 'text' or 'blob'",
    ),
]
