"""Primitive value types and the open-map base model.

Every MCP object is an *open map*: implementation-defined keys may appear
next to the declared ones and must survive a validate/serialize round
trip.  :class:`MCPModel` carries that rule for the whole schema package.
"""

from __future__ import annotations

from typing import Annotated, Any, Final
from urllib.parse import urlsplit

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

JSONRPC_VERSION: Final[str] = "2.0"

# Booleans are valid JSON but not valid ids or tokens.
RequestId = StrictStr | StrictInt | StrictFloat
ProgressToken = StrictStr | StrictInt | StrictFloat


def _check_uri(value: str) -> str:
    if not urlsplit(value).scheme:
        msg = f"not an absolute URI: {value!r}"
        raise ValueError(msg)
    return value


Uri = Annotated[str, AfterValidator(_check_uri)]


class MCPModel(BaseModel):
    """Base for all MCP objects.

    Attributes are snake_case in Python and camelCase on the wire.
    Unknown keys are kept in ``model_extra`` and written back out by
    :meth:`to_wire`.  Declared fields are strict: a string is never
    coerced into a number or a boolean.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict sent on the wire."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Reserved ``_meta`` carriers
# ---------------------------------------------------------------------------


class RequestMeta(MCPModel):
    """``params._meta`` of a request."""

    progress_token: ProgressToken | None = None


class RequestParams(MCPModel):
    """Base for request params; only ``_meta`` is reserved."""

    meta: RequestMeta | None = Field(default=None, alias="_meta")


class NotificationParams(MCPModel):
    """Base for notification params; ``_meta`` is opaque."""

    meta: dict[str, Any] | None = Field(default=None, alias="_meta")


class Request(MCPModel):
    """A typed request body: ``method`` plus ``params``."""

    method: str
    params: RequestParams | None = None


class Notification(MCPModel):
    """A typed notification body: ``method`` plus ``params``."""

    method: str
    params: NotificationParams | None = None


class Result(MCPModel):
    """Base for every result; ``_meta`` is opaque."""

    meta: dict[str, Any] | None = Field(default=None, alias="_meta")


class EmptyResult(Result):
    """A success that carries no data."""
