"""Resources: URI-addressable content a server can supply."""

from __future__ import annotations

from typing import Literal

from mcpwire.schema.base import MCPModel, Notification, NotificationParams, Request, RequestParams, Result, Uri
from mcpwire.schema.content import AnyResourceContents


class Resource(MCPModel):
    """A known resource that the server is capable of reading."""

    uri: Uri
    name: str
    description: str | None = None
    mime_type: str | None = None


class ResourceTemplate(MCPModel):
    """A template description for resources available on the server.

    ``uri_template`` is an RFC 6570 URI template and is not checked as a URI.
    """

    uri_template: str
    name: str
    description: str | None = None
    mime_type: str | None = None


# ---------------------------------------------------------------------------
# resources/list
# ---------------------------------------------------------------------------


class ListResourcesRequest(Request):
    method: Literal["resources/list"] = "resources/list"


class ListResourcesResult(Result):
    resource_templates: list[ResourceTemplate] | None = None
    resources: list[Resource] | None = None


# ---------------------------------------------------------------------------
# resources/read
# ---------------------------------------------------------------------------


class ResourceRequestParams(RequestParams):
    """Params naming a single resource."""

    uri: Uri


class ReadResourceRequest(Request):
    method: Literal["resources/read"] = "resources/read"
    params: ResourceRequestParams


class ReadResourceResult(Result):
    contents: list[AnyResourceContents]


# ---------------------------------------------------------------------------
# Subscriptions
# ---------------------------------------------------------------------------


class SubscribeRequest(Request):
    """Ask for ``notifications/resources/updated`` whenever *uri* changes."""

    method: Literal["resources/subscribe"] = "resources/subscribe"
    params: ResourceRequestParams


class UnsubscribeRequest(Request):
    """Cancel a previous ``resources/subscribe``."""

    method: Literal["resources/unsubscribe"] = "resources/unsubscribe"
    params: ResourceRequestParams


class ResourceUpdatedNotificationParams(NotificationParams):
    uri: Uri


class ResourceUpdatedNotification(Notification):
    """A subscribed resource changed and may need to be read again."""

    method: Literal["notifications/resources/updated"] = "notifications/resources/updated"
    params: ResourceUpdatedNotificationParams


class ResourceListChangedNotification(Notification):
    method: Literal["notifications/resources/list_changed"] = "notifications/resources/list_changed"
