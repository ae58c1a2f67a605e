"""Server-to-client log forwarding (``logging/*``)."""

from __future__ import annotations

from typing import Any, Literal

from mcpwire.schema.base import Notification, NotificationParams, Request, RequestParams

LoggingLevel = Literal["debug", "info", "warning", "error"]

LOGGING_LEVELS: tuple[LoggingLevel, ...] = ("debug", "info", "warning", "error")


def level_at_least(level: LoggingLevel, threshold: LoggingLevel) -> bool:
    """Return ``True`` if *level* is as severe as *threshold* or more."""
    return LOGGING_LEVELS.index(level) >= LOGGING_LEVELS.index(threshold)


class SetLevelRequestParams(RequestParams):
    level: LoggingLevel


class SetLevelRequest(Request):
    """Client asks the server to send logs at ``level`` and above."""

    method: Literal["logging/setLevel"] = "logging/setLevel"
    params: SetLevelRequestParams


class LoggingMessageNotificationParams(NotificationParams):
    level: LoggingLevel
    logger: str | None = None
    data: Any = None


class LoggingMessageNotification(Notification):
    """A log message passed from server to client."""

    method: Literal["notifications/message"] = "notifications/message"
    params: LoggingMessageNotificationParams
