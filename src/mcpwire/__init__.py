"""mcpwire: Model Context Protocol message schema and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from mcpwire.catalog import CATALOG as CATALOG
    from mcpwire.catalog import MethodCatalog as MethodCatalog
    from mcpwire.catalog import PeerRole as PeerRole
    from mcpwire.errors import McpError as McpError
    from mcpwire.roles import ClientNotification as ClientNotification
    from mcpwire.roles import ClientRequest as ClientRequest
    from mcpwire.roles import ClientResult as ClientResult
    from mcpwire.roles import ServerNotification as ServerNotification
    from mcpwire.roles import ServerRequest as ServerRequest
    from mcpwire.roles import ServerResult as ServerResult
    from mcpwire.validator import MessageValidator as MessageValidator
    from mcpwire.validator import ValidatedMessage as ValidatedMessage

_LAZY_EXPORTS = {
    "CATALOG": "mcpwire.catalog",
    "MethodCatalog": "mcpwire.catalog",
    "PeerRole": "mcpwire.catalog",
    "McpError": "mcpwire.errors",
    "ClientRequest": "mcpwire.roles",
    "ClientNotification": "mcpwire.roles",
    "ClientResult": "mcpwire.roles",
    "ServerRequest": "mcpwire.roles",
    "ServerNotification": "mcpwire.roles",
    "ServerResult": "mcpwire.roles",
    "MessageValidator": "mcpwire.validator",
    "ValidatedMessage": "mcpwire.validator",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'mcpwire' has no attribute {name!r}")
