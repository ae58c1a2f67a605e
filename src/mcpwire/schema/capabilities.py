"""Capabilities and implementation info exchanged during ``initialize``.

A capability is advertised by the *presence* of its key.  Known keys are
declared here, but the sets are open: peers may add their own and they
are preserved.
"""

from __future__ import annotations

from typing import Any

from mcpwire.schema.base import MCPModel


class Implementation(MCPModel):
    """Name and version of an MCP implementation."""

    name: str
    version: str


class _Capabilities(MCPModel):
    experimental: dict[str, dict[str, Any]] | None = None

    def supports(self, path: str) -> bool:
        """Return ``True`` if the dotted capability *path* is advertised.

        Object-valued keys count by presence; boolean sub-flags such as
        ``resources.subscribe`` count by value, so an explicit ``false``
        reads the same as an absent key.
        """
        node: Any = self.to_wire()
        for part in path.split("."):
            if not isinstance(node, dict) or part not in node:
                return False
            node = node[part]
        if isinstance(node, bool):
            return node
        return node is not None


class ClientCapabilities(_Capabilities):
    """Capabilities a client may support."""

    sampling: dict[str, Any] | None = None


class ResourcesCapability(MCPModel):
    """Present if the server offers resources to read."""

    subscribe: bool | None = None


class ServerCapabilities(_Capabilities):
    """Capabilities a server may support."""

    logging: dict[str, Any] | None = None
    prompts: dict[str, Any] | None = None
    resources: ResourcesCapability | None = None
    tools: dict[str, Any] | None = None
