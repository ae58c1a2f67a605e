"""Smoke tests: package metadata and lazy exports."""

from __future__ import annotations


def test_version() -> None:
    from mcpwire import __version__

    assert __version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from mcpwire.cli import main

    assert callable(main)


def test_lazy_exports() -> None:
    import mcpwire

    assert mcpwire.MessageValidator.__name__ == "MessageValidator"
    assert mcpwire.PeerRole.CLIENT.value == "client"
    assert "ping" in mcpwire.CATALOG


def test_unknown_attribute() -> None:
    import pytest

    import mcpwire

    with pytest.raises(AttributeError, match="no attribute"):
        _ = mcpwire.DoesNotExist  # type: ignore[attr-defined]


def test_role_unions_exported() -> None:
    import mcpwire
    from mcpwire import roles

    assert mcpwire.ServerResult is roles.ServerResult
    assert mcpwire.ClientRequest is roles.ClientRequest
