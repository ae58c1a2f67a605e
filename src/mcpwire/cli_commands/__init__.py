"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from mcpwire.cli_commands.methods import methods, schema
    from mcpwire.cli_commands.validate import validate_cmd

    cli.add_command(validate_cmd)
    cli.add_command(methods)
    cli.add_command(schema)
