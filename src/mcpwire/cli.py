"""mcpwire CLI entrypoint."""

from __future__ import annotations

import click

from mcpwire import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcpwire")
def main() -> None:
    """mcpwire: MCP message schema and validation tools."""


# Register subcommands
from mcpwire.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
