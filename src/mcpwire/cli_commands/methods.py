"""``mcpwire methods`` and ``mcpwire schema``: browse the method catalog."""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from mcpwire.catalog import CATALOG, PeerRole
from mcpwire.cli_commands._output import console, print_methods_table, print_schema
from mcpwire.schema.jsonrpc import EnvelopeKind


@click.command("methods")
@click.option(
    "--sender",
    type=click.Choice([role.value for role in PeerRole]),
    default=None,
    help="Only methods this role may send.",
)
@click.option(
    "--kind",
    type=click.Choice([EnvelopeKind.REQUEST.value, EnvelopeKind.NOTIFICATION.value]),
    default=None,
    help="Only requests or only notifications.",
)
def methods(sender: str | None, kind: str | None) -> None:
    """List the methods in the MCP catalog."""
    specs = CATALOG.methods(
        sender=PeerRole(sender) if sender else None,
        kind=EnvelopeKind(kind) if kind else None,
    )
    if not specs:
        console.print("[yellow]No matching methods.[/yellow]")
        return
    print_methods_table(specs)


@click.command("schema")
@click.argument("method")
@click.option("--result", "show_result", is_flag=True, help="Show the result schema instead.")
def schema(method: str, show_result: bool) -> None:
    """Print the JSON Schema for METHOD's message body (or its result)."""
    spec = CATALOG.lookup(method)
    if spec is None:
        console.print(f"[red]Unknown method:[/red] {escape(method)}")
        sys.exit(1)

    if show_result:
        if spec.result_type is None:
            console.print(f"[red]{method} is a notification and has no result[/red]")
            sys.exit(1)
        print_schema(spec.result_type.model_json_schema(by_alias=True))
        return

    print_schema(spec.message_type.model_json_schema(by_alias=True))
