"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mcpwire.catalog import MethodSpec  # noqa: TC001

console = Console()


class LineReport(BaseModel):
    """Validation outcome for one line of an NDJSON transcript."""

    line: int
    ok: bool
    kind: str | None = None
    method: str | None = None
    id: str | int | float | None = None
    code: int | None = None
    detail: str = ""


def print_reports(reports: list[LineReport], *, as_json: bool = False) -> None:
    """Pretty-print per-line validation results."""
    if as_json:
        console.print_json(json.dumps([r.model_dump() for r in reports]))
        return

    table = Table(title="Validation Results")
    table.add_column("Line", justify="right")
    table.add_column("Status")
    table.add_column("Kind")
    table.add_column("Method", style="cyan")
    table.add_column("Id")
    table.add_column("Detail")

    for report in reports:
        status = "[green]ok[/green]" if report.ok else f"[red]{report.code}[/red]"
        table.add_row(
            str(report.line),
            status,
            escape(report.kind or "-"),
            escape(report.method or "-"),
            "-" if report.id is None else escape(str(report.id)),
            escape(_truncate(report.detail)),
        )

    console.print(table)
    failed = sum(1 for r in reports if not r.ok)
    if failed:
        console.print(f"[red]{failed} of {len(reports)} message(s) invalid[/red]")
    else:
        console.print(f"[green]All {len(reports)} message(s) valid[/green]")


def print_methods_table(specs: list[MethodSpec]) -> None:
    """Pretty-print catalog entries as a table."""
    table = Table(title="MCP Methods")
    table.add_column("Method", style="cyan")
    table.add_column("Kind")
    table.add_column("Sent by")
    table.add_column("Result")
    table.add_column("Before init")

    for spec in specs:
        table.add_row(
            spec.method,
            spec.kind.value,
            ", ".join(sorted(role.value for role in spec.senders)),
            spec.result_type.__name__ if spec.result_type else "-",
            "yes" if spec.allowed_before_initialize else "",
        )

    console.print(table)


def print_schema(schema: dict[str, Any]) -> None:
    console.print_json(json.dumps(schema))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
