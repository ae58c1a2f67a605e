"""``mcpwire validate``: validate an NDJSON transcript of MCP messages."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import IO, Any

import click
from rich.markup import escape

from mcpwire.catalog import PeerRole
from mcpwire.cli_commands._output import LineReport, console, print_reports
from mcpwire.codec import decode_line, iter_lines
from mcpwire.config import SettingsLoader, ValidatorSettings
from mcpwire.errors import McpError, SettingsError
from mcpwire.utils.telemetry import configure_telemetry
from mcpwire.validator import MessageValidator

logger = logging.getLogger(__name__)


@click.command("validate")
@click.argument("source", type=click.File("rb"))
@click.option(
    "--peer",
    type=click.Choice([role.value for role in PeerRole]),
    default=None,
    help="Role of the party that sent the messages (enables the role check).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings YAML file.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log every validation step.")
def validate_cmd(
    source: IO[bytes],
    peer: str | None,
    config_path: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Validate each line of an NDJSON file of MCP messages.

    SOURCE is a file with one JSON-RPC message per line, or ``-`` for stdin.
    Responses are checked against the result shape of an earlier request
    in the same file with the same id.
    """
    try:
        settings = SettingsLoader(config_path).load() if config_path else ValidatorSettings()
    except SettingsError as exc:
        console.print(f"[red]Error loading settings:[/red] {escape(str(exc))}")
        sys.exit(2)

    if peer is not None:
        settings = settings.model_copy(update={"peer": PeerRole(peer)})

    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level.upper())
    _setup_telemetry(settings)

    validator = MessageValidator.from_settings(settings)
    reports: list[LineReport] = []
    pending: dict[str, str] = {}
    for number, line in iter_lines(source):
        reports.append(_check_line(validator, number, line, pending))

    print_reports(reports, as_json=as_json)
    if not all(r.ok for r in reports):
        sys.exit(1)


def _check_line(
    validator: MessageValidator,
    number: int,
    line: bytes | str,
    pending: dict[str, str],
) -> LineReport:
    try:
        raw = decode_line(line)
        request_method = _pending_method(raw, pending)
        validated = validator.validate(raw, request_method=request_method)
    except McpError as exc:
        return LineReport(line=number, ok=False, code=exc.code, detail=exc.message)

    if validated.method is not None and validated.id is not None:
        pending[json.dumps(validated.id)] = validated.method
    return LineReport(
        line=number,
        ok=True,
        kind=validated.kind.value,
        method=validated.method,
        id=validated.id,
        detail="" if validated.known or validated.method is None else "unknown method",
    )


def _pending_method(raw: Any, pending: dict[str, str]) -> str | None:
    if not isinstance(raw, dict) or "id" not in raw or "method" in raw:
        return None
    method = pending.pop(json.dumps(raw["id"]), None)
    return method if "result" in raw else None


def _setup_telemetry(settings: ValidatorSettings) -> None:
    telemetry = settings.telemetry
    if telemetry is None or not telemetry.enabled:
        return
    try:
        configure_telemetry(
            export_to_console=telemetry.export_to_console,
            otlp_endpoint=telemetry.otlp_endpoint,
        )
    except ImportError as exc:
        logger.warning("Telemetry disabled: %s", exc)
