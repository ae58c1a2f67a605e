"""Line codec: newline-delimited UTF-8 JSON.

Framing only; reading from or writing to a stream is the transport's job.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from mcpwire.errors import ParseError

if TYPE_CHECKING:
    from mcpwire.schema.jsonrpc import JSONRPCMessage


def encode_line(message: JSONRPCMessage) -> bytes:
    """Serialize an envelope to one newline-terminated JSON line."""
    return json.dumps(message.to_wire(), separators=(",", ":"), ensure_ascii=False).encode("utf-8") + b"\n"


def decode_line(data: bytes | str) -> Any:
    """Parse one line of JSON.

    Any JSON value is returned; shape checks belong to
    :func:`~mcpwire.envelope.parse_envelope`.

    Raises:
        ParseError: If the line is not UTF-8 or not JSON.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"invalid UTF-8: {exc.reason}") from exc
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{exc.msg} at line {exc.lineno} column {exc.colno}") from exc


def iter_lines(chunks: Iterable[bytes | str]) -> Iterator[tuple[int, bytes | str]]:
    """Yield ``(line_number, line)`` for every non-blank line, numbered from 1."""
    for number, line in enumerate(chunks, start=1):
        if line.strip():
            yield number, line
