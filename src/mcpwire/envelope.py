"""Envelope classification: decide which JSON-RPC shape an object is.

Resolution is deterministic and total: every decoded JSON value maps to
exactly one of the four envelope variants or raises
:class:`~mcpwire.errors.InvalidEnvelopeError`.
"""

from __future__ import annotations

import logging
from typing import Any, cast

from pydantic import ValidationError

from mcpwire.errors import InvalidEnvelopeError
from mcpwire.schema.base import JSONRPC_VERSION
from mcpwire.schema.jsonrpc import ENVELOPE_TYPES, EnvelopeKind, JSONRPCMessage

logger = logging.getLogger(__name__)

ENVELOPE_KEYS = frozenset({"jsonrpc", "id", "method", "params", "result", "error"})


def classify_envelope(raw: Any) -> EnvelopeKind:
    """Return the envelope variant *raw* belongs to.

    Rules are applied in order:

    1. no ``id`` and ``method`` -> notification
    2. ``id`` and ``method`` -> request
    3. ``id`` and ``error`` -> error response
    4. ``id`` and ``result`` -> success response

    Objects that are not mappings, lack ``jsonrpc: "2.0"``, carry keys
    outside the envelope, or hold both ``result`` and ``error`` are
    rejected before the rules run.
    """
    if not isinstance(raw, dict):
        raise InvalidEnvelopeError(f"expected a JSON object, got {type(raw).__name__}")
    obj = cast("dict[str, Any]", raw)

    unknown = sorted(set(obj) - ENVELOPE_KEYS)
    if unknown:
        raise InvalidEnvelopeError(f"unexpected top-level keys {unknown}")
    if obj.get("jsonrpc") != JSONRPC_VERSION:
        raise InvalidEnvelopeError(f"jsonrpc must be {JSONRPC_VERSION!r}")
    if "result" in obj and "error" in obj:
        raise InvalidEnvelopeError("both 'result' and 'error' present")

    has_id = "id" in obj
    if "method" in obj:
        return EnvelopeKind.REQUEST if has_id else EnvelopeKind.NOTIFICATION
    if has_id and "error" in obj:
        return EnvelopeKind.ERROR
    if has_id and "result" in obj:
        return EnvelopeKind.RESPONSE
    raise InvalidEnvelopeError("matches no request, notification, or response shape")


def parse_envelope(raw: Any) -> JSONRPCMessage:
    """Classify *raw* and validate it against the matching envelope model."""
    kind = classify_envelope(raw)
    model = ENVELOPE_TYPES[kind]
    try:
        envelope = model.model_validate(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        first = errors[0]
        loc = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise InvalidEnvelopeError(
            f"{kind.value}: {loc}: {first['msg']}",
            [{"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]} for e in errors],
        ) from exc
    logger.debug("Classified envelope as %s", kind.value)
    return cast("JSONRPCMessage", envelope)


def envelope_kind(envelope: JSONRPCMessage) -> EnvelopeKind:
    """Return the variant of an already-parsed envelope."""
    for kind, model in ENVELOPE_TYPES.items():
        if type(envelope) is model:
            return kind
    msg = f"not an envelope: {type(envelope).__name__}"
    raise TypeError(msg)
