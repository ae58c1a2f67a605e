"""MessageValidator: untyped JSON in, typed and role-checked message out.

Wraps the three validation stages in one call:

1. **Envelope**: classify into request / notification / response / error
   (:func:`~mcpwire.envelope.parse_envelope`).
2. **Catalog**: narrow ``params`` (or ``result``, when the originating
   method is known) into the method's typed model.
3. **Role**: reject methods the sending peer may not originate, and type
   responses to unseen requests by the results that peer may send.

Unknown methods are *not* an error here: the returned
:class:`ValidatedMessage` has ``message=None`` and the dispatcher decides
whether to answer ``MethodNotFound``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcpwire.catalog import CATALOG, MethodCatalog, MethodSpec, PeerRole
from mcpwire.codec import decode_line
from mcpwire.envelope import envelope_kind, parse_envelope
from mcpwire.errors import InvalidRequestError, McpError, RoleViolationError
from mcpwire.roles import parse_result_from
from mcpwire.schema.jsonrpc import (
    EnvelopeKind,
    JSONRPCError,
    JSONRPCMessage,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
)
from mcpwire.utils.telemetry import ATTR_PEER, get_tracer, record_message, record_rejection

if TYPE_CHECKING:
    from mcpwire.config import ValidatorSettings
    from mcpwire.schema.base import Notification, Request, Result

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


@dataclass(frozen=True)
class ValidatedMessage:
    """A message that passed validation."""

    kind: EnvelopeKind
    envelope: JSONRPCMessage
    message: Request | Notification | Result | None = None
    spec: MethodSpec | None = None

    @property
    def method(self) -> str | None:
        if isinstance(self.envelope, JSONRPCRequest | JSONRPCNotification):
            return self.envelope.method
        return None

    @property
    def id(self) -> str | int | float | None:
        if isinstance(self.envelope, JSONRPCNotification):
            return None
        return self.envelope.id

    @property
    def known(self) -> bool:
        """``True`` if the payload was narrowed to a typed model."""
        return self.message is not None

    @property
    def error(self) -> McpError | None:
        """The peer's error, for error responses."""
        if isinstance(self.envelope, JSONRPCError):
            return self.envelope.to_exception()
        return None


@dataclass(frozen=True)
class ValidationOutcome:
    """Either a :class:`ValidatedMessage` or the :class:`McpError` explaining the rejection."""

    message: ValidatedMessage | None = None
    error: McpError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MessageValidator:
    """Validate messages received from one peer.

    Args:
        peer: Role of the party that *sent* the messages.  ``None`` skips
            the role check.
        catalog: Method table to validate against.
    """

    def __init__(self, *, peer: PeerRole | None = None, catalog: MethodCatalog | None = None) -> None:
        self._peer = peer
        self._catalog = catalog or CATALOG

    @classmethod
    def from_settings(cls, settings: ValidatorSettings) -> MessageValidator:
        return cls(peer=settings.peer)

    @property
    def peer(self) -> PeerRole | None:
        return self._peer

    @property
    def catalog(self) -> MethodCatalog:
        return self._catalog

    def validate(self, raw: Any, *, request_method: str | None = None) -> ValidatedMessage:
        """Validate a decoded JSON value.

        Args:
            raw: The decoded JSON value.
            request_method: For responses, the method of the request being
                answered.  When given, ``result`` is validated against that
                method's result shape.  Otherwise, with a ``peer`` set, it is
                resolved against everything that peer may reply with.

        Raises:
            InvalidEnvelopeError: The value is not a JSON-RPC envelope.
            InvalidRequestError: A notification method was sent with an id,
                or a request method without one.
            RoleViolationError: The peer may not send this method.
            InvalidParamsError: The params do not match the method.
            InvalidResultError: The result does not match ``request_method``
                (or any result the peer may send).
            MethodNotFoundError: ``request_method`` is not in the catalog.
        """
        with _tracer.start_as_current_span("mcpwire.validate") as span:
            if self._peer is not None:
                span.set_attribute(ATTR_PEER, self._peer.value)
            try:
                validated = self._validate(raw, request_method)
            except McpError as exc:
                record_rejection(span, exc.code)
                logger.debug("Rejected message: %s", exc)
                raise
            record_message(span, kind=validated.kind.value, method=validated.method, known=validated.known)
            return validated

    def try_validate(self, raw: Any, *, request_method: str | None = None) -> ValidationOutcome:
        """Like :meth:`validate`, but return protocol errors instead of raising them."""
        try:
            return ValidationOutcome(message=self.validate(raw, request_method=request_method))
        except McpError as exc:
            return ValidationOutcome(error=exc)

    def decode(self, line: bytes | str, *, request_method: str | None = None) -> ValidatedMessage:
        """Parse one JSON line and validate it.  Raises :class:`~mcpwire.errors.ParseError` on bad JSON."""
        return self.validate(decode_line(line), request_method=request_method)

    def try_decode(self, line: bytes | str, *, request_method: str | None = None) -> ValidationOutcome:
        try:
            return ValidationOutcome(message=self.decode(line, request_method=request_method))
        except McpError as exc:
            return ValidationOutcome(error=exc)

    # ------------------------------------------------------------------

    def _validate(self, raw: Any, request_method: str | None) -> ValidatedMessage:
        envelope = parse_envelope(raw)
        kind = envelope_kind(envelope)

        if isinstance(envelope, JSONRPCRequest | JSONRPCNotification):
            return self._validate_call(kind, envelope)

        if isinstance(envelope, JSONRPCResponse):
            if request_method is not None:
                result = self._catalog.parse_result(request_method, envelope.result)
                return ValidatedMessage(kind, envelope, result, self._catalog.lookup(request_method))
            if self._peer is not None:
                return ValidatedMessage(kind, envelope, parse_result_from(self._peer, envelope.result))

        return ValidatedMessage(kind, envelope)

    def _validate_call(
        self,
        kind: EnvelopeKind,
        envelope: JSONRPCRequest | JSONRPCNotification,
    ) -> ValidatedMessage:
        method = envelope.method
        spec = self._catalog.lookup(method)
        if spec is None:
            logger.warning("Unknown method %r in %s", method, kind.value)
            return ValidatedMessage(kind, envelope)

        if spec.kind is not kind:
            msg = f"{method!r} must be sent as a {spec.kind.value}, got a {kind.value}"
            raise InvalidRequestError(msg)

        if self._peer is not None and self._peer not in spec.senders:
            logger.warning("%s sent %r, which only %s may send", self._peer.value, method, _senders(spec))
            raise RoleViolationError(method, self._peer.value)

        message = self._catalog.parse_message(method, envelope.params)
        logger.debug("Validated %s %r", kind.value, method)
        return ValidatedMessage(kind, envelope, message, spec)


def _senders(spec: MethodSpec) -> str:
    return "/".join(sorted(role.value for role in spec.senders))
