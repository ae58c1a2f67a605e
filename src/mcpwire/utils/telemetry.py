"""OpenTelemetry tracing for message validation.

Only the OpenTelemetry *API* is a hard dependency.  Until
:func:`configure_telemetry` installs an SDK tracer provider, every span
created here is a no-op.

Usage::

    from mcpwire.utils.telemetry import get_tracer, record_message

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("mcpwire.validate") as span:
        record_message(span, kind="request", method="ping", known=True)
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Span attribute keys
# ---------------------------------------------------------------------------

ATTR_ENVELOPE_KIND = "mcpwire.envelope.kind"
ATTR_METHOD = "mcpwire.method"
ATTR_PEER = "mcpwire.peer"
ATTR_KNOWN_METHOD = "mcpwire.method.known"
ATTR_ERROR_CODE = "mcpwire.error.code"

_INSTRUMENTATION_NAME = "mcpwire"

_INSTALL_HINT = "Install it with: pip install mcpwire[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a tracer for *name*, defaulting to the package name."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def record_message(span: trace.Span, *, kind: str, method: str | None, known: bool) -> None:
    """Tag *span* with the outcome of a successful validation."""
    span.set_attribute(ATTR_ENVELOPE_KIND, kind)
    if method is not None:
        span.set_attribute(ATTR_METHOD, method)
        span.set_attribute(ATTR_KNOWN_METHOD, known)


def record_rejection(span: trace.Span, code: int) -> None:
    """Tag *span* with the JSON-RPC error code of a rejected message."""
    span.set_attribute(ATTR_ERROR_CODE, code)


def configure_telemetry(
    *,
    service_name: str = "mcpwire",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider (requires the ``otel`` extra).

    Args:
        service_name: Value of the ``service.name`` resource attribute.
        export_to_console: Print finished spans to stdout.
        otlp_endpoint: If set, also ship spans over OTLP/gRPC.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, with *otlp_endpoint*,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for configure_telemetry(). {_INSTALL_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[Any]:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))
    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_INSTALL_HINT}"
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    return processors
