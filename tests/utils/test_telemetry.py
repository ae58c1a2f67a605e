"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry import trace

from mcpwire.utils.telemetry import (
    _INSTRUMENTATION_NAME,
    ATTR_ENVELOPE_KIND,
    ATTR_ERROR_CODE,
    ATTR_KNOWN_METHOD,
    ATTR_METHOD,
    configure_telemetry,
    get_tracer,
    record_message,
    record_rejection,
)
from mcpwire.validator import MessageValidator


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans should be no-ops."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("test") as span:
            span.set_attribute("key", "value")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_otlp_raises_without_exporter(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(
                    export_to_console=False,
                    otlp_endpoint="http://localhost:4317",
                )


class TestValidatorSpans:
    def test_span_attributes_on_success(self) -> None:
        span = MagicMock()
        with patch("mcpwire.validator._tracer") as tracer:
            tracer.start_as_current_span.return_value.__enter__.return_value = span
            MessageValidator().validate({"jsonrpc": "2.0", "id": 1, "method": "ping"})

        tracer.start_as_current_span.assert_called_once_with("mcpwire.validate")
        span.set_attribute.assert_any_call(ATTR_ENVELOPE_KIND, "request")
        span.set_attribute.assert_any_call(ATTR_METHOD, "ping")

    def test_error_code_recorded(self) -> None:
        span = MagicMock()
        with patch("mcpwire.validator._tracer") as tracer:
            tracer.start_as_current_span.return_value.__enter__.return_value = span
            outcome = MessageValidator().try_validate({"jsonrpc": "2.0"})

        assert not outcome.ok
        span.set_attribute.assert_any_call(ATTR_ERROR_CODE, -32600)


class TestRecordHelpers:
    def test_record_message(self) -> None:
        span = MagicMock()
        record_message(span, kind="notification", method="notifications/progress", known=True)

        span.set_attribute.assert_any_call(ATTR_ENVELOPE_KIND, "notification")
        span.set_attribute.assert_any_call(ATTR_METHOD, "notifications/progress")
        span.set_attribute.assert_any_call(ATTR_KNOWN_METHOD, True)

    def test_response_has_no_method(self) -> None:
        span = MagicMock()
        record_message(span, kind="response", method=None, known=False)

        span.set_attribute.assert_called_once_with(ATTR_ENVELOPE_KIND, "response")

    def test_record_rejection(self) -> None:
        span = MagicMock()
        record_rejection(span, -32700)

        span.set_attribute.assert_called_once_with(ATTR_ERROR_CODE, -32700)


class TestAttributeConstants:
    def test_constants_are_strings(self) -> None:
        assert isinstance(ATTR_METHOD, str)
        assert ATTR_METHOD.startswith("mcpwire.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "mcpwire"
