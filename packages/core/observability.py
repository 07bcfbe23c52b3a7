from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)


EXPORTER_NONE = "none"
EXPORTER_CONSOLE = "console"
EXPORTER_OTLP = "otlp"

_logger = logging.getLogger("agent_lab.observability")


def _exporter_name() -> str:
    configured = os.getenv("OTEL_TRACES_EXPORTER", "").strip().lower()
    if configured:
        return configured
    return EXPORTER_OTLP if os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") else EXPORTER_NONE


def build_span_exporter(name: str) -> Optional[SpanExporter]:
    """Map an exporter name to an exporter; ``none`` disables tracing.

    Console spans go to stderr so they never mix with the MCP stdio stream
    or with CLI output.
    """
    if name == EXPORTER_NONE:
        return None
    if name == EXPORTER_CONSOLE:
        return ConsoleSpanExporter(out=sys.stderr)
    if name == EXPORTER_OTLP:
        endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        return OTLPSpanExporter(endpoint=endpoint) if endpoint else OTLPSpanExporter()
    raise RuntimeError(f"Unsupported OTEL_TRACES_EXPORTER: {name}")


def init_tracing(service_name: str) -> Optional[TracerProvider]:
    current = trace.get_tracer_provider()
    if isinstance(current, TracerProvider):
        return current

    exporter = build_span_exporter(_exporter_name())
    if exporter is None:
        return None

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _logger.info("tracing_enabled service=%s exporter=%s", service_name, type(exporter).__name__)
    return provider
