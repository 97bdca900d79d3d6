# src/decisionmaker/core/telemetry.py
"""Initializes OpenTelemetry tracing for the decision maker."""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .config import config

logger = logging.getLogger(__name__)


def initialize_telemetry() -> bool:
    """
    Configures the TracerProvider for OpenTelemetry when OTEL_ENABLED is set.
    Spans are exported via OTLP/HTTP. Returns True if tracing was enabled.
    """
    if not config.OTEL_ENABLED:
        logger.debug("OpenTelemetry disabled; spans are no-ops.")
        return False

    resource = Resource(attributes={SERVICE_NAME: "decisionmaker"})
    tracer_provider = TracerProvider(resource=resource)
    span_exporter = OTLPSpanExporter(endpoint=f"{config.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces")
    tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(tracer_provider)
    logger.info(f"OpenTelemetry initialized. Exporting to: {config.OTEL_EXPORTER_OTLP_ENDPOINT}")
    return True


# Proxy tracer: picks up the provider once initialize_telemetry() has run.
tracer = trace.get_tracer("decisionmaker.tracer")
