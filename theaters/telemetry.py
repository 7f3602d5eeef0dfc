"""OpenTelemetry configuration for the theaters service."""

import os
import sys

from opentelemetry import metrics, trace
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from prometheus_client import start_http_server

from .logging_config import get_logger

logger = get_logger(__name__)

METRICS_PORT = 8080


def telemetry_enabled() -> bool:
    """Telemetry is opt-in via ENABLE_TELEMETRY and never active under tests."""
    if not os.getenv("ENABLE_TELEMETRY"):
        return False
    return "pytest" not in sys.modules and not os.getenv("TESTING")


def setup_telemetry(app):
    """Configure OpenTelemetry tracing and metrics for the FastAPI application."""
    if not telemetry_enabled():
        return

    try:
        prometheus_reader = PrometheusMetricReader()
        metrics.set_meter_provider(MeterProvider(metric_readers=[prometheus_reader]))

        metrics_port = METRICS_PORT
        try:
            start_http_server(metrics_port)
        except OSError:
            # Try next port if the default one is busy
            metrics_port += 1
            start_http_server(metrics_port)
        logger.info("Prometheus metrics server started", port=metrics_port)

        trace.set_tracer_provider(TracerProvider())
        tracer_provider = trace.get_tracer_provider()

        # Console exporter until an OTLP collector is deployed
        span_processor = BatchSpanProcessor(ConsoleSpanExporter())
        tracer_provider.add_span_processor(span_processor)  # type: ignore[attr-defined]

        FastAPIInstrumentor.instrument_app(app)
        SQLAlchemyInstrumentor().instrument()

        logger.info("OpenTelemetry tracing and metrics setup completed")

    except Exception as e:
        # Don't fail the application if telemetry setup fails
        logger.error("Failed to setup OpenTelemetry", error=str(e))
