"""OpenTelemetry tracing configuration."""

from __future__ import annotations

from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from warehouse_shelving.enterprise.config.settings import TelemetrySettings


def configure_tracer(settings: TelemetrySettings) -> None:
    """Configure OTLP tracing for the application."""

    resource = Resource.create({"service.name": settings.service_name})
    provider = TracerProvider(resource=resource)

    if settings.otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)


def get_tracer(name: Optional[str] = None) -> trace.Tracer:
    return trace.get_tracer(name or "warehouse_shelving")
