"""Logging setup, Prometheus metrics and OpenTelemetry tracing init."""
from __future__ import annotations
import logging
from prometheus_client import Counter, Histogram, start_http_server
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from .config import Settings

REQS = Counter("storeweb_requests_total", "Browse requests", ["mode"])
LAT = Histogram("storeweb_latency_seconds", "Browse latency", ["mode"])

def configure_logging(debug: bool = False) -> None:
    logger = logging.getLogger("storeweb")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logging.getLogger().handlers and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

def init_prom(port: int) -> None:
    if port:
        start_http_server(port)

def init_tracing(settings: Settings) -> None:
    """Export browse spans to the OTLP collector named in ``settings``."""
    if not settings.tracing:
        return
    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)))
    trace.set_tracer_provider(provider)

# proxy tracer; picks up the provider installed by init_tracing
tracer = trace.get_tracer("storeweb.browse")
