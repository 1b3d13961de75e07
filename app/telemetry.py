import logging
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from models import db

logger = logging.getLogger(__name__)

_provider_installed = False


def init_tracing(app):
    """Initialize OpenTelemetry tracing for the Flask app.

    Spans are exported over OTLP/HTTP outside tests; under TESTING they are
    still created (so ``traceparent`` propagates) but not exported.
    """
    global _provider_installed
    if not _provider_installed:
        service_name = app.config.get("OTEL_SERVICE_NAME", "shopfront")
        provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
        if not app.config.get("TESTING"):
            endpoint = app.config.get("OTEL_EXPORTER_OTLP_ENDPOINT")
            provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
        trace.set_tracer_provider(provider)
        set_global_textmap(TraceContextTextMapPropagator())
        _provider_installed = True

    FlaskInstrumentor().instrument_app(app)
    with app.app_context():
        SQLAlchemyInstrumentor().instrument(engine=db.engine)
    logger.info("Tracing initialised")
