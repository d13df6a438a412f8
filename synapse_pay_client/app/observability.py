import logging
from typing import Optional

from opentelemetry import trace, metrics
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource, SERVICE_NAME as ResourceAttributesServiceName
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from pythonjsonlogger.json import JsonFormatter

from synapse_pay_client.app.config import settings


logger = logging.getLogger("synapse_pay_client")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(module)s %(funcName)s %(lineno)d %(message)s"

def setup_json_logging(log_level: Optional[str] = None, include_root: bool = False) -> logging.Handler:
    """
    Sends the client's log records to stderr as JSON. Meant to be called once by the
    application embedding the client; repeated calls reuse the installed handler.

    Args:
        log_level: Overrides settings.LOG_LEVEL.
        include_root: Install the handler on the root logger instead, so records of the
            host application (and of httpx) are formatted the same way.
    """
    target = logging.getLogger() if include_root else logger
    log_level = (log_level or settings.LOG_LEVEL).upper()
    existing = next((h for h in target.handlers if isinstance(h.formatter, JsonFormatter)), None)
    if existing is not None:
        target.setLevel(log_level)
        return existing

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(
        fmt=LOG_FORMAT,
        rename_fields={"levelname": "level", "name": "logger_name", "asctime": "timestamp"},
    ))
    target.addHandler(handler)
    target.setLevel(log_level)
    logger.setLevel(log_level)
    logger.info(f"JSON logging configured at level {log_level}.")
    return handler

def setup_opentelemetry(
    service_name: Optional[str] = None,
    otlp_endpoint: Optional[str] = None,
) -> TracerProvider:
    """
    Installs a TracerProvider so the spans around API requests are exported. Spans go
    to the OTLP collector when an endpoint is given (or set in settings), else to the console.
    """
    service_name = service_name or settings.SERVICE_NAME
    otlp_endpoint = otlp_endpoint or settings.OTEL_EXPORTER_OTLP_TRACES_ENDPOINT
    resource = Resource(attributes={
        ResourceAttributesServiceName: service_name,
    })
    tracer_provider = TracerProvider(resource=resource)
    if otlp_endpoint:
        logger.info(f"Configuring OTLP Span Exporter. Endpoint: {otlp_endpoint}")
        tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)))
    else:
        logger.info("OTLP Span Exporter not configured. Using Console for spans.")
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(tracer_provider)
    logger.info(f"OpenTelemetry TracerProvider configured for service: {service_name}.")
    return tracer_provider


# --- Tracer and Meter instances ---
# No-op until an application installs providers (see setup_opentelemetry).
tracer = trace.get_tracer("synapse_pay_client.tracer")
meter = metrics.get_meter("synapse_pay_client.meter")

api_requests_counter = meter.create_counter(
    name="synapse_pay_client.api.requests.total",
    description="Counts API requests sent, partitioned by method and status class.",
    unit="1"
)
