"""Prometheus metric definitions for the payment service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


payment_requests_total = Counter("payment_requests_total", "Total payment requests", ["service"])
payment_outcomes_total = Counter(
    "payment_outcomes_total",
    "Payment calls by terminal state",
    ["service", "gateway", "terminal_state"],
)
payment_latency_seconds = Histogram("payment_latency_seconds", "Payment latency seconds", ["service"])
provider_request_duration_seconds = Histogram(
    "provider_request_duration_seconds",
    "Outbound provider call duration seconds",
    ["gateway"],
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
