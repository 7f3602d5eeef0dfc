"""Business metrics for the theaters service."""

from opentelemetry import metrics

# Get meter for creating instruments
meter = metrics.get_meter(__name__)

# HTTP Request Metrics
http_request_duration = meter.create_histogram(
    name="http_request_duration_seconds",
    description="Duration of HTTP requests in seconds",
    unit="s",
)

http_requests_total = meter.create_counter(
    name="http_requests_total",
    description="Total number of HTTP requests",
)

http_request_errors = meter.create_counter(
    name="http_request_errors_total",
    description="Total number of HTTP request errors",
)

# Business Metrics
theaters_created_total = meter.create_counter(
    name="theaters_created_total",
    description="Total number of theaters created",
)

theaters_updated_total = meter.create_counter(
    name="theaters_updated_total",
    description="Total number of theaters updated",
)

theaters_deleted_total = meter.create_counter(
    name="theaters_deleted_total",
    description="Total number of theaters deleted",
)

theaters_active = meter.create_up_down_counter(
    name="theaters_active",
    description="Net number of theaters created minus deleted since startup",
)


def record_http_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record HTTP request metrics."""
    labels = {"method": method, "endpoint": endpoint, "status_code": str(status_code)}

    http_request_duration.record(duration, labels)
    http_requests_total.add(1, labels)

    if status_code >= 400:
        http_request_errors.add(1, labels)


def record_theater_created():
    """Record when a theater is created."""
    theaters_created_total.add(1)
    theaters_active.add(1)


def record_theater_updated():
    theaters_updated_total.add(1)


def record_theater_deleted():
    """Record when a theater is deleted."""
    theaters_deleted_total.add(1)
    theaters_active.add(-1)
