"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at the /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # success, rejected, error
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking transaction latency',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Fare metrics
fare_lookups = Counter(
    'fare_lookups_total',
    'Fare table lookups by how the fare was resolved',
    ['resolution']  # forward, reverse, missing
)

# Account metrics
registrations = Counter(
    'registrations_total',
    'Registration attempts',
    ['result']  # created, duplicate
)

login_attempts = Counter(
    'login_attempts_total',
    'Login attempts',
    ['result']  # success, invalid
)

# Database metrics
db_operations = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation']  # read, write, error
)

# HTTP metrics
http_request_latency = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency',
    ['method', 'status_code'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(status: str):
    """Record booking attempt. Status: success, rejected, error"""
    booking_attempts.labels(status=status).inc()


def record_fare_lookup(resolution: str):
    """Record fare resolution. Resolution: forward, reverse, missing"""
    fare_lookups.labels(resolution=resolution).inc()


def record_registration(result: str):
    registrations.labels(result=result).inc()


def record_login(success: bool):
    result = "success" if success else "invalid"
    login_attempts.labels(result=result).inc()


def record_db_operation(operation: str):
    """Record database operation. Operation: read, write, error"""
    db_operations.labels(operation=operation).inc()
