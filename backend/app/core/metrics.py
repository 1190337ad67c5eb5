"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at the /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'room_booking_attempts_total',
    'Total room booking attempts',
    ['operation', 'status']  # create/update; success, rejected, conflict
)

# Payment metrics
payment_attempts = Counter(
    'payment_attempts_total',
    'Total ticket payment attempts',
    ['status']  # success, rejected, conflict
)

payment_value = Histogram(
    'payment_value',
    'Value of processed payments',
    buckets=[1000, 5000, 10000, 25000, 50000, 100000, 250000]
)

# Cache metrics
cache_operations = Counter(
    'cache_operations_total',
    'Catalog cache operations',
    ['operation', 'result']  # get/set, hit/miss/error
)


def metrics_endpoint() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(operation: str, status: str):
    """Record booking attempt. Operation: create, update. Status: success, rejected, conflict"""
    booking_attempts.labels(operation=operation, status=status).inc()


def record_payment_attempt(status: str, value: int = None):
    payment_attempts.labels(status=status).inc()
    if value is not None:
        payment_value.observe(value)


def record_cache_operation(operation: str, result: str):
    cache_operations.labels(operation=operation, result=result).inc()
