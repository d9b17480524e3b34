"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_operations = Counter(
    'booking_operations_total',
    'Successful booking operations',
    ['operation']  # create, change_room
)

# Error metrics
domain_errors = Counter(
    'domain_errors_total',
    'Domain errors returned to clients',
    ['kind']  # not_found, payment_required, forbidden, conflict, unauthorized
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )

def record_booking_operation(operation: str):
    """Record a successful booking operation. Operation: create, change_room"""
    booking_operations.labels(operation=operation).inc()

def record_domain_error(kind: str):
    domain_errors.labels(kind=kind).inc()
