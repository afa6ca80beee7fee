"""
Prometheus metrics: HTTP traffic (middleware in main) and order operations (routes).
"""
from prometheus_client import Counter, Histogram, generate_latest

# HTTP: every request that reached the app, by method and final status code
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests handled",
    ["method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "Time from request ingress to response egress",
    ["method"],
)

# Orders: successful store operations
orders_created_total = Counter(
    "orders_created_total",
    "Total orders created",
)
order_status_updates_total = Counter(
    "order_status_updates_total",
    "Total successful status updates, by new status",
    ["status"],
)
orders_deleted_total = Counter(
    "orders_deleted_total",
    "Total orders deleted",
)


def get_metrics_content_type():
    return "text/plain; charset=utf-8; version=0.0.4"


def get_metrics_bytes():
    return generate_latest()
