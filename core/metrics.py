"""
Prometheus metrics for the SeverKey service.

Custom metrics for store behaviour and request monitoring.
"""

from prometheus_client import Counter, Gauge, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Store metrics
store_operations_total = Counter(
    "store_operations_total",
    "Total collection store operations",
    ["collection", "operation"],
)

store_records = Gauge(
    "store_records",
    "Number of records held by a collection",
    ["collection"],
)

store_corrupt_records_total = Counter(
    "store_corrupt_records_total",
    "Stored records that failed to decode",
    ["collection"],
)

store_seed_batches_total = Counter(
    "store_seed_batches_total",
    "Seed batches inserted into empty collections",
    ["collection"],
)

# License metrics
licenses_created_total = Counter(
    "licenses_created_total",
    "Total licenses created",
)

licenses_revoked_total = Counter(
    "licenses_revoked_total",
    "Total licenses revoked",
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
