# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "schedule_requests_total",
    "Total HTTP requests to schedule store service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "schedule_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)

# ── Business Metrics (counters updated by the service layer) ──
SCHEDULE_WRITES = Counter(
    "schedule_writes_total",
    "Single-date schedule writes",
    ["kind", "outcome"],
)
RANGE_WRITES = Counter(
    "schedule_range_writes_total",
    "Date range schedule writes",
    ["outcome"],
)
SCHEDULE_LOOKUPS = Counter(
    "schedule_lookups_total",
    "Schedule reads performed",
    ["operation", "result"],
)
INVALID_INPUTS = Counter(
    "schedule_invalid_inputs_total",
    "Date/time inputs that could not be parsed",
    ["field"],
)
# Gauges read the service store at scrape time, see core/dependencies.py
DAYS_STORED = Gauge(
    "schedule_days_stored",
    "Days holding a standard schedule entry",
)
SPECIAL_ENTRIES_STORED = Gauge(
    "schedule_special_entries_stored",
    "Special schedule entries across all days",
)
