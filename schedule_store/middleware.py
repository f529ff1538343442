# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — request ID propagation and Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from schedule_store.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY

UNTRACKED_PATHS: tuple[str, ...] = ("/health", "/health/ready", "/metrics")


def endpoint_label(request: Request) -> str:
    """Route template (e.g. /api/v1/schedule/dates/{date}) so dates never become labels."""
    route = request.scope.get("route")
    if route is not None:
        return route.path
    return "unmatched"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID for distributed tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count and time schedule API requests."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if request.url.path in UNTRACKED_PATHS:
            return response

        endpoint = endpoint_label(request)
        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=endpoint,
            status=str(response.status_code),
        ).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(
            time.perf_counter() - start
        )
        return response
