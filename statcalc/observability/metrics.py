"""Prometheus metrics & middleware for the statistics service.

Collects per-endpoint request count and latency plus calculation outcomes,
exposes /metrics endpoint for Prometheus.
"""
from __future__ import annotations

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
import time

# Prometheus metric names as constants
REQUEST_COUNT_NAME = "statcalc_request_total"
REQUEST_LATENCY_NAME = "statcalc_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "statcalc_request_errors_total"
CALCULATION_COUNT_NAME = "statcalc_calculations_total"
CALCULATION_SIZE_NAME = "statcalc_calculation_values"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# REQUEST_COUNT: Counter for total HTTP requests, labeled by path, method, and status code.
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

# REQUEST_LATENCY: Histogram for request duration (seconds), labeled by path and method.
REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

# REQUEST_ERROR_COUNT: Counter for error responses (status >= 400)
REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# CALCULATION_COUNT: Counter for calculations, labeled by outcome
# ("ok", "empty_input", "insufficient_data").
CALCULATION_COUNT = Counter(
    name=CALCULATION_COUNT_NAME,
    documentation="Statistics calculations by outcome",
    labelnames=["outcome"],
)

# CALCULATION_SIZE: Histogram of how many values each successful calculation parsed.
CALCULATION_SIZE = Histogram(
    name=CALCULATION_SIZE_NAME,
    documentation="Number of parsed values per calculation",
    buckets=(2, 5, 10, 25, 50, 100, 250, 1000),
)

# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Middleware to collect metrics per request.
# - Records the start time.
# - On response, increments the request counter and observes the latency.
# - Labels come from the route path template (if available), HTTP method, and status code.
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        # Only instrument HTTP requests (not websockets, lifespan, etc.)
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code = message["status"]
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        await self.app(scope, receive, send_wrapper)

# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
# Exposes all Prometheus metrics in plaintext format for scraping.
metrics_router = APIRouter()

@metrics_router.get("/metrics")
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
