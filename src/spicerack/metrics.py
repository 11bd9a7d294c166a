"""Prometheus metrics definitions for spicerack."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "spicerack_http_requests_total",
    "Total number of HTTP requests processed by the spicerack API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "spicerack_http_request_duration_seconds",
    "Latency of HTTP requests processed by the spicerack API",
    ["method", "path"],
)

SUBMISSIONS = Counter(
    "spicerack_spice_submissions_total",
    "Custom spice submissions by outcome",
    ["status"],
)

SNAPSHOT_SAVES = Counter(
    "spicerack_snapshot_saves_total",
    "Inventory snapshots written through the API",
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SNAPSHOT_SAVES",
    "SUBMISSIONS",
]
