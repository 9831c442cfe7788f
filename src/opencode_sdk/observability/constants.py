# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `opencode_sdk_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Histogram metrics for time end with `_seconds`

Label Best Practices:
    To prevent label cardinality explosion, use only:
    - `method` - HTTP method (GET, POST, PUT, PATCH, DELETE)
    - `outcome` - Request outcome (success, error)
    - `reason` - Retry reason (status code or error kind)
    - `event_type` - SSE event type (message.updated, session.idle, ...)
    - `error_type` - Stream error kind (serialization, connection)

    NEVER use:
    - `session_id` - Unique per session (unbounded!)
    - `path` - Contains session/message IDs (unbounded!)
"""


# =============================================================================
# Global Prefix
# =============================================================================

METRIC_PREFIX = "opencode_sdk"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# Request Engine Metrics (client.py)
# =============================================================================

REQUESTS_TOTAL = f"{METRIC_PREFIX}_requests_total"
"""Total logical requests, labelled by final outcome."""

REQUEST_RETRIES_TOTAL = f"{METRIC_PREFIX}_request_retries_total"
"""Total retry attempts scheduled by the request engine."""

REQUEST_DURATION_SECONDS = f"{METRIC_PREFIX}_request_duration_seconds"
"""Wall-clock duration of logical requests, retries and backoff included."""


# =============================================================================
# Streaming Metrics (streaming/stream.py)
# =============================================================================

STREAM_EVENTS_TOTAL = f"{METRIC_PREFIX}_stream_events_total"
"""Total events decoded from SSE streams."""

STREAM_ERRORS_TOTAL = f"{METRIC_PREFIX}_stream_errors_total"
"""Total per-item errors surfaced by SSE streams."""


# =============================================================================
# Histogram Buckets
# =============================================================================

LATENCY_BUCKETS: list[float] = [
    0.005,
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
    30.0,
    60.0,
]
"""Buckets for request duration histograms, in seconds."""


__all__ = [
    "LATENCY_BUCKETS",
    "METRIC_PREFIX",
    "REQUESTS_TOTAL",
    "REQUEST_DURATION_SECONDS",
    "REQUEST_RETRIES_TOTAL",
    "STREAM_ERRORS_TOTAL",
    "STREAM_EVENTS_TOTAL",
]
