# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the OpenCode SDK.

Metrics are recorded by the request engine and the SSE stream adapter
into a MetricsCollector. Prometheus export is enabled automatically when
prometheus_client is installed (``pip install opencode-sdk[prometheus]``).
"""

from .collector import (
    METRIC_DEFINITIONS,
    PROMETHEUS_AVAILABLE,
    MetricDefinition,
    MetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from .constants import (
    LATENCY_BUCKETS,
    METRIC_PREFIX,
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
    STREAM_ERRORS_TOTAL,
    STREAM_EVENTS_TOTAL,
)

__all__ = [
    "LATENCY_BUCKETS",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "PROMETHEUS_AVAILABLE",
    "REQUESTS_TOTAL",
    "REQUEST_DURATION_SECONDS",
    "REQUEST_RETRIES_TOTAL",
    "STREAM_ERRORS_TOTAL",
    "STREAM_EVENTS_TOTAL",
    "MetricDefinition",
    "MetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
