# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metrics collector for the request engine and the SSE stream adapter.

Counters and histograms are always kept in plain dicts so they can be
inspected or exported as JSON. When prometheus_client is installed, every
update is mirrored into Prometheus metrics registered on demand.

Usage:
    >>> from opencode_sdk.observability import get_metrics_collector
    >>> collector = get_metrics_collector()
    >>> collector.inc_counter('opencode_sdk_requests_total',
    ...                       labels={'method': 'GET', 'outcome': 'success'})
    >>> snapshot = collector.get_metrics()

Thread Safety:
    All dict updates happen under an RLock. Prometheus metrics carry their
    own locking.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from .constants import (
    LATENCY_BUCKETS,
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
    STREAM_ERRORS_TOTAL,
    STREAM_EVENTS_TOTAL,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from prometheus_client import (
        CollectorRegistry as CollectorRegistryType,
        Counter as CounterType,
        Histogram as HistogramType,
    )
else:
    CounterType = object
    HistogramType = object
    CollectorRegistryType = object

try:
    from prometheus_client import (
        REGISTRY as _REGISTRY,
        Counter as _Counter,
        Histogram as _Histogram,
    )

    Counter: type[CounterType] | None = _Counter
    Histogram: type[HistogramType] | None = _Histogram
    REGISTRY: CollectorRegistryType | None = _REGISTRY
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    Histogram = None
    REGISTRY = None
    PROMETHEUS_AVAILABLE = False


@dataclass
class MetricDefinition:
    """Schema of a metric: its kind, help text, label names and buckets."""

    name: str
    metric_type: str  # 'counter' or 'histogram'
    description: str
    label_names: tuple[str, ...] = ()
    buckets: list[float] | None = None


METRIC_DEFINITIONS: dict[str, MetricDefinition] = {
    REQUESTS_TOTAL: MetricDefinition(
        REQUESTS_TOTAL,
        "counter",
        "Total logical requests by final outcome",
        ("method", "outcome"),
    ),
    REQUEST_RETRIES_TOTAL: MetricDefinition(
        REQUEST_RETRIES_TOTAL,
        "counter",
        "Total retry attempts scheduled",
        ("reason",),
    ),
    REQUEST_DURATION_SECONDS: MetricDefinition(
        REQUEST_DURATION_SECONDS,
        "histogram",
        "Duration of logical requests including retries",
        ("method",),
        buckets=LATENCY_BUCKETS,
    ),
    STREAM_EVENTS_TOTAL: MetricDefinition(
        STREAM_EVENTS_TOTAL,
        "counter",
        "Total events decoded from SSE streams",
        ("event_type",),
    ),
    STREAM_ERRORS_TOTAL: MetricDefinition(
        STREAM_ERRORS_TOTAL,
        "counter",
        "Total per-item errors surfaced by SSE streams",
        ("error_type",),
    ),
}


class MetricsCollector:
    """
    Dict-backed counters and histograms with optional Prometheus mirroring.

    Cardinality Protection:
        At most MAX_LABEL_COMBINATIONS distinct label sets are tracked per
        metric. Further combinations are dropped with a warning.

    Example:
        >>> collector = MetricsCollector(enable_prometheus=False)
        >>> collector.inc_counter('opencode_sdk_request_retries_total',
        ...                       labels={'reason': '429'})
        >>> collector.get_counter('opencode_sdk_request_retries_total',
        ...                       labels={'reason': '429'})
        1
    """

    MAX_LABEL_COMBINATIONS: ClassVar[int] = 1000

    # Recent observations kept per histogram label set
    MAX_OBSERVATIONS: ClassVar[int] = 10000

    def __init__(
        self,
        enable_prometheus: bool = True,
        registry: Any | None = None,
    ) -> None:
        """
        Initialize the metrics collector.

        Args:
            enable_prometheus: Mirror metrics into Prometheus when it is installed
            registry: Optional Prometheus CollectorRegistry, mainly for tests
        """
        self._enable_prometheus = enable_prometheus and PROMETHEUS_AVAILABLE
        self._registry = registry if registry is not None else REGISTRY

        self._counters: dict[str, dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._histograms: dict[str, dict[str, list[float]]] = defaultdict(
            lambda: defaultdict(list)
        )
        self._label_combinations: dict[str, set[str]] = defaultdict(set)
        self._prom_metrics: dict[str, Any] = {}
        self._lock = threading.RLock()

        logger.debug(
            f"MetricsCollector initialized "
            f"(prometheus={'enabled' if self._enable_prometheus else 'disabled'})"
        )

    @staticmethod
    def _labels_to_key(labels: dict[str, str] | None) -> str:
        if not labels:
            return ""
        return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))

    def _check_cardinality(self, name: str, label_key: str) -> bool:
        """Return True if this label combination may be recorded."""
        seen = self._label_combinations[name]
        if label_key in seen:
            return True
        if len(seen) >= self.MAX_LABEL_COMBINATIONS:
            logger.warning(
                f"Cardinality limit ({self.MAX_LABEL_COMBINATIONS}) reached "
                f"for metric {name}. Dropping label combination: {label_key}"
            )
            return False
        seen.add(label_key)
        return True

    def _prom_metric(self, name: str, metric_type: str) -> Any | None:
        """Get or lazily register the Prometheus metric backing ``name``."""
        if not self._enable_prometheus:
            return None

        with self._lock:
            if name in self._prom_metrics:
                return self._prom_metrics[name]

            defn = METRIC_DEFINITIONS.get(name)
            label_names = list(defn.label_names) if defn else []
            description = defn.description if defn else f"Dynamic {metric_type}: {name}"
            try:
                if metric_type == "counter" and Counter is not None:
                    metric = Counter(
                        name, description, label_names, registry=self._registry
                    )
                elif metric_type == "histogram" and Histogram is not None:
                    buckets = defn.buckets if defn and defn.buckets else LATENCY_BUCKETS
                    metric = Histogram(
                        name,
                        description,
                        label_names,
                        buckets=buckets,
                        registry=self._registry,
                    )
                else:
                    return None
            except ValueError as e:
                # Duplicate registration in the shared registry
                logger.warning(f"Failed to create Prometheus {metric_type} {name}: {e}")
                metric = None

            self._prom_metrics[name] = metric
            return metric

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter metric.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        label_key = self._labels_to_key(labels)
        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._counters[name][label_key] += value

        prom_counter = self._prom_metric(name, "counter")
        if prom_counter is not None:
            try:
                if labels:
                    prom_counter.labels(**labels).inc(value)
                else:
                    prom_counter.inc(value)
            except ValueError as e:
                logger.debug(f"Prometheus counter update failed for {name}: {e}")

    def observe_histogram(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record an observation in a histogram."""
        label_key = self._labels_to_key(labels)
        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            observations = self._histograms[name][label_key]
            observations.append(value)
            if len(observations) > self.MAX_OBSERVATIONS:
                del observations[: len(observations) - self.MAX_OBSERVATIONS // 2]

        prom_histogram = self._prom_metric(name, "histogram")
        if prom_histogram is not None:
            try:
                if labels:
                    prom_histogram.labels(**labels).observe(value)
                else:
                    prom_histogram.observe(value)
            except ValueError as e:
                logger.debug(f"Prometheus histogram observe failed for {name}: {e}")

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Current value of one counter label set (0 if never incremented)."""
        with self._lock:
            return self._counters.get(name, {}).get(self._labels_to_key(labels), 0)

    def get_metrics(self) -> dict[str, Any]:
        """
        Snapshot of all metrics, suitable for JSON serialization.

        Structure:
        {
            "counters": {"metric_name": {"label_key": value, ...}, ...},
            "histograms": {"metric_name": {"label_key": {...summary}, ...}, ...}
        }
        """
        with self._lock:
            counters = {
                name: dict(label_values)
                for name, label_values in self._counters.items()
            }
            histograms: dict[str, dict[str, dict[str, Any]]] = {}
            for name, label_values in self._histograms.items():
                histograms[name] = {
                    label_key: {
                        "count": len(obs),
                        "sum": sum(obs),
                        "avg": sum(obs) / len(obs),
                        "min": min(obs),
                        "max": max(obs),
                    }
                    for label_key, obs in label_values.items()
                    if obs
                }

        return {"counters": counters, "histograms": histograms}

    def reset(self) -> None:
        """Clear all dict-based metrics. Prometheus metrics are left registered."""
        with self._lock:
            self._counters.clear()
            self._histograms.clear()
            self._label_combinations.clear()
        logger.debug("Metrics collector reset")

    @property
    def prometheus_enabled(self) -> bool:
        return self._enable_prometheus


_global_collector: MetricsCollector | None = None
_collector_lock = threading.Lock()


def get_metrics_collector(enable_prometheus: bool = True) -> MetricsCollector:
    """
    Get or create the process-wide metrics collector.

    Args:
        enable_prometheus: Whether to mirror into Prometheus (first call only)
    """
    global _global_collector

    if _global_collector is None:
        with _collector_lock:
            if _global_collector is None:
                _global_collector = MetricsCollector(enable_prometheus=enable_prometheus)

    return _global_collector


def reset_metrics_collector() -> None:
    """Drop the process-wide collector so the next call creates a fresh one (tests)."""
    global _global_collector
    with _collector_lock:
        if _global_collector is not None:
            _global_collector.reset()
        _global_collector = None


__all__ = [
    "METRIC_DEFINITIONS",
    "PROMETHEUS_AVAILABLE",
    "MetricDefinition",
    "MetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
