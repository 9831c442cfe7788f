# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the observability collector module.

Tests cover:
- MetricsCollector: dict-backed counters and histograms
- Label cardinality protection
- Prometheus mirroring into an isolated registry
- Singleton pattern: get_metrics_collector, reset_metrics_collector
"""

from __future__ import annotations

import threading
from unittest.mock import patch

import pytest

from opencode_sdk.observability.collector import (
    METRIC_DEFINITIONS,
    PROMETHEUS_AVAILABLE,
    MetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from opencode_sdk.observability.constants import (
    LATENCY_BUCKETS,
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
    STREAM_ERRORS_TOTAL,
    STREAM_EVENTS_TOTAL,
)

# =============================================================================
# MetricDefinition Tests
# =============================================================================


class TestMetricDefinitions:
    """Test the predefined metric schemas."""

    def test_predefined_metrics_exist(self) -> None:
        for name in (
            REQUESTS_TOTAL,
            REQUEST_RETRIES_TOTAL,
            REQUEST_DURATION_SECONDS,
            STREAM_EVENTS_TOTAL,
            STREAM_ERRORS_TOTAL,
        ):
            assert name in METRIC_DEFINITIONS
            assert name.startswith("opencode_sdk_")

    def test_request_labels(self) -> None:
        assert METRIC_DEFINITIONS[REQUESTS_TOTAL].label_names == ("method", "outcome")
        assert METRIC_DEFINITIONS[REQUESTS_TOTAL].metric_type == "counter"

    def test_duration_is_histogram_with_buckets(self) -> None:
        defn = METRIC_DEFINITIONS[REQUEST_DURATION_SECONDS]
        assert defn.metric_type == "histogram"
        assert defn.buckets == LATENCY_BUCKETS

    def test_buckets_sorted(self) -> None:
        assert LATENCY_BUCKETS == sorted(LATENCY_BUCKETS)


# =============================================================================
# Counter Tests
# =============================================================================


class TestCounterOperations:
    """Test counter operations."""

    @pytest.fixture
    def collector(self) -> MetricsCollector:
        """Create a fresh collector without Prometheus."""
        return MetricsCollector(enable_prometheus=False)

    def test_inc_counter_basic(self, collector: MetricsCollector) -> None:
        collector.inc_counter("c")
        assert collector.get_counter("c") == 1

    def test_inc_counter_accumulates(self, collector: MetricsCollector) -> None:
        collector.inc_counter("c", 2)
        collector.inc_counter("c", 3)
        assert collector.get_counter("c") == 5

    def test_labels_kept_apart(self, collector: MetricsCollector) -> None:
        collector.inc_counter(REQUESTS_TOTAL, labels={"method": "GET", "outcome": "success"})
        collector.inc_counter(REQUESTS_TOTAL, labels={"method": "GET", "outcome": "error"})
        collector.inc_counter(REQUESTS_TOTAL, labels={"outcome": "success", "method": "GET"})

        assert collector.get_counter(
            REQUESTS_TOTAL, {"method": "GET", "outcome": "success"}
        ) == 2
        assert collector.get_counter(
            REQUESTS_TOTAL, {"method": "GET", "outcome": "error"}
        ) == 1

    def test_unknown_counter_is_zero(self, collector: MetricsCollector) -> None:
        assert collector.get_counter("never", {"a": "b"}) == 0

    def test_negative_increment_raises(self, collector: MetricsCollector) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            collector.inc_counter("c", -1)

    def test_concurrent_increments(self, collector: MetricsCollector) -> None:
        def worker() -> None:
            for _ in range(500):
                collector.inc_counter("c")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert collector.get_counter("c") == 4000


# =============================================================================
# Histogram Tests
# =============================================================================


class TestHistogramOperations:
    """Test histogram operations and snapshots."""

    @pytest.fixture
    def collector(self) -> MetricsCollector:
        return MetricsCollector(enable_prometheus=False)

    def test_summary(self, collector: MetricsCollector) -> None:
        for value in (1.0, 2.0, 3.0):
            collector.observe_histogram("h", value, labels={"method": "GET"})

        summary = collector.get_metrics()["histograms"]["h"]["method=GET"]
        assert summary == {"count": 3, "sum": 6.0, "avg": 2.0, "min": 1.0, "max": 3.0}

    def test_observations_bounded(self, collector: MetricsCollector) -> None:
        with patch.object(MetricsCollector, "MAX_OBSERVATIONS", 10):
            for i in range(11):
                collector.observe_histogram("h", float(i))

        count = collector.get_metrics()["histograms"]["h"][""]["count"]
        assert count <= 10

    def test_snapshot_includes_counters(self, collector: MetricsCollector) -> None:
        collector.inc_counter("c", labels={"reason": "429"})
        assert collector.get_metrics()["counters"] == {"c": {"reason=429": 1}}

    def test_reset(self, collector: MetricsCollector) -> None:
        collector.inc_counter("c")
        collector.observe_histogram("h", 1.0)
        collector.reset()
        assert collector.get_metrics() == {"counters": {}, "histograms": {}}


# =============================================================================
# Cardinality Tests
# =============================================================================


class TestCardinality:
    """Test label cardinality protection."""

    def test_new_combinations_dropped_past_limit(self) -> None:
        collector = MetricsCollector(enable_prometheus=False)
        with patch.object(MetricsCollector, "MAX_LABEL_COMBINATIONS", 2):
            collector.inc_counter("c", labels={"k": "a"})
            collector.inc_counter("c", labels={"k": "b"})
            collector.inc_counter("c", labels={"k": "c"})
            collector.inc_counter("c", labels={"k": "a"})

        assert collector.get_counter("c", {"k": "a"}) == 2
        assert collector.get_counter("c", {"k": "b"}) == 1
        assert collector.get_counter("c", {"k": "c"}) == 0


# =============================================================================
# Prometheus Tests
# =============================================================================


class TestPrometheus:
    """Test Prometheus mirroring."""

    def test_disabled_when_not_available(self) -> None:
        with patch(
            "opencode_sdk.observability.collector.PROMETHEUS_AVAILABLE", False
        ):
            collector = MetricsCollector(enable_prometheus=True)
            assert collector.prometheus_enabled is False

    def test_disabled_by_flag(self) -> None:
        assert MetricsCollector(enable_prometheus=False).prometheus_enabled is False

    @pytest.mark.skipif(
        not PROMETHEUS_AVAILABLE, reason="prometheus_client not installed"
    )
    def test_counter_mirrored(self) -> None:
        from prometheus_client import CollectorRegistry

        registry = CollectorRegistry()
        collector = MetricsCollector(enable_prometheus=True, registry=registry)

        collector.inc_counter(
            REQUESTS_TOTAL, labels={"method": "POST", "outcome": "success"}
        )

        value = registry.get_sample_value(
            REQUESTS_TOTAL, {"method": "POST", "outcome": "success"}
        )
        assert value == 1.0

    @pytest.mark.skipif(
        not PROMETHEUS_AVAILABLE, reason="prometheus_client not installed"
    )
    def test_histogram_mirrored(self) -> None:
        from prometheus_client import CollectorRegistry

        registry = CollectorRegistry()
        collector = MetricsCollector(enable_prometheus=True, registry=registry)

        collector.observe_histogram(
            REQUEST_DURATION_SECONDS, 0.2, labels={"method": "GET"}
        )

        count = registry.get_sample_value(
            f"{REQUEST_DURATION_SECONDS}_count", {"method": "GET"}
        )
        assert count == 1.0

    @pytest.mark.skipif(
        not PROMETHEUS_AVAILABLE, reason="prometheus_client not installed"
    )
    def test_duplicate_registration_tolerated(self) -> None:
        from prometheus_client import CollectorRegistry

        registry = CollectorRegistry()
        first = MetricsCollector(enable_prometheus=True, registry=registry)
        second = MetricsCollector(enable_prometheus=True, registry=registry)

        first.inc_counter(STREAM_ERRORS_TOTAL, labels={"error_type": "connection"})
        second.inc_counter(STREAM_ERRORS_TOTAL, labels={"error_type": "connection"})

        assert second.get_counter(
            STREAM_ERRORS_TOTAL, {"error_type": "connection"}
        ) == 1


# =============================================================================
# Singleton Tests
# =============================================================================


class TestSingleton:
    """Test the process-wide collector."""

    @pytest.fixture(autouse=True)
    def _reset(self):
        reset_metrics_collector()
        yield
        reset_metrics_collector()

    def test_same_instance(self) -> None:
        assert get_metrics_collector(enable_prometheus=False) is get_metrics_collector()

    def test_reset_creates_new_instance(self) -> None:
        first = get_metrics_collector(enable_prometheus=False)
        reset_metrics_collector()
        assert get_metrics_collector(enable_prometheus=False) is not first
