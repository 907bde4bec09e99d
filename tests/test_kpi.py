from __future__ import annotations

import numpy as np
from hypothesis import given, strategies as st

from httpbench.metrics import KPI, thresholds_array
from httpbench.metrics.models import zero_buckets

MS = 1_000_000


def test_record_success_counts_every_threshold_above_latency() -> None:
    thresholds = thresholds_array((50 * MS, 100 * MS, 200 * MS))
    kpi = KPI(name="http", buckets=zero_buckets(3))
    kpi.record_success(75 * MS, thresholds)
    kpi.record_success(10 * MS, thresholds)
    kpi.record_success(100 * MS, thresholds)
    kpi.record_failure()
    assert kpi.success == 3
    assert kpi.fail == 1
    assert kpi.requests == 4
    assert kpi.total_elapsed_ns == 185 * MS
    # 100ms is not below the 100ms threshold
    assert kpi.buckets.tolist() == [1, 2, 3]


def test_record_success_without_thresholds() -> None:
    kpi = KPI(name="http")
    kpi.record_success(MS, thresholds_array(()))
    assert kpi.success == 1
    assert kpi.buckets.tolist() == []


@given(
    latencies=st.lists(st.integers(min_value=0, max_value=2_000 * MS), max_size=100),
    thresholds=st.lists(st.integers(min_value=1, max_value=1_000 * MS), min_size=1, max_size=8),
)
def test_buckets_are_monotonic(latencies: list[int], thresholds: list[int]) -> None:
    ordered = sorted(thresholds)
    arr = thresholds_array(ordered)
    kpi = KPI(name="http", buckets=zero_buckets(len(ordered)))
    for latency in latencies:
        kpi.record_success(latency, arr)
    assert np.all(np.diff(kpi.buckets) >= 0)
    for i, threshold in enumerate(ordered):
        assert kpi.buckets[i] == sum(1 for latency in latencies if latency < threshold)
