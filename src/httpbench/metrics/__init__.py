from __future__ import annotations

from httpbench.metrics.aggregator import accumulate, aggregate_kpis, merge_by_name, new_kpi
from httpbench.metrics.durations import format_duration, parse_duration, parse_durations
from httpbench.metrics.models import KPI, ErrorType, thresholds_array

__all__ = [
    "KPI",
    "ErrorType",
    "accumulate",
    "aggregate_kpis",
    "format_duration",
    "merge_by_name",
    "new_kpi",
    "parse_duration",
    "parse_durations",
    "thresholds_array",
]
