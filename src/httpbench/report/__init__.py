from __future__ import annotations

from httpbench.report.table import (
    NOT_AVAILABLE,
    format_header,
    format_kpi,
    mean_latency,
    qps,
)

__all__ = [
    "NOT_AVAILABLE",
    "format_header",
    "format_kpi",
    "mean_latency",
    "qps",
]
