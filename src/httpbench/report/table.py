from __future__ import annotations

from httpbench.metrics import KPI, format_duration
from httpbench.metrics.durations import SECOND

NOT_AVAILABLE = "n/a"
COLUMN_WIDTH = 8


def format_header(thresholds_ns: tuple[int, ...]) -> str:
    thresholds = "\t".join(format_duration(t) for t in thresholds_ns)
    return "\t".join(
        [
            "",
            "succ",
            "fail",
            "totalTime",
            _pad("qps"),
            _pad("res_time"),
            _pad(thresholds),
            "succ%",
        ]
    )


def format_kpi(kpi: KPI) -> str:
    total = kpi.requests
    if total:
        ratios = "\t".join(f"{int(b) / total:.5f}" for b in kpi.buckets)
        success_ratio = _format_float(kpi.success / total)
    else:
        ratios = "\t".join(NOT_AVAILABLE for _ in kpi.buckets)
        success_ratio = NOT_AVAILABLE
    return "\t".join(
        [
            kpi.name,
            str(kpi.success),
            str(kpi.fail),
            format_duration(kpi.total_elapsed_ns),
            _pad(qps(kpi)),
            _pad(mean_latency(kpi)),
            _pad(ratios),
            success_ratio,
        ]
    )


def qps(kpi: KPI) -> str:
    if kpi.success == 0 or kpi.total_elapsed_ns <= 0:
        return NOT_AVAILABLE
    return str(kpi.success * SECOND * kpi.count // kpi.total_elapsed_ns)


def mean_latency(kpi: KPI) -> str:
    if kpi.success == 0:
        return NOT_AVAILABLE
    return format_duration(kpi.total_elapsed_ns // kpi.success)


def _pad(value: str) -> str:
    return value.rjust(COLUMN_WIDTH)


def _format_float(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text
