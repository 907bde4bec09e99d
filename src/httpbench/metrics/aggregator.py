from __future__ import annotations

from typing import Iterable

from httpbench.metrics.models import KPI, zero_buckets


def new_kpi(name: str, n_buckets: int) -> KPI:
    return KPI(name=name, count=0, buckets=zero_buckets(n_buckets))


def accumulate(target: KPI, kpi: KPI) -> None:
    if len(kpi.buckets) != len(target.buckets):
        msg = (
            f"KPI {kpi.name!r} has {len(kpi.buckets)} latency buckets, "
            f"expected {len(target.buckets)}"
        )
        raise ValueError(msg)
    target.success += kpi.success
    target.fail += kpi.fail
    target.total_elapsed_ns += kpi.total_elapsed_ns
    target.count += kpi.count
    target.buckets += kpi.buckets


def merge_by_name(kpis: Iterable[KPI], n_buckets: int) -> dict[str, KPI]:
    merged: dict[str, KPI] = {}
    for kpi in kpis:
        if kpi.name not in merged:
            merged[kpi.name] = new_kpi(kpi.name, n_buckets)
        accumulate(merged[kpi.name], kpi)
    return merged


def aggregate_kpis(
    kpis: Iterable[KPI],
    thresholds_ns: tuple[int, ...],
    worker_num: int,
) -> dict[str, KPI]:
    """Merge worker KPIs by name; display names gain the worker count (``http-3``)."""
    merged = merge_by_name(kpis, len(thresholds_ns))
    for kpi in merged.values():
        kpi.name = f"{kpi.name}-{worker_num}"
    return merged
