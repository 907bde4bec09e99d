from __future__ import annotations

import logging
import queue
import sys
import threading
import time
from typing import Iterable, Sequence, TextIO

import httpx

from httpbench.config import DEFAULT_NAME, BenchConfig
from httpbench.loadgen.client import ClientFactory, default_client_factory, send_request
from httpbench.loadgen.workload import RequestDescriptor, load_workload, partition
from httpbench.metrics import KPI, aggregate_kpis, thresholds_array
from httpbench.metrics.models import zero_buckets
from httpbench.report import format_header, format_kpi

logger = logging.getLogger(__name__)


def run_worker(
    descriptors: Iterable[RequestDescriptor],
    thresholds_ns: tuple[int, ...],
    client: httpx.Client,
    name: str = DEFAULT_NAME,
) -> KPI:
    """Issue each request in order and return the counters for this slice."""
    thresholds = thresholds_array(thresholds_ns)
    kpi = KPI(name=name, buckets=zero_buckets(len(thresholds)))
    for descriptor in descriptors:
        response = send_request(client, descriptor)
        if not response.success:
            logger.debug("GET %s failed: %s", descriptor.url, response.error_type.value)
            kpi.record_failure()
            continue
        kpi.record_success(response.elapsed_ns, thresholds)
    return kpi


class Benchmarker:
    def __init__(
        self,
        config: BenchConfig,
        descriptors: Sequence[RequestDescriptor],
        client_factory: ClientFactory | None = None,
    ) -> None:
        config.validate()
        self.config = config
        self.descriptors = tuple(descriptors)
        self._client_factory = client_factory or default_client_factory(config.timeout_sec)

    @classmethod
    def from_config(
        cls,
        config: BenchConfig,
        client_factory: ClientFactory | None = None,
    ) -> Benchmarker:
        config.validate()
        return cls(config, load_workload(config.filename), client_factory)

    def run(self) -> dict[str, KPI]:
        worker_num = self.config.worker_num
        slices = partition(self.descriptors, worker_num)
        results: queue.Queue[KPI] = queue.Queue(maxsize=worker_num)
        failures: list[Exception] = []
        threads = [
            threading.Thread(
                target=self._work,
                args=(index, work, results, failures),
                name=f"httpbench-worker-{index}",
            )
            for index, work in enumerate(slices)
        ]
        logger.info(
            "Starting benchmark: %d requests across %d workers",
            len(self.descriptors),
            worker_num,
        )
        started = time.perf_counter()
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        if failures:
            raise failures[0]

        kpis: list[KPI] = []
        while not results.empty():
            kpis.append(results.get_nowait())
        aggregated = aggregate_kpis(kpis, self.config.thresholds_ns, worker_num)
        logger.info(
            "Benchmark finished in %.3fs: %d succeeded, %d failed",
            time.perf_counter() - started,
            sum(k.success for k in aggregated.values()),
            sum(k.fail for k in aggregated.values()),
        )
        return aggregated

    def benchmark(self, stream: TextIO | None = None) -> dict[str, KPI]:
        out = stream or sys.stdout
        print(format_header(self.config.thresholds_ns), file=out)
        aggregated = self.run()
        for kpi in aggregated.values():
            print(format_kpi(kpi), file=out)
        return aggregated

    def _work(
        self,
        index: int,
        work: Sequence[RequestDescriptor],
        results: queue.Queue[KPI],
        failures: list[Exception],
    ) -> None:
        try:
            with self._client_factory() as client:
                kpi = run_worker(work, self.config.thresholds_ns, client, self.config.name)
        except Exception as exc:
            logger.exception("Worker %d aborted", index)
            failures.append(exc)
            return
        logger.debug("Worker %d done: %d succeeded, %d failed", index, kpi.success, kpi.fail)
        results.put(kpi)
