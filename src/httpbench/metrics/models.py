from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np
import numpy.typing as npt


class ErrorType(str, Enum):
    TIMEOUT = "timeout"
    CONNECT = "connect"
    READ = "read"
    OTHER = "other"


def thresholds_array(thresholds_ns: tuple[int, ...] | list[int]) -> npt.NDArray[np.int64]:
    return np.asarray(thresholds_ns, dtype=np.int64)


def zero_buckets(size: int) -> npt.NDArray[np.int64]:
    return np.zeros(size, dtype=np.int64)


@dataclass(slots=True)
class KPI:
    """Request counters for one worker, or for several once merged.

    ``buckets[i]`` counts successes faster than ``thresholds[i]``. Buckets
    overlap: a 30ms response lands in every bucket whose threshold exceeds it.
    """

    name: str
    success: int = 0
    fail: int = 0
    total_elapsed_ns: int = 0
    count: int = 1
    buckets: npt.NDArray[np.int64] = field(default_factory=lambda: zero_buckets(0))

    @property
    def requests(self) -> int:
        return self.success + self.fail

    def record_success(self, elapsed_ns: int, thresholds: npt.NDArray[np.int64]) -> None:
        self.success += 1
        self.total_elapsed_ns += elapsed_ns
        self.buckets += elapsed_ns < thresholds

    def record_failure(self) -> None:
        self.fail += 1
