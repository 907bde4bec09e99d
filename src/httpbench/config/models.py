from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

MILLISECOND_NS = 1_000_000

DEFAULT_THRESHOLDS_NS: tuple[int, ...] = (
    50 * MILLISECOND_NS,
    100 * MILLISECOND_NS,
    200 * MILLISECOND_NS,
    300 * MILLISECOND_NS,
    500 * MILLISECOND_NS,
)

DEFAULT_WORKER_NUM = 3
DEFAULT_NAME = "http"


class ConfigError(ValueError):
    """Raised for setup errors that must abort a run before any worker starts."""


@dataclass(frozen=True, slots=True)
class BenchConfig:
    filename: str = ""
    worker_num: int = DEFAULT_WORKER_NUM
    thresholds_ns: tuple[int, ...] = DEFAULT_THRESHOLDS_NS
    name: str = DEFAULT_NAME
    timeout_sec: float | None = None

    def validate(self) -> None:
        validate_worker_num(self.worker_num)
        if any(t < 0 for t in self.thresholds_ns):
            msg = f"Latency thresholds must be non-negative, got {list(self.thresholds_ns)}"
            raise ConfigError(msg)
        if list(self.thresholds_ns) != sorted(self.thresholds_ns):
            msg = f"Latency thresholds must be ascending, got {list(self.thresholds_ns)}"
            raise ConfigError(msg)
        if not self.name:
            raise ConfigError("Workload name must not be empty")
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            msg = f"Timeout must be positive, got {self.timeout_sec}"
            raise ConfigError(msg)

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "filename": self.filename,
            "worker_num": self.worker_num,
            "thresholds_ns": list(self.thresholds_ns),
            "name": self.name,
            "timeout_sec": self.timeout_sec,
        }


def validate_worker_num(worker_num: int) -> None:
    if worker_num < 1:
        msg = f"Worker number must be at least 1, got {worker_num}"
        raise ConfigError(msg)
