from __future__ import annotations

from httpbench.config.models import (
    DEFAULT_NAME,
    DEFAULT_THRESHOLDS_NS,
    DEFAULT_WORKER_NUM,
    BenchConfig,
    ConfigError,
    validate_worker_num,
)

__all__ = [
    "DEFAULT_NAME",
    "DEFAULT_THRESHOLDS_NS",
    "DEFAULT_WORKER_NUM",
    "BenchConfig",
    "ConfigError",
    "validate_worker_num",
]
