from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence, TypeVar

from httpbench.config import ConfigError, validate_worker_num

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    url: str
    method: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_line(cls, line: str) -> RequestDescriptor:
        return cls(url=line.strip())


def load_workload(path: str | Path) -> list[RequestDescriptor]:
    """Read one URL per line. Blank lines are skipped; undecodable bytes become U+FFFD."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        msg = f"Cannot read workload file {str(path)!r}: {exc}"
        raise ConfigError(msg) from exc
    descriptors = [RequestDescriptor.from_line(line) for line in text.splitlines() if line.strip()]
    logger.info("Loaded %d requests from %s", len(descriptors), path)
    return descriptors


def partition(items: Sequence[T], worker_num: int) -> list[Sequence[T]]:
    """Split ``items`` into ``worker_num`` contiguous slices whose sizes differ by at most one.

    Slice ``i`` covers ``[i * L // N, (i + 1) * L // N)``, so slices may be
    empty when there are fewer items than workers.
    """
    validate_worker_num(worker_num)
    total = len(items)
    return [
        items[i * total // worker_num : (i + 1) * total // worker_num]
        for i in range(worker_num)
    ]
