from __future__ import annotations

from typing import Callable

import httpx
import numpy as np
import pytest

from httpbench.metrics import KPI


def make_kpi(
    name: str = "http",
    success: int = 0,
    fail: int = 0,
    total_elapsed_ns: int = 0,
    buckets: list[int] | None = None,
    count: int = 1,
) -> KPI:
    return KPI(
        name=name,
        success=success,
        fail=fail,
        total_elapsed_ns=total_elapsed_ns,
        count=count,
        buckets=np.asarray(buckets or [], dtype=np.int64),
    )


@pytest.fixture
def mock_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], Callable[[], httpx.Client]]:
    def build(handler: Callable[[httpx.Request], httpx.Response]) -> Callable[[], httpx.Client]:
        def factory() -> httpx.Client:
            return httpx.Client(transport=httpx.MockTransport(handler))

        return factory

    return build
