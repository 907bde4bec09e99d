from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

import httpx

from httpbench.loadgen.workload import RequestDescriptor
from httpbench.metrics import ErrorType

ClientFactory = Callable[[], httpx.Client]


@dataclass(frozen=True, slots=True)
class ClientResponse:
    elapsed_ns: int
    status_code: int | None
    error_type: ErrorType | None

    @property
    def success(self) -> bool:
        # Any response counts, 4xx and 5xx included.
        return self.error_type is None


def default_client_factory(timeout_sec: float | None = None) -> ClientFactory:
    def factory() -> httpx.Client:
        return httpx.Client(timeout=timeout_sec, follow_redirects=True)

    return factory


def send_request(client: httpx.Client, descriptor: RequestDescriptor) -> ClientResponse:
    start = time.perf_counter_ns()
    try:
        # Reads the whole body and releases the connection before returning.
        resp = client.get(descriptor.url)
    except httpx.TimeoutException:
        err = ErrorType.TIMEOUT
    except httpx.ConnectError:
        err = ErrorType.CONNECT
    except httpx.ReadError:
        err = ErrorType.READ
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError):
        # Malformed hosts fail IDNA encoding before any connection is made.
        err = ErrorType.OTHER
    else:
        return ClientResponse(
            elapsed_ns=time.perf_counter_ns() - start,
            status_code=resp.status_code,
            error_type=None,
        )
    return ClientResponse(elapsed_ns=0, status_code=None, error_type=err)
