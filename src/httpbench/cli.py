from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from httpbench.config import DEFAULT_NAME, DEFAULT_WORKER_NUM, BenchConfig, ConfigError
from httpbench.loadgen.runner import Benchmarker
from httpbench.metrics import parse_durations

logger = logging.getLogger("httpbench.cli")

DEFAULT_THRESHOLDS = "50ms,100ms,200ms,300ms,500ms"
EXIT_SETUP_ERROR = 2


def app_version() -> str:
    try:
        return version("httpbench")
    except PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="HTTP benchmarker")
    parser.add_argument("-v", "--version", action="store_true", help="print current version")
    parser.add_argument("-n", "--workerNum", dest="worker_num", type=int, default=DEFAULT_WORKER_NUM, help="worker number")
    parser.add_argument("-f", "--filename", default="", help="file with one URL per line")
    parser.add_argument(
        "-t",
        "--thresholds",
        default=DEFAULT_THRESHOLDS,
        help="comma separated latency thresholds, e.g. 50ms,100ms",
    )
    parser.add_argument("--name", default=DEFAULT_NAME, help="workload label shown in the report")
    parser.add_argument("--timeout", type=float, default=None, help="per-request timeout in seconds")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.version:
        print(app_version())
        return 0

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        thresholds = parse_durations(args.thresholds)
    except ValueError as exc:
        logger.error("Invalid thresholds: %s", exc)
        return EXIT_SETUP_ERROR
    config = BenchConfig(
        filename=args.filename,
        worker_num=args.worker_num,
        thresholds_ns=thresholds,
        name=args.name,
        timeout_sec=args.timeout,
    )
    try:
        benchmarker = Benchmarker.from_config(config)
    except ConfigError as exc:
        logger.error("Setup failed: %s", exc)
        return EXIT_SETUP_ERROR
    logger.debug("Config: %s", config.to_metadata())
    benchmarker.benchmark()
    return 0


if __name__ == "__main__":
    sys.exit(main())
