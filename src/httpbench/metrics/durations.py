from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "μs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_TOKEN = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def format_duration(ns: int) -> str:
    """Render nanoseconds the way Go prints a ``time.Duration`` (``50ms``, ``1m30s``)."""
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    value = abs(ns)
    if value < SECOND:
        if value < MICROSECOND:
            return f"{sign}{value}ns"
        if value < MILLISECOND:
            return f"{sign}{_with_fraction(value, MICROSECOND)}µs"
        return f"{sign}{_with_fraction(value, MILLISECOND)}ms"
    hours, rem = divmod(value, HOUR)
    minutes, rem = divmod(rem, MINUTE)
    seconds = _with_fraction(rem, SECOND)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def parse_duration(text: str) -> int:
    """Parse a Go-style duration string (``"1m30s"``, ``"1.5ms"``) into nanoseconds."""
    raw = text.strip()
    if raw == "0":
        return 0
    sign = 1
    if raw[:1] in ("-", "+"):
        sign = -1 if raw[0] == "-" else 1
        raw = raw[1:]
    if not raw:
        msg = f"Invalid duration: {text!r}"
        raise ValueError(msg)
    total = Decimal(0)
    pos = 0
    while pos < len(raw):
        match = _TOKEN.match(raw, pos)
        if match is None:
            msg = f"Invalid duration: {text!r}"
            raise ValueError(msg)
        try:
            amount = Decimal(match.group(1))
        except InvalidOperation as exc:
            msg = f"Invalid duration: {text!r}"
            raise ValueError(msg) from exc
        total += amount * _UNITS[match.group(2)]
        pos = match.end()
    return sign * int(total)


def parse_durations(text: str) -> tuple[int, ...]:
    """Parse a comma-separated list of durations; an empty string yields no thresholds."""
    parts = [part for part in (p.strip() for p in text.split(",")) if part]
    return tuple(parse_duration(part) for part in parts)


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    width = len(str(unit)) - 1
    digits = f"{frac:0{width}d}".rstrip("0")
    return f"{whole}.{digits}"
