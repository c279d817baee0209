"""Simple timing and throughput reporting."""

from __future__ import annotations

import time
from typing import Callable

_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_SECOND = 1_000_000_000


def duration_to_string(nanos: int) -> str:
    """Render a duration in nanoseconds as milliseconds or nanoseconds."""
    if nanos > _NANOS_PER_MILLI:
        return f"{nanos // _NANOS_PER_MILLI}ms"
    return f"{nanos}ns"


def _elapsed(start: int) -> int:
    return time.perf_counter_ns() - start


def _qps(total: int, elapsed: int) -> int:
    return total * _NANOS_PER_SECOND // max(elapsed, 1)


def print_qps(tag: str, total: int, start: int) -> str:
    """Print and return operations per second since start (perf_counter_ns)."""
    line = f"[count_qps] {tag} use qps: {_qps(total, _elapsed(start))} QPS/s"
    print(line)
    return line


def print_each_time(tag: str, total: int, start: int) -> str:
    """Print and return the elapsed time and nanoseconds per operation."""
    elapsed = _elapsed(start)
    line = (
        f"[count_each_time] {tag} use Time: {duration_to_string(elapsed)},"
        f"each:{elapsed // total} ns/op"
    )
    print(line)
    return line


def print_time(tag: str, start: int) -> str:
    """Print and return the time waited since start."""
    line = f"[count_wait_time] {tag} use Time: {duration_to_string(_elapsed(start))} "
    print(line)
    return line


def count_time_qps(tag: str, total: int, start: int) -> tuple[str, str]:
    """Print both throughput and per-operation time."""
    return print_qps(tag, total, start), print_each_time(tag, total, start)


def bench(total: int, body: Callable[[], object]) -> int:
    """Run body total times, print time and throughput, return elapsed ns."""
    if total <= 0:
        raise ValueError("total must be positive")
    start = time.perf_counter_ns()
    for _ in range(total):
        body()
    elapsed = _elapsed(start)
    print(f"use Time: {duration_to_string(elapsed)} ,each:{elapsed // total} ns/op")
    print(f"use QPS: {_qps(total, elapsed)} QPS/s")
    return elapsed