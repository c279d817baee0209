"""Snowflake ids: time, worker, data centre and sequence in one integer."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable

DEFAULT_EPOCH = 1_564_790_400_000
_SEQUENCE_MASK = 0xFFF


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class Snowflake:
    """Generates ids from a millisecond clock, worker and data centre numbers."""

    epoch: int = DEFAULT_EPOCH
    worker_id: int = 1
    datacenter_id: int = 1
    clock: Callable[[], int] = field(default=_now_millis, repr=False, compare=False)
    _sequence: int = field(default=0, init=False, repr=False)
    _time: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def _get_time(self) -> int:
        return self.clock() - self.epoch

    def generate(self) -> int:
        """Return the next id."""
        with self._lock:
            last_timestamp = self._time
            timestamp = self._get_time()
            if timestamp == last_timestamp:
                self._sequence = (self._sequence + 1) & _SEQUENCE_MASK
                if self._sequence == 0 and timestamp <= last_timestamp:
                    timestamp = self._get_time()
            else:
                self._sequence = 0
            self._time = timestamp
            return (
                (timestamp << 22)
                | (self.worker_id << 17)
                | (self.datacenter_id << 12)
                | self._sequence
            )

    def copy(self) -> "Snowflake":
        """Return a generator with the same settings and current state."""
        with self._lock:
            clone = Snowflake(self.epoch, self.worker_id, self.datacenter_id, self.clock)
            clone._sequence = self._sequence
            clone._time = self._time
        return clone


SNOWFLAKE = Snowflake()


def new_snowflake_id() -> int:
    """Return the next id from the shared default generator."""
    return SNOWFLAKE.generate()