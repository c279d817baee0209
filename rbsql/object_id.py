"""Twelve-byte object identifiers: timestamp, process id and counter."""

from __future__ import annotations

import binascii
import itertools
import secrets
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone

_TIMESTAMP_SIZE = 4
_PROCESS_ID_SIZE = 5
_COUNTER_SIZE = 3
_ID_SIZE = _TIMESTAMP_SIZE + _PROCESS_ID_SIZE + _COUNTER_SIZE

_MAX_U24 = 0xFF_FFFF

_counter = itertools.count(secrets.randbelow(_MAX_U24 + 1))
_counter_lock = threading.Lock()

# Four random big-endian bytes followed by a zero byte, fixed for the process.
_PROCESS_ID = secrets.randbelow(_MAX_U24).to_bytes(4, "big") + b"\x00"


class ObjectIdError(ValueError):
    """Raised when an object id cannot be built from the given input."""


def _next_count() -> bytes:
    with _counter_lock:
        value = next(_counter)
    return (value % (_MAX_U24 + 1)).to_bytes(_COUNTER_SIZE, "big")


@dataclass(frozen=True, order=True)
class ObjectId:
    """A wrapper around the raw 12-byte representation of an object id."""

    id: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.id)
        if len(raw) != _ID_SIZE:
            raise ObjectIdError("Provided bytes must be exactly 12 bytes long.")
        object.__setattr__(self, "id", raw)

    @classmethod
    def generate(cls) -> "ObjectId":
        """Create a new id from the current time, process id and counter."""
        timestamp = (time.time_ns() // 1_000_000_000) & 0xFFFF_FFFF
        return cls(
            timestamp.to_bytes(_TIMESTAMP_SIZE, "big") + _PROCESS_ID + _next_count()
        )

    @classmethod
    def from_hex(cls, text: str) -> "ObjectId":
        """Create an id from a 24-character hexadecimal string."""
        try:
            raw = binascii.unhexlify(text)
        except ValueError as exc:
            raise ObjectIdError(str(exc)) from exc
        if len(raw) != _ID_SIZE:
            raise ObjectIdError("Provided string must be a 12-byte hexadecimal string.")
        return cls(raw)

    def timestamp(self) -> datetime:
        """The creation time stored in the first four bytes, in UTC."""
        seconds = int.from_bytes(self.id[:_TIMESTAMP_SIZE], "big")
        return datetime.fromtimestamp(seconds, tz=timezone.utc)

    def to_hex(self) -> str:
        """The lower-case hexadecimal form of the id."""
        return self.id.hex()

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"ObjectId({self.to_hex()})"