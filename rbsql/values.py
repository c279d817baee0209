"""Lookup helpers for JSON-like values."""

from __future__ import annotations

import copy
from typing import Any


def get_deep_value(arg: str, value: Any) -> Any:
    """Follow a dotted path such as a.b.c; return None if any step is missing."""
    current = value
    for key in arg.split("."):
        if not key:
            continue
        current = current.get(key) if isinstance(current, dict) else None
    return copy.deepcopy(current)