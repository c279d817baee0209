"""String helpers for SQL templates and column names."""

from __future__ import annotations

LOG_SPACE = " " * 64

_QUOTES = ("'", "`", '"')


def find_convert_string(arg: str) -> list[tuple[str, str]]:
    """Find distinct #{...} and ${...} expressions as (key, expression) pairs."""
    found: list[tuple[str, str]] = []
    seen: set[str] = set()
    item = ""
    for index, char in enumerate(arg):
        if item:
            item += char
            if char == "}":
                if item not in seen:
                    seen.add(item)
                    found.append((item[2:-1], item))
                item = ""
            continue
        if char in "#$" and arg[index + 1:index + 2] == "{":
            item = char
    return found


def count_string_num(s: str, c: str) -> int:
    """Count occurrences of the character c in s."""
    return s.count(c)


def to_snake_name(name: str) -> str:
    """Convert a CamelCase name to snake_case."""
    parts = []
    last = len(name) - 1
    for index, char in enumerate(name):
        if char.isupper():
            if index != 0 and index != last:
                parts.append("_")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)


def un_packing_string(column: str) -> str:
    """Strip one pair of matching quotes or backticks around a name."""
    if len(column) >= 2:
        for quote in _QUOTES:
            if column.startswith(quote) and column.endswith(quote):
                return column[1:-1]
    return column


def find_format_string(arg: str) -> list[tuple[str, str]]:
    """Find {...} expressions as (key, expression) pairs, in order."""
    found: list[tuple[str, str]] = []
    item = ""
    for char in arg:
        if item:
            item += char
            if char == "}":
                found.append((item[1:-1], item))
                item = ""
            continue
        if char == "{":
            item = char
    return found