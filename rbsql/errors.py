"""Errors raised by the package and a small helper for missing values."""

from __future__ import annotations

from typing import Callable, TypeVar, Union

T = TypeVar("T")


class SqlError(Exception):
    """Raised when SQL cannot be built or is refused."""


def require(value: T | None, fail_message: Union[Callable[[], str], str]) -> T:
    """Return value, or raise SqlError with the given message when it is None."""
    if value is None:
        message = fail_message() if callable(fail_message) else fail_message
        raise SqlError(message)
    return value