"""Hooks that inspect or refuse SQL before it is executed."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from rbsql.driver import DriverType
from rbsql.errors import SqlError
from rbsql.log import LogPlugin
from rbsql.templates import TEMPLATE


class SqlIntercept(ABC):
    """Sees each statement and its arguments and may change or refuse them."""

    def name(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def do_intercept(
        self,
        driver_type: DriverType,
        log: LogPlugin,
        sql: str,
        args: list[Any],
        is_prepared_sql: bool,
    ) -> tuple[str, list[Any]]:
        """Return the statement and arguments to run; raise SqlError to refuse."""


class LogFormatSqlIntercept(SqlIntercept):
    """Logs the statement with its arguments written in place of placeholders."""

    def do_intercept(
        self,
        driver_type: DriverType,
        log: LogPlugin,
        sql: str,
        args: list[Any],
        is_prepared_sql: bool,
    ) -> tuple[str, list[Any]]:
        if driver_type is not DriverType.NONE:
            formatted = f"[format_sql]{sql}"
            for index, arg in enumerate(args):
                formatted = formatted.replace(
                    driver_type.stmt_convert(index),
                    json.dumps(arg, separators=(",", ":")),
                    1,
                )
            log.info(formatted)
        return sql, args


def _refuse_unfiltered(kind: str, keyword: str, sql: str) -> None:
    statement = sql.strip()
    if statement.startswith(keyword) and TEMPLATE.where_.left_right_space not in statement:
        raise SqlError(f"[rbsql][{kind}] not allow attack sql:{statement}")


class BlockAttackDeleteInterceptor(SqlIntercept):
    """Refuses deletes that have no where clause."""

    def do_intercept(
        self,
        driver_type: DriverType,
        log: LogPlugin,
        sql: str,
        args: list[Any],
        is_prepared_sql: bool,
    ) -> tuple[str, list[Any]]:
        _refuse_unfiltered(type(self).__name__, TEMPLATE.delete_from.value, sql)
        return sql, args


class BlockAttackUpdateInterceptor(SqlIntercept):
    """Refuses updates that have no where clause."""

    def do_intercept(
        self,
        driver_type: DriverType,
        log: LogPlugin,
        sql: str,
        args: list[Any],
        is_prepared_sql: bool,
    ) -> tuple[str, list[Any]]:
        _refuse_unfiltered(type(self).__name__, TEMPLATE.update.value, sql)
        return sql, args