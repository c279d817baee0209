"""Database driver kinds, placeholder syntax and paging clauses."""

from __future__ import annotations

from enum import Enum

from rbsql.errors import SqlError
from rbsql.templates import TEMPLATE


class DriverType(Enum):
    """The supported database drivers."""

    NONE = "none"
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    MSSQL = "mssql"

    def is_number_type(self) -> bool:
        """Whether placeholders carry a position number."""
        return self in (DriverType.POSTGRES, DriverType.MSSQL)

    def stmt_convert(self, index: int) -> str:
        """Return the placeholder for the argument at the zero-based index."""
        if self is DriverType.POSTGRES:
            return f"${index + 1}"
        if self is DriverType.MSSQL:
            return f"@p{index + 1}"
        if self in (DriverType.MYSQL, DriverType.SQLITE):
            return "?"
        raise SqlError("[rbsql] unsupported driver type: None")

    def page_limit_sql(self, offset: int, size: int) -> str:
        """Return the clause that selects one page of rows."""
        t = TEMPLATE
        if self is DriverType.MYSQL:
            return f" {t.limit.value} {offset},{size}"
        if self in (DriverType.POSTGRES, DriverType.SQLITE):
            return f" {t.limit.value} {size} {t.offset.value} {offset}"
        if self is DriverType.MSSQL:
            return (
                f" {t.offset.value} {offset} {t.rows_fetch_next.value}"
                f" {size} {t.rows_only.value}"
            )
        raise SqlError("[rbsql] not support now for DriverType:None")