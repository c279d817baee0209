"""Turning deletes into updates of a deletion flag column."""

from __future__ import annotations

from dataclasses import dataclass

from rbsql.driver import DriverType
from rbsql.errors import SqlError
from rbsql.templates import TEMPLATE


@dataclass(frozen=True)
class LogicDeletePlugin:
    """Marks rows as deleted through a flag column instead of removing them."""

    column: str
    deleted: int = 1
    un_deleted: int = 0

    def __post_init__(self) -> None:
        if self.deleted == self.un_deleted:
            raise ValueError("deleted can not equal to un_deleted")

    def create_remove_sql(
        self,
        driver_type: DriverType,
        table_name: str,
        table_fields: str,
        sql_where: str,
    ) -> str:
        """Return an update of the flag when the table has it, else a delete."""
        t = TEMPLATE
        if self.column in table_fields.split(","):
            sql = (
                f"{t.update.value} {table_name} {t.set.value} "
                f"{self.column} = {self.deleted}"
            )
            if sql_where:
                sql += f" {sql_where.lstrip()}"
            return sql
        if sql_where:
            return f"{t.delete_from.value} {table_name} {sql_where.lstrip()}"
        raise SqlError("[rbsql] del data must have where sql!")