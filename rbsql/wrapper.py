"""A fluent builder for SQL condition fragments and their arguments."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from rbsql.driver import DriverType
from rbsql.templates import TEMPLATE

Formatter = Callable[[str], str]

_NO_AND_AFTER = (
    TEMPLATE.where_.left_space,
    TEMPLATE.and_.left_space,
    TEMPLATE.or_.left_space,
    "(",
    ",",
    "=",
    "+",
    "-",
    "*",
    "/",
    "%",
    "^",
    ">",
    "<",
    "&",
    "|",
)


def _trim_start_matches(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _trim_end_matches(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _strip_trailing_connectors(sql: str) -> str:
    for keyword in (TEMPLATE.where_, TEMPLATE.and_, TEMPLATE.or_):
        sql = _trim_end_matches(sql, keyword.left_space)
    return sql


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


@dataclass
class Wrapper:
    """Accumulates SQL text and bound arguments for one driver.

    Builder methods change the wrapper in place and return it, so calls
    can be chained; use copy() to branch from a shared starting point.
    """

    driver_type: DriverType
    dml: str = "where"
    sql: str = ""
    args: list[Any] = field(default_factory=list)
    formats: dict[str, Formatter] = field(default_factory=dict, repr=False)

    def copy(self) -> "Wrapper":
        """Return an independent copy of this wrapper."""
        return dataclasses.replace(self, args=list(self.args), formats=dict(self.formats))

    def trim_value(self, old: str, new: str) -> "Wrapper":
        """Replace every occurrence of old with new in the SQL text."""
        self.sql = self.sql.replace(old, new)
        return self

    def set_formats(self, formats: Mapping[str, Formatter]) -> "Wrapper":
        """Set per-column functions that rewrite placeholders."""
        self.formats = dict(formats)
        return self

    def set_dml(self, dml: str) -> "Wrapper":
        self.dml = dml
        return self

    def push_wrapper(self, other: "Wrapper") -> "Wrapper":
        """Append another wrapper's SQL and arguments."""
        return self.push(other.sql, other.args)

    def push(self, sql: str, args: Sequence[Any] | None) -> "Wrapper":
        """Append SQL and its arguments, renumbering numbered placeholders."""
        args = [] if args is None else list(args)
        new_sql = sql
        if self.driver_type.is_number_type():
            count = len(args)
            convert = self.driver_type.stmt_convert
            for index in range(count):
                new_sql = new_sql.replace(convert(index), convert(index + count))
            for index in range(count, len(self.args)):
                new_sql = new_sql.replace(convert(index), convert(index + count))
        self.sql += new_sql
        self.args.extend(args)
        return self

    def do_if(self, test: bool, method: Callable[["Wrapper"], "Wrapper"]) -> "Wrapper":
        """Apply method when test is true."""
        return method(self) if test else self

    def do_if_else(
        self,
        test: bool,
        method_if: Callable[["Wrapper"], "Wrapper"],
        method_else: Callable[["Wrapper"], "Wrapper"],
    ) -> "Wrapper":
        """Apply method_if when test is true, otherwise method_else."""
        return method_if(self) if test else method_else(self)

    def do_match(
        self,
        cases: Iterable[tuple[bool, Callable[["Wrapper"], "Wrapper"]]],
        default: Callable[["Wrapper"], "Wrapper"],
    ) -> "Wrapper":
        """Apply the first case whose test is true, or default."""
        for test, case in cases:
            if test:
                return case(self)
        return default(self)

    def set_sql(self, sql: str) -> "Wrapper":
        self.sql = sql
        return self

    def push_sql(self, sql: str) -> "Wrapper":
        self.sql += sql
        return self

    def set_args(self, args: Sequence[Any] | None) -> "Wrapper":
        """Replace the arguments; None leaves them unchanged."""
        if args is not None:
            self.args = list(args)
        return self

    def push_arg(self, arg: Any) -> "Wrapper":
        self.args.append(arg)
        return self

    def pop_arg(self) -> "Wrapper":
        """Drop the last argument, if any."""
        if self.args:
            self.args.pop()
        return self

    def not_allow_add_and_on_end(self) -> bool:
        """Whether the SQL ends where a connecting and/or makes no sense."""
        sql = self.sql.rstrip()
        return not sql or sql.endswith(_NO_AND_AFTER)

    def and_(self) -> "Wrapper":
        """Append ' and ' unless the SQL ends with a connector or operator."""
        if not self.not_allow_add_and_on_end():
            self.sql += TEMPLATE.and_.left_right_space
        return self

    def or_(self) -> "Wrapper":
        """Append ' or ' unless the SQL ends with a connector or operator."""
        if not self.not_allow_add_and_on_end():
            self.sql += TEMPLATE.or_.left_right_space
        return self

    def having(self, sql_having: str) -> "Wrapper":
        self.and_()
        self.sql += f" {TEMPLATE.having.value} {sql_having} "
        return self

    def all_eq(self, arg: Any) -> "Wrapper":
        """Add 'key = value' for every entry of a mapping or dataclass, in key order."""
        self.and_()
        if dataclasses.is_dataclass(arg) and not isinstance(arg, type):
            arg = dataclasses.asdict(arg)
        if not isinstance(arg, Mapping) or not arg:
            return self
        items = sorted(arg.items())
        for position, (key, value) in enumerate(items):
            self.eq(key, value)
            if position + 1 != len(items):
                self.sql += " , "
        return self

    def do_format_column(self, column: str, data: str) -> str:
        """Return data rewritten by the column's format function, if any."""
        formatter = self.formats.get(column)
        return formatter(data) if formatter is not None else data

    def _placeholder(self, column: str, offset: int = 0) -> str:
        return self.do_format_column(
            column, self.driver_type.stmt_convert(len(self.args) + offset)
        )

    def _compare(self, column: str, operator: str, obj: Any) -> "Wrapper":
        self.and_()
        self.sql += f"{column} {operator} {self._placeholder(column)}"
        self.args.append(obj)
        return self

    def eq(self, column: str, obj: Any) -> "Wrapper":
        return self._compare(column, "=", obj)

    def ne(self, column: str, obj: Any) -> "Wrapper":
        return self._compare(column, "<>", obj)

    def gt(self, column: str, obj: Any) -> "Wrapper":
        return self._compare(column, ">", obj)

    def ge(self, column: str, obj: Any) -> "Wrapper":
        return self._compare(column, ">=", obj)

    def lt(self, column: str, obj: Any) -> "Wrapper":
        return self._compare(column, "<", obj)

    def le(self, column: str, obj: Any) -> "Wrapper":
        return self._compare(column, "<=", obj)

    def order_by(self, is_asc: bool, columns: Sequence[str]) -> "Wrapper":
        if not columns:
            return self
        self.sql = _strip_trailing_connectors(self.sql.rstrip())
        direction = TEMPLATE.asc.value if is_asc else TEMPLATE.desc.value
        self.sql += TEMPLATE.order_by.left_right_space
        self.sql += ",".join(f"{column} {direction}" for column in columns)
        return self

    def group_by(self, columns: Sequence[str]) -> "Wrapper":
        if not columns:
            return self
        self.sql = _strip_trailing_connectors(self.sql.strip())
        self.sql += TEMPLATE.group_by.left_right_space + ",".join(columns)
        return self

    def _between(self, column: str, keyword: str, low: Any, high: Any) -> "Wrapper":
        self.and_()
        first = self._placeholder(column)
        second = self._placeholder(column, 1)
        self.sql += f"{column} {keyword} {first} {TEMPLATE.and_.value} {second}"
        self.args.extend((low, high))
        return self

    def between(self, column: str, low: Any, high: Any) -> "Wrapper":
        return self._between(column, TEMPLATE.between.value, low, high)

    def not_between(self, column: str, low: Any, high: Any) -> "Wrapper":
        return self._between(
            column, f"{TEMPLATE.not_.value} {TEMPLATE.between.value}", low, high
        )

    def _like(self, column: str, keyword: str, pattern: str) -> "Wrapper":
        self.and_()
        self.sql += f"{column} {keyword} {self._placeholder(column)}"
        self.args.append(pattern)
        return self

    def like(self, column: str, obj: Any) -> "Wrapper":
        return self._like(column, TEMPLATE.like.value, f"%{_as_text(obj)}%")

    def like_left(self, column: str, obj: Any) -> "Wrapper":
        return self._like(column, TEMPLATE.like.value, f"%{_as_text(obj)}")

    def like_right(self, column: str, obj: Any) -> "Wrapper":
        return self._like(column, TEMPLATE.like.value, f"{_as_text(obj)}%")

    def not_like(self, column: str, obj: Any) -> "Wrapper":
        return self._like(
            column, f"{TEMPLATE.not_.value} {TEMPLATE.like.value}", f"%{_as_text(obj)}%"
        )

    def is_null(self, column: str) -> "Wrapper":
        self.and_()
        self.sql += column + TEMPLATE.is_.left_right_space + TEMPLATE.null.right_space
        return self

    def is_not_null(self, column: str) -> "Wrapper":
        self.and_()
        self.sql += (
            column
            + TEMPLATE.is_.left_right_space
            + TEMPLATE.not_.right_space
            + TEMPLATE.null.right_space
        )
        return self

    def _in(self, column: str, keyword: str, values: Iterable[Any]) -> "Wrapper":
        values = list(values)
        if not values:
            return self
        self.and_()
        placeholders = []
        for value in values:
            placeholders.append(f" {self._placeholder(column)} ")
            self.args.append(value)
        self.sql += f"{column} {keyword} (" + ",".join(placeholders) + ")"
        return self

    def in_array(self, column: str, values: Iterable[Any]) -> "Wrapper":
        """Add 'column in (...)'; an empty collection adds nothing."""
        return self._in(column, TEMPLATE.in_.value, values)

    def in_(self, column: str, values: Iterable[Any]) -> "Wrapper":
        return self.in_array(column, values)

    def not_in(self, column: str, values: Iterable[Any]) -> "Wrapper":
        """Add 'column not in (...)'; an empty collection adds nothing."""
        return self._in(column, f"{TEMPLATE.not_.value} {TEMPLATE.in_.value}", values)

    def trim_space(self) -> "Wrapper":
        self.sql = self.sql.replace("  ", " ")
        return self

    def trim_and(self) -> "Wrapper":
        sql = _trim_start_matches(self.sql.strip(), TEMPLATE.and_.right_space)
        self.sql = _trim_end_matches(sql, TEMPLATE.and_.left_space)
        return self

    def trim_or(self) -> "Wrapper":
        sql = _trim_start_matches(self.sql.strip(), TEMPLATE.or_.right_space)
        self.sql = _trim_end_matches(sql, TEMPLATE.or_.left_space)
        return self

    def trim_and_or(self) -> "Wrapper":
        sql = self.sql.strip()
        for keyword in (TEMPLATE.and_, TEMPLATE.or_):
            sql = _trim_start_matches(sql, keyword.right_space)
            sql = _trim_end_matches(sql, keyword.left_space)
        self.sql = sql
        return self

    def insert_into(self, table_name: str, columns: str, values: str) -> "Wrapper":
        """Replace the SQL with an insert statement."""
        if not (values.startswith("(") and values.endswith(")")):
            values = f"({values})"
        self.sql = (
            f"{TEMPLATE.insert_into.value} {table_name} ({columns}) "
            f"{TEMPLATE.values.value} {values}"
        )
        return self

    def limit(self, limit: int) -> "Wrapper":
        self.sql += f" {TEMPLATE.limit.value} {limit} "
        return self