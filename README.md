# rbsql

Building blocks for composing SQL by hand: a fluent condition builder,
paging helpers, logical-delete SQL, statement interceptors, level-filtered
logging, and id generators.

## Installation

```
pip install rbsql
```

## Drivers and placeholders

`rbsql.driver.DriverType` names the supported databases (`MYSQL`,
`POSTGRES`, `SQLITE`, `MSSQL`, and `NONE`). `stmt_convert(index)` gives the
placeholder for a zero-based argument index: `?` for MySQL and SQLite,
`$1, $2, ...` for Postgres, `@p1, @p2, ...` for SQL Server.
`page_limit_sql(offset, size)` gives the clause that selects one page.
`DriverType.NONE` raises `rbsql.errors.SqlError` for both.

## Building conditions

`rbsql.wrapper.Wrapper` gathers a SQL fragment and its bound arguments.

```python
from rbsql.driver import DriverType
from rbsql.wrapper import Wrapper

w = (
    Wrapper(DriverType.POSTGRES)
    .eq("id", 1)
    .in_("status", [1, 2, 3])
    .like("name", "bob")
    .between("create_time", "2020-01-01 00:00:00", "2020-12-12 00:00:00")
    .order_by(True, ["id"])
)
print(w.sql)
# id = $1 and status in ( $2 , $3 , $4 ) and name like $5
#   and create_time between $6 and $7 order by id asc
print(w.args)
# [1, 1, 2, 3, '%bob%', '2020-01-01 00:00:00', '2020-12-12 00:00:00']
```

Builder methods change the wrapper in place and return it, so calls chain.
Call `copy()` to branch from a shared starting point.

- Comparisons: `eq`, `ne`, `gt`, `ge`, `lt`, `le`, `between`,
  `not_between`, `like`, `like_left`, `like_right`, `not_like`, `is_null`,
  `is_not_null`, `in_array` / `in_`, `not_in` (an empty collection adds
  nothing), and `all_eq` for every entry of a mapping or dataclass, in key
  order.
- Joining: `and_()` and `or_()` add a connector unless the SQL is empty or
  already ends with a connector or operator; comparisons add `and`
  themselves.
- Clauses: `order_by`, `group_by`, `having`, `limit`, `insert_into`.
- Raw text and arguments: `push_sql`, `set_sql`, `push_arg`, `pop_arg`,
  `set_args`, `push`, and `push_wrapper`, which adds another wrapper and
  renumbers numbered placeholders.
- Conditional steps: `do_if`, `do_if_else`, `do_match`.
- Clean-up: `trim_space`, `trim_and`, `trim_or`, `trim_and_or`,
  `trim_value`.
- `set_formats` takes per-column functions that rewrite the placeholder
  written for that column.

`rbsql.rule` has `make_where` and `make_left_insert_where` for turning
condition fragments into `where` clauses.

## Paging

```python
from rbsql.driver import DriverType
from rbsql.page import MixPagePlugin, PageRequest

plugin = MixPagePlugin()
count_sql, page_sql = plugin.make_page_sql(
    DriverType.MYSQL, "select * from users where age > ?", [18], PageRequest(2, 10)
)
# count_sql: 'select count(1) from users where age > ? '
# page_sql:  'select * from users where age > ? limit 10,10'
```

`ReplacePagePlugin` counts by replacing the selected columns with
`count(1)`; `PackPagePlugin` wraps the whole query in a sub-select;
`MixPagePlugin` packs queries that contain `group by` and replaces the
rest. A statement that neither starts with `select ` nor contains ` from `
raises `SqlError`.

`PageRequest` and `Page` both offer `offset()` and `from_options()`;
`PageRequest.pages()` and `Page.pages_count()` give the page count for the
total. `Page` holds the records of one page and round-trips through
`to_json()` and `Page.from_json()`.

## Logical delete

```python
from rbsql.driver import DriverType
from rbsql.logic_delete import LogicDeletePlugin

plugin = LogicDeletePlugin("del")
plugin.create_remove_sql(DriverType.MYSQL, "test", "name,age,del", "")
# 'update test set del = 1'
plugin.create_remove_sql(DriverType.MYSQL, "test", "name,age", " where id = 1")
# 'delete from test where id = 1'
```

A table without the flag column and without a `where` clause raises
`SqlError`. Equal `deleted` and `un_deleted` values raise `ValueError`.

## Interceptors and logging

Each `rbsql.intercept.SqlIntercept` has
`do_intercept(driver_type, log, sql, args, is_prepared_sql)`, which returns
the `(sql, args)` to run or raises `SqlError` to refuse.

- `BlockAttackDeleteInterceptor` and `BlockAttackUpdateInterceptor` refuse
  `delete from` and `update` statements that have no ` where `.
- `LogFormatSqlIntercept` logs the statement with its arguments written in
  place of the placeholders.

`rbsql.log.LogPlugin` sends messages to the `rbsql` logger when its
`LevelFilter` allows them; `LevelFilter.OFF` silences it.

## Ids

```python
from rbsql.object_id import ObjectId
from rbsql.snowflake import Snowflake, new_snowflake_id

oid = ObjectId.generate()
print(oid.to_hex(), oid.timestamp())
print(ObjectId.from_hex("53e37d08776f724e42000000"))

print(new_snowflake_id())
gen = Snowflake(worker_id=2, datacenter_id=3)
print(gen.generate())
```

A malformed hex string raises `ObjectIdError`.

## Other helpers

- `rbsql.templates`: the SQL keywords (`TEMPLATE`, `SqlTemplates.create`).
- `rbsql.errors`: `SqlError` and `require`.
- `rbsql.strings`: `find_convert_string`, `find_format_string`,
  `to_snake_name`, `un_packing_string`, `count_string_num`.
- `rbsql.values`: `get_deep_value` for dotted-path lookups in nested dicts.
- `rbsql.timing`: `bench`, `print_qps`, `print_each_time`, `print_time`,
  `count_time_qps`, `duration_to_string`.

## What this package does not do

It builds SQL text and argument lists only. It does not connect to a
database, execute statements, manage transactions, or map rows to objects;
pass the SQL and arguments it produces to a database driver of your choice.

## Running the tests

```
pip install -e ".[test]"
pytest
```