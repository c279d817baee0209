"""Rules for building and merging WHERE clauses."""

from __future__ import annotations

from rbsql.templates import TEMPLATE


def _trim_start_matches(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _trim_end_matches(text: str, suffix: str) -> str:
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _starts_with_tail_clause(sql: str) -> bool:
    return sql.startswith(
        (
            TEMPLATE.order_by.right_space,
            TEMPLATE.group_by.right_space,
            TEMPLATE.limit.right_space,
        )
    )


def make_where(where_sql: str) -> str:
    """Turn a condition fragment into a WHERE clause."""
    sql = where_sql.lstrip()
    if not sql:
        return ""
    if _starts_with_tail_clause(sql):
        return sql
    for keyword in (TEMPLATE.where_, TEMPLATE.and_, TEMPLATE.or_):
        sql = _trim_start_matches(sql, keyword.right_space)
    return f" {TEMPLATE.where_.value} {sql} "


def make_left_insert_where(insert_sql: str, where_sql: str) -> str:
    """Put insert_sql in front of the conditions of where_sql."""
    sql = where_sql.strip()
    sql = _trim_start_matches(sql, TEMPLATE.where_.right_space)
    sql = _trim_start_matches(sql, TEMPLATE.and_.right_space)
    if not sql:
        return insert_sql
    head = _trim_end_matches(insert_sql.strip(), TEMPLATE.and_.left_space)
    if _starts_with_tail_clause(sql):
        return f" {TEMPLATE.where_.value} {head} {sql}"
    return f" {TEMPLATE.where_.value} {head} {TEMPLATE.and_.value} {sql}"