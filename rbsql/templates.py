"""SQL keyword templates used when assembling statements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Keywords:
    """A SQL keyword with its commonly needed padded variants."""

    value: str
    left_space: str
    right_space: str
    left_right_space: str

    @classmethod
    def of(cls, word: str) -> "Keywords":
        """Build the keyword and its padded forms from a bare word."""
        return cls(
            value=word,
            left_space=f" {word}",
            right_space=f"{word} ",
            left_right_space=f" {word} ",
        )


_WORDS = {
    "where_": "where",
    "and_": "and",
    "or_": "or",
    "in_": "in",
    "having": "having",
    "order_by": "order by",
    "group_by": "group by",
    "asc": "asc",
    "desc": "desc",
    "between": "between",
    "not_": "not",
    "like": "like",
    "is_": "is",
    "null": "NULL",
    "insert_into": "insert into",
    "values": "values",
    "limit": "limit",
    "set": "set",
    "update": "update",
    "select": "select",
    "delete_from": "delete from",
    "from_": "from",
    "as_": "as",
    "offset": "offset",
    "rows_fetch_next": "rows fetch next",
    "rows_only": "rows only",
}


@dataclass(frozen=True)
class SqlTemplates:
    """The SQL keywords used throughout the package."""

    where_: Keywords
    and_: Keywords
    or_: Keywords
    in_: Keywords
    having: Keywords
    order_by: Keywords
    group_by: Keywords
    asc: Keywords
    desc: Keywords
    between: Keywords
    not_: Keywords
    like: Keywords
    is_: Keywords
    null: Keywords
    insert_into: Keywords
    values: Keywords
    limit: Keywords
    set: Keywords
    update: Keywords
    select: Keywords
    delete_from: Keywords
    from_: Keywords
    as_: Keywords
    offset: Keywords
    rows_fetch_next: Keywords
    rows_only: Keywords

    @classmethod
    def create(cls, upper_case: bool = False) -> "SqlTemplates":
        """Build the keyword set, optionally with upper-case keywords."""
        return cls(
            **{
                name: Keywords.of(word.upper() if upper_case else word)
                for name, word in _WORDS.items()
            }
        )


TEMPLATE = SqlTemplates.create()