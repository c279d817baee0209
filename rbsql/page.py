"""Paging requests, pages of records and plugins that build paged SQL."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Protocol

from rbsql.driver import DriverType
from rbsql.errors import SqlError
from rbsql.templates import TEMPLATE

DEFAULT_PAGE_SIZE = 10


def _count_pages(total: int, page_size: int) -> int:
    if page_size == 0:
        return 0
    return -(-total // page_size)


def _offset(page_no: int, page_size: int) -> int:
    return (page_no - 1) * page_size if page_no > 0 else 0


def _dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"))


@dataclass
class PageRequest:
    """Which page to fetch, how large pages are, and whether to count rows."""

    page_no: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0
    search_count: bool = True

    def __post_init__(self) -> None:
        if self.page_no < 1:
            self.page_no = 1

    @classmethod
    def from_options(
        cls, page_no: int | None = None, page_size: int | None = None
    ) -> "PageRequest":
        """Build a request, using page 1 and the default size for missing values."""
        return cls(
            page_no=1 if page_no is None else page_no,
            page_size=DEFAULT_PAGE_SIZE if page_size is None else page_size,
            total=DEFAULT_PAGE_SIZE,
        )

    def pages(self) -> int:
        """Number of pages needed for the total."""
        return _count_pages(self.total, self.page_size)

    def offset(self) -> int:
        """Number of rows before the current page."""
        return _offset(self.page_no, self.page_size)

    def to_json(self) -> str:
        return _dumps(
            {
                "total": self.total,
                "page_no": self.page_no,
                "page_size": self.page_size,
                "search_count": self.search_count,
            }
        )


@dataclass
class Page:
    """One page of records together with its paging information."""

    records: list[Any] = field(default_factory=list)
    total: int = 0
    pages: int = 0
    page_no: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    search_count: bool = True

    def __post_init__(self) -> None:
        if self.page_no < 1:
            self.page_no = 1

    @classmethod
    def from_options(
        cls, page_no: int | None = None, page_size: int | None = None
    ) -> "Page":
        """Build an empty page, using page 1 and the default size for missing values."""
        return cls(
            page_no=1 if page_no is None else page_no,
            page_size=DEFAULT_PAGE_SIZE if page_size is None else page_size,
        )

    def pages_count(self) -> int:
        """Number of pages needed for the total."""
        return _count_pages(self.total, self.page_size)

    def offset(self) -> int:
        """Number of rows before the current page."""
        return _offset(self.page_no, self.page_size)

    def to_json(self) -> str:
        return _dumps(asdict(self))

    @classmethod
    def from_json(cls, text: str) -> "Page":
        """Read a page written by to_json."""
        data = json.loads(text)
        try:
            return cls(
                records=list(data["records"]),
                total=data["total"],
                pages=data["pages"],
                page_no=data["page_no"],
                page_size=data["page_size"],
                search_count=data["search_count"],
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"not a page document: {exc}") from exc


class _PageLike(Protocol):
    search_count: bool
    page_size: int

    def offset(self) -> int: ...


def _make_page_sql(
    make_count_sql: Callable[[str], str],
    driver_type: DriverType,
    sql: str,
    page: _PageLike,
) -> tuple[str, str]:
    t = TEMPLATE
    sql = sql.strip()
    if not sql.startswith(t.select.right_space) and t.from_.left_right_space not in sql:
        raise SqlError("[rbsql] make_page_sql() sql must contains 'select ' And ' from '")
    count_sql = make_count_sql(sql) if page.search_count else sql
    limit_sql = driver_type.page_limit_sql(page.offset(), page.page_size)
    if driver_type is DriverType.MSSQL:
        sql = (
            f"{t.select.value} RB_DATA.*, 0 {t.as_.value} RB_DATA_ORDER "
            f"{t.from_.value} ({sql})RB_DATA {t.order_by.value} RB_DATA_ORDER {limit_sql}"
        )
    else:
        sql += limit_sql
    return count_sql, sql


class PagePlugin(ABC):
    """Builds the count query and the paged query for a select statement."""

    @abstractmethod
    def make_page_sql(
        self,
        driver_type: DriverType,
        sql: str,
        args: Sequence[Any],
        page: _PageLike,
    ) -> tuple[str, str]:
        """Return (count_sql, select_sql)."""


@dataclass(frozen=True)
class ReplacePagePlugin(PagePlugin):
    """Counts rows by replacing the selected columns with count(1)."""

    def make_count_sql(self, sql: str) -> str:
        t = TEMPLATE
        from_index = sql.find(t.from_.left_right_space)
        start = 0 if from_index < 0 else from_index + len(t.from_.left_right_space)
        where_sql = sql[start:]
        for keyword in (t.order_by, t.limit):
            cut = where_sql.rfind(keyword.left_right_space)
            if cut >= 0:
                where_sql = where_sql[:cut]
        return f"{t.select.value} count(1) {t.from_.value} {where_sql} "

    def make_page_sql(
        self,
        driver_type: DriverType,
        sql: str,
        args: Sequence[Any],
        page: _PageLike,
    ) -> tuple[str, str]:
        return _make_page_sql(self.make_count_sql, driver_type, sql, page)


@dataclass(frozen=True)
class PackPagePlugin(PagePlugin):
    """Counts rows by wrapping the whole query in a sub-select."""

    def make_count_sql(self, sql: str) -> str:
        return f"{TEMPLATE.select.value} count(1) {TEMPLATE.from_.value} ({sql}) a"

    def make_page_sql(
        self,
        driver_type: DriverType,
        sql: str,
        args: Sequence[Any],
        page: _PageLike,
    ) -> tuple[str, str]:
        return _make_page_sql(self.make_count_sql, driver_type, sql, page)


@dataclass(frozen=True)
class MixPagePlugin(PagePlugin):
    """Packs grouped queries and replaces the columns of all others."""

    pack: PackPagePlugin = field(default_factory=PackPagePlugin)
    replace: ReplacePagePlugin = field(default_factory=ReplacePagePlugin)

    def make_page_sql(
        self,
        driver_type: DriverType,
        sql: str,
        args: Sequence[Any],
        page: _PageLike,
    ) -> tuple[str, str]:
        plugin: PagePlugin
        if TEMPLATE.group_by.left_right_space in sql:
            plugin = self.pack
        else:
            plugin = self.replace
        return plugin.make_page_sql(driver_type, sql, args, page)