import pytest

from rbsql.driver import DriverType
from rbsql.errors import SqlError
from rbsql.page import (
    DEFAULT_PAGE_SIZE,
    MixPagePlugin,
    PackPagePlugin,
    Page,
    PageRequest,
    ReplacePagePlugin,
)


def test_page_round_trip_and_offset():
    page = Page(page_no=2, page_size=10)
    page.records.append(12)
    restored = Page.from_json(page.to_json())
    assert restored == page
    assert page.offset() == 10


def test_make_count():
    sql = ReplacePagePlugin().make_count_sql(
        "biz_activity where id = 1 and order by id DESC and order by id DESC"
    )
    assert sql == "select count(1) from biz_activity where id = 1 and order by id DESC and "


def test_page_request_defaults():
    request = PageRequest()
    assert (request.page_no, request.page_size, request.total) == (1, DEFAULT_PAGE_SIZE, 0)
    assert request.search_count is True


def test_page_request_from_options_sets_total_to_default_size():
    request = PageRequest.from_options(None, None)
    assert request.page_no == 1
    assert request.page_size == DEFAULT_PAGE_SIZE
    assert request.total == DEFAULT_PAGE_SIZE


def test_page_no_below_one_is_clamped():
    assert PageRequest(page_no=0).page_no == 1
    assert Page(page_no=0).page_no == 1
    assert Page(page_no=0, page_size=5).offset() == 0


@pytest.mark.parametrize(
    "total,size,expected",
    [(25, 10, 3), (20, 10, 2), (0, 10, 0), (5, 0, 0)],
)
def test_pages(total, size, expected):
    assert PageRequest(total=total, page_size=size).pages() == expected
    assert Page(total=total, page_size=size).pages_count() == expected


def test_page_request_to_json():
    assert PageRequest().to_json() == (
        '{"total":0,"page_no":1,"page_size":10,"search_count":true}'
    )


def test_page_from_json_rejects_missing_fields():
    with pytest.raises(ValueError):
        Page.from_json('{"records":[]}')


def test_replace_plugin_mysql():
    count_sql, sql = ReplacePagePlugin().make_page_sql(
        DriverType.MYSQL, " select * from t order by id ", [], PageRequest(page_no=2)
    )
    assert count_sql == "select count(1) from t "
    assert sql == "select * from t order by id limit 10,10"


def test_replace_plugin_postgres_limit():
    _, sql = ReplacePagePlugin().make_page_sql(
        DriverType.POSTGRES, "select * from t", [], PageRequest(page_no=3, page_size=5)
    )
    assert sql == "select * from t limit 5 offset 10"


def test_mssql_wraps_query():
    _, sql = ReplacePagePlugin().make_page_sql(
        DriverType.MSSQL, "select * from t", [], PageRequest()
    )
    assert sql.startswith("select RB_DATA.*, 0 as RB_DATA_ORDER from (select * from t)RB_DATA")
    assert sql.endswith("offset 0 rows fetch next 10 rows only")


def test_no_count_when_search_count_disabled():
    request = PageRequest(search_count=False)
    count_sql, _ = ReplacePagePlugin().make_page_sql(
        DriverType.MYSQL, "select * from t", [], request
    )
    assert count_sql == "select * from t"


def test_pack_plugin_count_sql():
    assert PackPagePlugin().make_count_sql("select a from t") == (
        "select count(1) from (select a from t) a"
    )


def test_mix_plugin_chooses_pack_for_group_by():
    sql = "select a from t group by a"
    count_sql, _ = MixPagePlugin().make_page_sql(DriverType.MYSQL, sql, [], PageRequest())
    assert count_sql == PackPagePlugin().make_count_sql(sql)


def test_mix_plugin_chooses_replace_otherwise():
    sql = "select a from t"
    count_sql, _ = MixPagePlugin().make_page_sql(DriverType.MYSQL, sql, [], PageRequest())
    assert count_sql == ReplacePagePlugin().make_count_sql(sql)


def test_non_select_sql_rejected():
    with pytest.raises(SqlError):
        ReplacePagePlugin().make_page_sql(DriverType.MYSQL, "update t set a = 1", [], Page())


def test_none_driver_rejected():
    with pytest.raises(SqlError):
        PackPagePlugin().make_page_sql(DriverType.NONE, "select * from t", [], Page())