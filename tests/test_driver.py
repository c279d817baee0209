import pytest

from rbsql.driver import DriverType
from rbsql.errors import SqlError


def test_mysql_limit():
    assert DriverType.MYSQL.page_limit_sql(1, 20) == " limit 1,20"


def test_postgres_and_sqlite_limits_agree():
    assert DriverType.POSTGRES.page_limit_sql(1, 20) == DriverType.SQLITE.page_limit_sql(1, 20)
    assert DriverType.POSTGRES.page_limit_sql(1, 20).startswith(" limit 20")


def test_mssql_limit_mentions_offset_and_size():
    sql = DriverType.MSSQL.page_limit_sql(7, 30)
    assert sql.startswith(" offset 7 ")
    assert " 30 " in sql
    assert sql.endswith("rows only")


def test_none_limit_raises():
    with pytest.raises(SqlError):
        DriverType.NONE.page_limit_sql(0, 10)


def test_postgres_placeholder():
    assert DriverType.POSTGRES.stmt_convert(0) == "$1"


@pytest.mark.parametrize("index", [0, 3, 10])
def test_question_mark_drivers(index):
    assert DriverType.MYSQL.stmt_convert(index) == "?"
    assert DriverType.SQLITE.stmt_convert(index) == "?"


def test_numbered_placeholders_differ():
    for driver in (DriverType.POSTGRES, DriverType.MSSQL):
        assert driver.stmt_convert(0) != driver.stmt_convert(1)
        assert driver.stmt_convert(4).endswith("5")


def test_none_placeholder_raises():
    with pytest.raises(SqlError):
        DriverType.NONE.stmt_convert(0)


def test_is_number_type():
    assert DriverType.POSTGRES.is_number_type() is True
    assert DriverType.MSSQL.is_number_type() is True
    assert DriverType.MYSQL.is_number_type() is False
    assert DriverType.SQLITE.is_number_type() is False