import pytest

from rbsql.strings import (
    count_string_num,
    find_convert_string,
    find_format_string,
    to_snake_name,
    un_packing_string,
)


def test_find_format_string():
    assert find_format_string("1111{}222{1}2") == [("", "{}"), ("1", "{1}")]


def test_find_format_string_keeps_duplicates():
    result = find_format_string("{a}{a}")
    assert len(result) == 2
    assert result[0] == result[1]


def test_find_convert_string_deduplicates():
    result = find_convert_string("select #{a} ${b} #{a}")
    assert result == [("a", "#{a}"), ("b", "${b}")]


def test_find_convert_string_ignores_bare_markers():
    assert find_convert_string("a # b $ c {d}") == []


def test_find_convert_string_keys_match_expressions():
    for key, expr in find_convert_string("x = #{id} and y = ${name.first}"):
        assert expr[2:-1] == key
        assert expr[0] in "#$"


def test_to_snake_name():
    assert to_snake_name("BizActivity") == "biz_activity"


def test_to_snake_name_lower_unchanged():
    assert to_snake_name("name") == "name"


@pytest.mark.parametrize("quote", ["'", "`", '"'])
def test_un_packing_string(quote):
    assert un_packing_string(f"{quote}strings{quote}") == "strings"


def test_un_packing_string_unbalanced():
    assert un_packing_string("'strings") == "'strings"
    assert un_packing_string("'") == "'"


def test_count_string_num():
    text = "a,b,,c"
    assert count_string_num(text, ",") == len(text.split(",")) - 1
    assert count_string_num(text, "z") == 0