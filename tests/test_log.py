import logging

import pytest

from rbsql.log import TRACE, LevelFilter, LogPlugin


@pytest.fixture
def captured(caplog):
    caplog.set_level(1, logger="rbsql")
    return caplog


def _messages(caplog):
    return [record.getMessage() for record in caplog.records]


def test_level(captured):
    plugin = LogPlugin()
    assert plugin.is_enable() is True
    plugin.debug("debug")
    plugin.info("info")
    plugin.warn("warn")
    plugin.error("error")
    plugin.level_filter = LevelFilter.OFF
    assert plugin.is_enable() is False
    plugin.info("off")
    assert _messages(captured) == ["[rbsql] info", "[rbsql] warn", "[rbsql] error"]


def test_default_is_info_and_enabled():
    plugin = LogPlugin()
    assert plugin.level_filter is LevelFilter.INFO
    assert plugin.is_enable() is True
    assert LogPlugin(LevelFilter.OFF).is_enable() is False


def test_trace_filter_lets_everything_through(captured):
    plugin = LogPlugin(LevelFilter.TRACE)
    assert plugin.is_enable() is True
    plugin.trace("t")
    plugin.debug("d")
    levels = [record.levelno for record in captured.records]
    assert levels == [TRACE, logging.DEBUG]


def test_error_filter_blocks_warnings(captured):
    plugin = LogPlugin(LevelFilter.ERROR)
    assert plugin.is_enable() is True
    plugin.warn("w")
    plugin.error("e")
    assert _messages(captured) == ["[rbsql] e"]


def test_do_log_uses_filter_level(captured):
    plugin = LogPlugin(LevelFilter.WARN)
    assert plugin.is_enable() is True
    plugin.do_log("careful")
    assert [record.levelno for record in captured.records] == [logging.WARNING]


def test_do_log_off_logs_nothing(captured):
    plugin = LogPlugin(LevelFilter.OFF)
    assert plugin.is_enable() is False
    plugin.do_log("quiet")
    assert captured.records == []


def test_integer_filter_is_coerced():
    assert LogPlugin(2).level_filter is LevelFilter.WARN