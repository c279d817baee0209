"""Level-filtered logging of SQL activity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class LevelFilter(IntEnum):
    """The most verbose level that is let through; OFF lets nothing through."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_LOGGING_LEVELS = {
    LevelFilter.ERROR: logging.ERROR,
    LevelFilter.WARN: logging.WARNING,
    LevelFilter.INFO: logging.INFO,
    LevelFilter.DEBUG: logging.DEBUG,
    LevelFilter.TRACE: TRACE,
}


@dataclass
class LogPlugin:
    """Sends messages to a logger when the level filter allows them."""

    level_filter: LevelFilter = LevelFilter.INFO
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("rbsql"), repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.level_filter = LevelFilter(self.level_filter)

    def is_enable(self) -> bool:
        """Whether any message can be logged."""
        return self.level_filter is not LevelFilter.OFF

    def do_log(self, data: str) -> None:
        """Log at the level the filter is set to."""
        if self.is_enable():
            self._emit(self.level_filter, data)

    def _emit(self, level: LevelFilter, data: str) -> None:
        if not self.is_enable() or self.level_filter < level:
            return
        self.logger.log(_LOGGING_LEVELS[level], "[rbsql] %s", data)

    def error(self, data: str) -> None:
        self._emit(LevelFilter.ERROR, data)

    def warn(self, data: str) -> None:
        self._emit(LevelFilter.WARN, data)

    def info(self, data: str) -> None:
        self._emit(LevelFilter.INFO, data)

    def debug(self, data: str) -> None:
        self._emit(LevelFilter.DEBUG, data)

    def trace(self, data: str) -> None:
        self._emit(LevelFilter.TRACE, data)