"""Log levels, log messages and the interface that receives them."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable


class LogLevel(enum.IntFlag):
    """Severity of a log message; values combine into filters."""

    NONE = 0
    TRACE = 1 << 0  # Very verbose diagnostics
    DEBUG = 1 << 1  # Detailed diagnostics
    INFO = 1 << 2  # Normal behaviour and milestones
    WARNING = 1 << 3  # Potential future errors and data mismatches
    ERROR = 1 << 4  # Recoverable errors that should be looked at
    FATAL = 1 << 5  # Errors that end execution


LOG_LEVELS_ERRORS_ONLY = LogLevel.ERROR | LogLevel.FATAL
LOG_LEVELS_LIMITED = LogLevel.WARNING | LOG_LEVELS_ERRORS_ONLY
LOG_LEVELS_DEFAULT = LogLevel.INFO | LOG_LEVELS_LIMITED
LOG_LEVELS_DETAILED = LogLevel.DEBUG | LogLevel.TRACE | LOG_LEVELS_DEFAULT


def _empty_text() -> str:
    return ""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogMessage:
    """A single log entry whose text is produced lazily by ``formatter``."""

    level: LogLevel = LogLevel.NONE
    logger_name: str = ""
    formatter: Callable[[], str] = _empty_text
    timestamp: datetime = field(default_factory=_utc_now)
    source: str = ""
    sub_messages: list[LogMessage] = field(default_factory=list)

    def text(self) -> str:
        """Return the formatted message text."""
        return self.formatter()


class LogReceiver(abc.ABC):
    """Anything that accepts log messages."""

    @abc.abstractmethod
    def log(self, msg: LogMessage) -> None:
        """Accept one log message."""