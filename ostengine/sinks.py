"""Log sinks: the output routes that formatted log messages are sent to."""

from __future__ import annotations

import abc
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TextIO

from ostengine.formatter import MessageFormatter
from ostengine.levels import (
    LOG_LEVELS_DEFAULT,
    LOG_LEVELS_DETAILED,
    LogLevel,
    LogMessage,
)
from ostengine.logger import LogInstance

_file_sink_log = LogInstance("FileSinkLog")

_TIME_WIDTH = 9
_LEVEL_WIDTH = 4
_MESSAGE_OFFSET = _TIME_WIDTH + _LEVEL_WIDTH + 2
_FLUSH_THRESHOLD = 4096


class LogSink(abc.ABC):
    """Base class for log outputs; filters messages by level."""

    def __init__(self, levels: LogLevel = LOG_LEVELS_DEFAULT) -> None:
        self._level_filter = LogLevel(levels)

    @property
    def levels(self) -> LogLevel:
        return self._level_filter

    def accepts(self, level: LogLevel) -> bool:
        """Whether a message of ``level`` passes this sink's filter."""
        return (LogLevel(level) & self._level_filter) != LogLevel.NONE

    @abc.abstractmethod
    def log(self, msg: LogMessage) -> None:
        """Write one message."""

    def flush(self) -> None:
        """Push any buffered output to its destination."""


class ConsoleLogSink(LogSink):
    """Writes messages as aligned lines to a text stream (stdout by default)."""

    def __init__(
        self,
        levels: LogLevel = LOG_LEVELS_DEFAULT,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(levels)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, msg: LogMessage) -> None:
        out = self.stream
        fmt = MessageFormatter(msg)
        out.write(
            f"{fmt.time_hhmmss():<{_TIME_WIDTH}}"
            f"{fmt.level_abbr():<{_LEVEL_WIDTH}}"
            f"{msg.logger_name}: {fmt.message()}\n"
        )
        for sub in msg.sub_messages:
            out.write(f"{'>':>{_MESSAGE_OFFSET}} {MessageFormatter(sub).message()}\n")
        out.flush()


class FileLogSink(LogSink):
    """Buffers messages and writes them to a time-stamped file in a directory."""

    def __init__(self, directory: str | Path, main_name: str = "OstLog") -> None:
        super().__init__(LOG_LEVELS_DETAILED)
        directory = Path(directory)
        if not directory.exists():
            directory.mkdir()

        now = datetime.now(timezone.utc)
        date_part = f"{now.day}-{now.month}-{now.year}"
        time_part = f"{now.hour}-{now.minute}-{now.second}"
        self._path = directory / f"{main_name} {date_part} {time_part}.log"

        shown = str(self._path).replace("\\", "/")
        _file_sink_log.log(LogLevel.INFO, "File logger will write to '{}'", shown)
        self._path.write_text("", encoding="utf-8")
        self._pending: list[str] = []
        self._pending_length = 0

    @property
    def path(self) -> Path:
        return self._path

    def _append(self, text: str) -> None:
        self._pending.append(text)
        self._pending_length += len(text)

    def log(self, msg: LogMessage) -> None:
        fmt = MessageFormatter(msg)
        self._append(
            f"[{fmt.level_full()}] [{fmt.time_hhmmss_ms()}] '{fmt.message()}\n"
        )
        for sub in msg.sub_messages:
            self._append(f"--DETAIL-- {MessageFormatter(sub).message()}\n")
        if self._pending_length > _FLUSH_THRESHOLD:
            self.flush()

    def flush(self) -> None:
        if not self._pending:
            return
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write("".join(self._pending))
        self._pending.clear()
        self._pending_length = 0