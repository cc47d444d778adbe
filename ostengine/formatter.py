"""Text fragments for presenting a log message."""

from __future__ import annotations

from datetime import datetime, timezone

from ostengine.levels import LogLevel, LogMessage

_FULL_NAMES = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

_ABBREVIATIONS = {
    LogLevel.TRACE: "TRC",
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARNING: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.FATAL: "FAT",
}


class MessageFormatter:
    """Formats the level, time of day and text of one message."""

    def __init__(self, msg: LogMessage) -> None:
        self._msg = msg

    def _time_of_day(self) -> datetime:
        stamp = self._msg.timestamp
        if stamp.tzinfo is not None:
            stamp = stamp.astimezone(timezone.utc)
        return stamp

    def level_full(self) -> str:
        """Full level name, or an empty string for anything but a single level."""
        return _FULL_NAMES.get(self._msg.level, "")

    def level_abbr(self) -> str:
        """Three-letter level name, or an empty string for anything but a single level."""
        return _ABBREVIATIONS.get(self._msg.level, "")

    def time_hhmmss(self) -> str:
        """Time of day as HH:MM:SS."""
        t = self._time_of_day()
        return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"

    def time_hhmmss_ms(self) -> str:
        """Time of day as HH:MM:SS:mmmm, milliseconds padded to four digits."""
        t = self._time_of_day()
        ms = t.microsecond // 1000
        return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}:{ms:04d}"

    def message(self) -> str:
        """The message text."""
        return self._msg.text()