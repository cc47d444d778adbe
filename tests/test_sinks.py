import io
import re
from datetime import datetime, timezone

import pytest

from ostengine.levels import (
    LOG_LEVELS_DEFAULT,
    LOG_LEVELS_ERRORS_ONLY,
    LogLevel,
    LogMessage,
)
from ostengine.sinks import ConsoleLogSink, FileLogSink, LogSink


class ListSink(LogSink):
    def __init__(self, levels=LOG_LEVELS_DEFAULT):
        super().__init__(levels)
        self.messages = []

    def log(self, msg):
        self.messages.append(msg)


def _message(text, level=LogLevel.INFO, name="Test", subs=()):
    return LogMessage(
        level=level,
        logger_name=name,
        formatter=lambda: text,
        timestamp=datetime(2025, 1, 1, 7, 5, 3, 12000, tzinfo=timezone.utc),
        sub_messages=list(subs),
    )


def test_base_sink_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LogSink()


@pytest.mark.parametrize(
    "level,expected",
    [
        (LogLevel.TRACE, False),
        (LogLevel.DEBUG, False),
        (LogLevel.INFO, True),
        (LogLevel.WARNING, True),
        (LogLevel.ERROR, True),
        (LogLevel.FATAL, True),
        (LogLevel.NONE, False),
    ],
)
def test_default_filter(level, expected):
    assert ListSink().accepts(level) is expected


def test_errors_only_filter():
    sink = ConsoleLogSink(LOG_LEVELS_ERRORS_ONLY, io.StringIO())
    assert sink.accepts(LogLevel.ERROR)
    assert sink.accepts(LogLevel.FATAL)
    assert not sink.accepts(LogLevel.WARNING)
    assert sink.levels == LOG_LEVELS_ERRORS_ONLY


def test_console_line_layout():
    out = io.StringIO()
    ConsoleLogSink(stream=out).log(_message("hello", LogLevel.WARNING, "Cfg"))
    assert out.getvalue() == "07:05:03 WRN Cfg: hello\n"


def test_console_sub_messages_are_indented():
    out = io.StringIO()
    msg = _message("root", subs=[_message("first"), _message("second")])
    ConsoleLogSink(stream=out).log(msg)
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("Test: root")
    for line, text in zip(lines[1:], ["first", "second"]):
        assert line.endswith("> " + text)
        assert line.index(">") == 14


def test_console_default_stream_is_stdout(capsys):
    ConsoleLogSink().log(_message("to stdout"))
    assert capsys.readouterr().out.endswith("Test: to stdout\n")


def test_console_default_levels():
    sink = ConsoleLogSink()
    assert sink.accepts(LogLevel.INFO)
    assert not sink.accepts(LogLevel.DEBUG)


def test_file_sink_creates_directory_and_empty_file(tmp_path):
    directory = tmp_path / "Logs"
    sink = FileLogSink(directory, "Game")
    assert directory.is_dir()
    assert sink.path.parent == directory
    assert sink.path.read_text(encoding="utf-8") == ""
    assert re.fullmatch(
        r"Game \d{1,2}-\d{1,2}-\d{4} \d{1,2}-\d{1,2}-\d{1,2}\.log", sink.path.name
    )


def test_file_sink_default_name(tmp_path):
    sink = FileLogSink(tmp_path)
    assert sink.path.name.startswith("OstLog ")


def test_file_sink_accepts_all_levels(tmp_path):
    sink = FileLogSink(tmp_path)
    for level in (LogLevel.TRACE, LogLevel.DEBUG, LogLevel.FATAL):
        assert sink.accepts(level)


def test_file_sink_buffers_until_flush(tmp_path):
    sink = FileLogSink(tmp_path)
    sink.log(_message("hello", subs=[_message("sub")]))
    assert sink.path.read_text(encoding="utf-8") == ""
    sink.flush()
    assert sink.path.read_text(encoding="utf-8") == (
        "[INFO] [07:05:03:0012] 'hello\n--DETAIL-- sub\n"
    )


def test_file_sink_flushes_are_cumulative(tmp_path):
    sink = FileLogSink(tmp_path)
    sink.log(_message("one"))
    sink.flush()
    sink.log(_message("two"))
    sink.flush()
    sink.flush()
    lines = sink.path.read_text(encoding="utf-8").splitlines()
    assert [line.split("'", 1)[1] for line in lines] == ["one", "two"]


def test_file_sink_flushes_itself_when_buffer_grows(tmp_path):
    sink = FileLogSink(tmp_path)
    big = "x" * 5000
    sink.log(_message(big))
    assert big in sink.path.read_text(encoding="utf-8")