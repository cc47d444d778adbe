"""The background logger, named log instances and the process-wide logger."""

from __future__ import annotations

import inspect
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

from ostengine.levels import LogLevel, LogMessage, LogReceiver
from ostengine.message_queue import MessageQueue

if TYPE_CHECKING:
    from ostengine.sinks import LogSink

DEFAULT_CAPACITY = 128


def _caller_location() -> str:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return ""
        return f"{caller.f_code.co_filename}:{caller.f_lineno}"
    finally:
        del frame


class LogInstance:
    """A named source of log messages, with optional grouping into scopes.

    Messages go to ``logger``, or to the process-wide logger when none is given.
    """

    def __init__(self, name: str, logger: Optional[LogReceiver] = None) -> None:
        self._name = name
        self._logger = logger
        self._current = LogMessage()
        self._scoped = False

    @property
    def name(self) -> str:
        return self._name

    def _make(self, level: LogLevel, fmt: str, args: tuple, kwargs: dict) -> LogMessage:
        return LogMessage(
            level=LogLevel(level),
            logger_name=self._name,
            formatter=lambda: fmt.format(*args, **kwargs),
            timestamp=datetime.now(timezone.utc),
            source=_caller_location(),
        )

    def _dispatch(self, msg: LogMessage) -> None:
        if self._scoped:
            self._current.sub_messages.append(msg)
        else:
            (self._logger or get_logger()).log(msg)

    def log(self, level: LogLevel, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Log a message; inside a scope it becomes a detail of the scope's root."""
        self._dispatch(self._make(level, fmt, args, kwargs))

    def log_scoped(self, level: LogLevel, fmt: str, *args: Any, **kwargs: Any) -> None:
        """Open a scope whose root is this message; later messages attach to it."""
        self._current = self._make(level, fmt, args, kwargs)
        self._scoped = True

    def end_scope(self) -> None:
        """Close the scope and send its root message with all collected details."""
        self._scoped = False
        msg = self._current
        self._current = LogMessage()
        self._dispatch(msg)


class Logger(LogReceiver):
    """Queues messages and hands them to sinks from a background thread."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._queue = MessageQueue(capacity)
        self._signal = threading.Semaphore(0)
        self._shutdown = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._sinks: list[LogSink] = []
        self._own_log = LogInstance("OstLog", self)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def sinks(self) -> tuple[LogSink, ...]:
        return tuple(self._sinks)

    def register_sink(self, sink: LogSink) -> None:
        """Add an output; register sinks before calling run()."""
        self._sinks.append(sink)

    def run(self) -> None:
        """Start the logging thread."""
        self._shutdown.clear()
        self._running = True
        self._thread = threading.Thread(
            target=self._logging_run, name="OstLogThread", daemon=True
        )
        self._thread.start()
        self._own_log.log(LogLevel.INFO, "INITIALIZED, RUNNING ON LOGGING THREAD")

    def signal_shutdown(self) -> None:
        """Ask the logging thread to stop."""
        self._own_log.log(LogLevel.DEBUG, "SHUTDOWN SIGNAL RECEIVED")
        self._shutdown.set()
        self._signal.release()

    def await_shutdown(self) -> None:
        """Join the logging thread, then write out everything still queued."""
        if self._thread is None:
            raise RuntimeError("Logger is not running")
        self._own_log.log(LogLevel.INFO, "AWAITING SHUTDOWN")
        self._thread.join()
        self._thread = None
        self._own_log.log(LogLevel.INFO, "SHUTDOWN COMPLETE")
        self._flush_queue()
        self._running = False

    def log(self, msg: LogMessage) -> None:
        """Queue a message for the logging thread."""
        self._queue.push(msg)
        self._signal.release()

    def _deliver(self, msg: LogMessage) -> None:
        for sink in self._sinks:
            if sink.accepts(msg.level):
                sink.log(msg)

    def _logging_run(self) -> None:
        while not self._shutdown.is_set():
            self._signal.acquire()
            msg = self._queue.pop()
            if msg is not None:
                self._deliver(msg)

    def _flush_queue(self) -> None:
        while (msg := self._queue.pop()) is not None:
            self._deliver(msg)
        for sink in self._sinks:
            sink.flush()

    def __enter__(self) -> Logger:
        self.run()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._running:
            self.signal_shutdown()
            self.await_shutdown()


_global_logger = Logger()


def get_logger() -> Logger:
    """The process-wide logger."""
    return _global_logger


def register_log_sink(sink: LogSink) -> None:
    """Register a sink with the process-wide logger."""
    _global_logger.register_sink(sink)


def run_logger() -> None:
    """Start the process-wide logger's thread."""
    _global_logger.run()


def post_shutdown_signal() -> None:
    """Ask the process-wide logger's thread to stop."""
    _global_logger.signal_shutdown()


def await_shutdown() -> None:
    """Join the process-wide logger's thread; call after post_shutdown_signal()."""
    _global_logger.await_shutdown()