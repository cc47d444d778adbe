"""Fixed-size circular buffer of log messages."""

from __future__ import annotations

import threading
from typing import Optional

from ostengine.levels import LogMessage


class QueueOverflowError(RuntimeError):
    """Raised when a push would overwrite messages not yet popped."""


class MessageQueue:
    """Ring buffer written by any thread and read by a single consumer.

    One slot is always kept free, so ``size`` slots hold at most
    ``size - 1`` messages.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("MessageQueue size must be at least 1")
        self._size = size
        self._buffer: list[Optional[LogMessage]] = [None] * size
        self._head = 0
        self._tail = 0
        self._push_lock = threading.Lock()

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return (self._tail - self._head) % self._size

    def push(self, msg: LogMessage) -> None:
        """Append a message; raise QueueOverflowError when the buffer is full."""
        with self._push_lock:
            tail = self._tail
            new_tail = (tail + 1) % self._size
            if new_tail == self._head:
                raise QueueOverflowError(
                    "MessageQueue: Tail outpaced head. "
                    "Increase buffer size or quicken message processing"
                )
            self._buffer[tail] = msg
            self._tail = new_tail

    def pop(self) -> Optional[LogMessage]:
        """Remove and return the oldest message, or None if the queue is empty."""
        head = self._head
        if head == self._tail:
            return None
        msg = self._buffer[head]
        self._buffer[head] = None
        self._head = (head + 1) % self._size
        return msg