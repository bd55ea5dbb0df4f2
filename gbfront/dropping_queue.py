"""Bounded thread-safe queue that discards its oldest item when full."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueClosed(Exception):
    """Raised when pushing to, or waiting on, a closed and drained queue."""


class DroppingQueue(Generic[T]):
    """A FIFO of at most ``max_depth`` items; overflow drops the oldest."""

    def __init__(self, max_depth: int) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._max_depth = max_depth
        self._items: deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._dropped = 0

    def push(self, item: T) -> None:
        """Append an item, dropping the oldest one if the queue is full."""
        with self._cond:
            if self._closed:
                raise QueueClosed("queue is closed")
            if len(self._items) >= self._max_depth:
                self._items.popleft()
                self._dropped += 1
            self._items.append(item)
            self._cond.notify()

    def wait_pop(self) -> T:
        """Block until an item is available and return the oldest one.

        Items left in a closed queue are still returned; once it is empty,
        QueueClosed is raised.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._closed or bool(self._items))
            if not self._items:
                raise QueueClosed("queue is closed")
            return self._items.popleft()

    def try_pop_latest(self) -> T | None:
        """Return the newest item and discard the rest, or None if empty."""
        with self._cond:
            if not self._items:
                return None
            latest = self._items[-1]
            self._items.clear()
            return latest

    def close(self) -> None:
        """Refuse further pushes and wake every waiting consumer."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def dropped_count(self) -> int:
        """Number of items discarded because the queue was full."""
        with self._cond:
            return self._dropped

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)