"""A thread-safe FIFO queue whose consumers can block until items arrive."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterable, TypeVar

T = TypeVar("T")


class BlockingQueue(Generic[T]):
    """A FIFO queue guarded by a lock and a condition.

    With ``maxsize`` set, adding to a full queue drops the oldest item.
    Timeouts are given in seconds; ``None`` waits without limit.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._items: Deque[T] = deque(maxlen=maxsize)
        self._condition = threading.Condition()

    @property
    def maxsize(self) -> int | None:
        """The capacity of the queue, or None if it is unbounded."""
        return self._items.maxlen

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the end and wake up waiting consumers."""
        with self._condition:
            self._items.append(item)
            self._condition.notify_all()

    def enqueue_all(self, items: Iterable[T]) -> None:
        """Add all ``items`` in order and wake up waiting consumers once."""
        with self._condition:
            self._items.extend(items)
            self._condition.notify_all()

    def wait_until_empty(self, timeout: float | None = None) -> bool:
        """Wait until the queue is empty; return whether it is."""
        with self._condition:
            return self._condition.wait_for(lambda: not self._items, timeout)

    def wait_until_not_empty(self, timeout: float | None = None) -> bool:
        """Wait until the queue holds an item; return whether it does."""
        with self._condition:
            return self._condition.wait_for(lambda: bool(self._items), timeout)

    def dequeue(self, timeout: float | None = None, default: T | None = None) -> T | None:
        """Remove and return the first item, waiting for one if needed.

        If no item arrives within ``timeout``, ``default`` is returned.
        """
        with self._condition:
            if not self._condition.wait_for(lambda: bool(self._items), timeout):
                return default
            item = self._items.popleft()
            self._condition.notify_all()
            return item

    def dequeue_back(
        self, timeout: float | None = None, default: T | None = None
    ) -> T | None:
        """Return the last item and clear the queue, waiting for an item if needed.

        If no item arrives within ``timeout``, ``default`` is returned.
        """
        with self._condition:
            if not self._condition.wait_for(lambda: bool(self._items), timeout):
                return default
            item = self._items[-1]
            self._items.clear()
            self._condition.notify_all()
            return item

    def try_dequeue(self) -> tuple[bool, T | None]:
        """Remove the first item without waiting.

        Return ``(True, item)``, or ``(False, None)`` if the queue is empty.
        """
        with self._condition:
            if not self._items:
                return False, None
            item = self._items.popleft()
            self._condition.notify_all()
            return True, item

    def is_empty(self) -> bool:
        """Return True if the queue holds no item."""
        with self._condition:
            return not self._items

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)

    def clear(self) -> None:
        """Remove all items and wake up waiters."""
        with self._condition:
            self._items.clear()
            self._condition.notify_all()

    def stop_waiters(self) -> None:
        """Wake up all waiters so they check their condition again."""
        with self._condition:
            self._condition.notify_all()