"""
Synchronisation primitives for in‑memory repositories.

The standard library offers no shared/exclusive lock, so
``ReadWriteLock`` builds one on ``threading.Condition``.  Waiting
writers block new readers, so a steady stream of ``get``/``list``
calls cannot starve ``create``/``update``/``delete``.  Neither lock is
re‑entrant.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Many concurrent readers or a single writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class AtomicCounter:
    """A monotonically increasing integer with its own mutex.

    The mutex is held only for the increment itself, so callers are
    never serialised behind a ``ReadWriteLock``.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._mutex = threading.Lock()

    def increment(self) -> int:
        """Advance the counter by one and return the new value."""
        with self._mutex:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        """The most recently issued value."""
        with self._mutex:
            return self._value
