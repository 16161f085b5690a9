"""Reader/writer lock for in-process indexes

Any number of readers may hold the lock at the same time, while a writer
holds it exclusively. Waiting writers block new readers, so a steady stream
of lookups can't starve inserts.

Classes:
    ReadWriteLock:
        Writer-preferring reader/writer lock built on threading.Condition.

Example:
    >>> lock = ReadWriteLock()
    >>> with lock.read():
    ...     value = index.get('abc123')
    >>> with lock.write():
    ...     index['abc123'] = 'https://example.com'
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """Writer-preferring reader/writer lock (not reentrant)."""

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer or self._waiting_writers:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers <= 0:
                raise RuntimeError('Cannot release a read lock that is not held.')
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer:
                raise RuntimeError('Cannot release a write lock that is not held.')
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the shared (read) side of the lock for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the exclusive (write) side of the lock for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
