"""Readers-writer lock guarding the Localizer's active language.

Lookups take the shared side; a language switch takes the exclusive side
only for the instant it publishes the new language and dictionary, so no
reader ever pairs one language's code with another language's dictionary.

Semantics:
    - Any number of concurrent readers, or one writer
    - Waiting writers block new readers (no writer starvation)
    - Read lock is reentrant per thread
    - Upgrades (read -> write), downgrades (write -> read) and nested write
      acquisition raise RuntimeError instead of deadlocking

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared with other readers
        >>> with lock.write():
        ...     pass  # exclusive
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # thread id -> reentrant acquisition count
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the lock in shared mode for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds the write lock.
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the lock in exclusive mode for the duration of the block.

        Raises:
            RuntimeError: If the calling thread already holds the lock in
                either mode.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            while self._writer is not None or self._waiting_writers:
                self._condition.wait()
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            count = self._readers.get(me)
            if count is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if count > 1:
                self._readers[me] = count - 1
                return
            del self._readers[me]
            if not self._readers:
                self._condition.notify_all()

    def _acquire_write(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                while self._writer is not None or self._readers:
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = me

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()
