"""
Summary: Thread-safe aggregate of traversal statistics for one warm-up run.
Why: Walker and reader threads share the counters and must never lose an update.
"""

from __future__ import annotations

import threading
from typing import Final, final

from ..domain.models import CounterSnapshot


@final
class CounterSet:
    """Four monotonically non-decreasing counters guarded by a single lock."""

    def __init__(self) -> None:
        self._lock: Final[threading.Lock] = threading.Lock()
        self._directories_scanned: int = 0
        self._files_processed: int = 0
        self._bytes_read: int = 0
        self._access_errors: int = 0

    def increment_directories_scanned(self) -> None:
        with self._lock:
            self._directories_scanned += 1

    def increment_files_processed(self) -> None:
        with self._lock:
            self._files_processed += 1

    def add_bytes_read(self, count: int) -> None:
        """Account ``count`` freshly read bytes.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"Byte count must be non-negative, got {count}")
        with self._lock:
            self._bytes_read += count

    def increment_access_errors(self) -> None:
        with self._lock:
            self._access_errors += 1

    @property
    def bytes_read(self) -> int:
        """Current byte total, usable for progress while the run is in flight."""

        with self._lock:
            return self._bytes_read

    def snapshot(self) -> CounterSnapshot:
        """Copy all four counters.

        Only meaningful once no further mutators are in flight.
        """
        with self._lock:
            return CounterSnapshot(
                directories_scanned=self._directories_scanned,
                files_processed=self._files_processed,
                bytes_read=self._bytes_read,
                access_errors=self._access_errors,
            )


__all__ = ["CounterSet"]
