"""
Summary: Stream one file to end-of-stream in fixed-size chunks and discard the bytes.
Why: Reading every byte is what asks the OS to populate its page cache.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import final

from cachewarm.config.settings import READ_CHUNK_SIZE

from ..domain.models import AccessErrorKind, ReadOutcome
from .counters import CounterSet


@final
class FileReader:
    """Read files into a reusable per-thread buffer, accounting into a ``CounterSet``."""

    def __init__(self, counters: CounterSet, *, chunk_size: int = READ_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")
        self._counters: CounterSet = counters
        self._chunk_size: int = chunk_size
        self._local: threading.local = threading.local()

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def _buffer(self) -> memoryview:
        buffer = getattr(self._local, "buffer", None)
        if buffer is None:
            buffer = memoryview(bytearray(self._chunk_size))
            self._local.buffer = buffer
        return buffer

    def read_file(self, path: str | os.PathLike[str]) -> ReadOutcome:
        """Read ``path`` fully, discarding its content.

        Bytes are added to the counters chunk by chunk, so a read that fails
        midway keeps the bytes it already accounted. Errors are counted and
        returned, never raised.

        Args:
            path: File to read.

        Returns:
            ReadOutcome: Success with the byte total, or the classified failure.
        """
        file_path = Path(path)
        buffer = self._buffer()
        total = 0
        try:
            with open(file_path, "rb", buffering=0) as stream:
                while True:
                    count = stream.readinto(buffer)
                    if not count:
                        break
                    self._counters.add_bytes_read(count)
                    total += count
        except OSError as exc:
            self._counters.increment_access_errors()
            return ReadOutcome(
                path=file_path,
                success=False,
                bytes_read=total,
                error_kind=AccessErrorKind.from_os_error(exc),
                error_message=exc.strerror or str(exc) or type(exc).__name__,
            )

        self._counters.increment_files_processed()
        return ReadOutcome(path=file_path, success=True, bytes_read=total)


__all__ = ["FileReader"]
