"""Application service for warming the filesystem cache.

This layer centralizes construction of the counters, reader, and walker for
one run so that UIs only deal with requests and results.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from cachewarm.config.settings import (
    DEFAULT_DISPATCH_MODE,
    DEFAULT_WORKERS,
    READ_CHUNK_SIZE,
)
from cachewarm.features.warming import (
    CounterSet,
    DirectoryWalker,
    DispatchMode,
    FileReader,
    ProgressReporterPort,
    RootPathError,
    TraversalResult,
    WarmingEvent,
)
from cachewarm.platform.logging import logger


@dataclass(frozen=True)
class WarmRequest:
    """Input parameters for a warm-up run.

    Attributes:
        root: Directory whose tree is read.
        mode: Immediate or staged dispatch.
        workers: Number of concurrent readers; 1 reads inline.
        chunk_size: Read buffer size in bytes.
    """

    root: Path
    mode: DispatchMode = DispatchMode(DEFAULT_DISPATCH_MODE)
    workers: int = DEFAULT_WORKERS
    chunk_size: int = READ_CHUNK_SIZE


@final
class WarmCacheService:
    """Application service that runs one traversal and times it."""

    def __init__(
        self,
        *,
        counters_factory: Callable[[], CounterSet] | None = None,
        reader_factory: Callable[..., FileReader] | None = None,
        walker_factory: Callable[..., DirectoryWalker] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject light-weight doubles while production code relies on
        the default implementations.
        """

        self._counters_factory: Callable[[], CounterSet] = counters_factory or CounterSet
        self._reader_factory: Callable[..., FileReader] = reader_factory or FileReader
        self._walker_factory: Callable[..., DirectoryWalker] = walker_factory or DirectoryWalker
        self._clock: Callable[[], float] = clock or time.perf_counter

    @staticmethod
    def validate_root(root: Path) -> Path:
        """Return the absolute root or raise ``RootPathError``."""

        if not root.exists():
            raise RootPathError(root, "Root directory does not exist")
        if not root.is_dir():
            raise RootPathError(root, "Root path is not a directory")
        return root.absolute()

    def warm(
        self,
        request: WarmRequest,
        reporter: ProgressReporterPort | None = None,
    ) -> TraversalResult:
        """Read every regular file under ``request.root`` and report totals.

        Per-item failures never propagate; they are reflected in the
        ``access_errors`` counter of the result.

        Args:
            request: Warm-up parameters.
            reporter: Optional progress collaborator.

        Returns:
            TraversalResult: Counter snapshot plus elapsed seconds.

        Raises:
            RootPathError: If the root is missing or not a directory.
        """
        root = self.validate_root(request.root)

        counters = self._counters_factory()
        reader = self._reader_factory(counters, chunk_size=request.chunk_size)
        walker = self._walker_factory(
            counters,
            reader,
            mode=request.mode,
            workers=request.workers,
            reporter=reporter,
        )

        logger.debug(
            "Warm-up started [path=%s, mode=%s, workers=%d, chunk=%d]",
            root,
            request.mode.value,
            request.workers,
            request.chunk_size,
            extra={
                "warming_event": WarmingEvent.RUN_START.value,
                "directory": str(root),
                "dispatch_mode": request.mode.value,
            },
        )

        started = self._clock()
        discovery = walker.walk(root)
        elapsed = self._clock() - started

        snapshot = counters.snapshot()
        logger.debug(
            "Warm-up complete [dirs=%d, files=%d, bytes=%d, errors=%d, duration=%.2fs]",
            snapshot.directories_scanned,
            snapshot.files_processed,
            snapshot.bytes_read,
            snapshot.access_errors,
            elapsed,
            extra={
                "warming_event": WarmingEvent.RUN_COMPLETE.value,
                "total_files": snapshot.files_processed,
                "duration_seconds": elapsed,
            },
        )

        return TraversalResult(
            root=root,
            counters=snapshot,
            elapsed_seconds=elapsed,
            dispatch_mode=request.mode,
            discovered_files=discovery.total_files if discovery is not None else None,
            discovered_bytes=discovery.total_bytes if discovery is not None else None,
        )


__all__ = ["WarmCacheService", "WarmRequest"]
