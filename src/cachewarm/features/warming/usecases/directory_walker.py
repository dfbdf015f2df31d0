"""src/cachewarm/features/warming/usecases/directory_walker.py
What: Depth-first traversal that dispatches every regular file to the reader.
Why: Own all recursion and per-directory error handling in one place so a
failure in one subtree never aborts the rest of the run.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import contextmanager
from pathlib import Path
from typing import Final

from ..domain.models import (
    BYTES_PER_MIB,
    AccessErrorKind,
    DirectoryEntry,
    DiscoveryResult,
    DispatchMode,
    FileEntry,
    ReadOutcome,
    UnreadableEntryError,
    WarmingEvent,
)
from .counters import CounterSet
from .file_reader import FileReader
from .link_classifier import is_link_stat, lstat_entry
from .ports import NullProgressReporter, ProgressReporterPort

LOGGER = logging.getLogger(__name__)

# In-flight reads allowed per worker before the walker blocks on submission.
_PENDING_READS_PER_WORKER: Final[int] = 4

FileSink = Callable[[FileEntry], None]


class DirectoryWalker:
    """Walk a directory tree, skipping links and reading every regular file."""

    def __init__(
        self,
        counters: CounterSet,
        reader: FileReader,
        *,
        mode: DispatchMode = DispatchMode.IMMEDIATE,
        workers: int = 1,
        reporter: ProgressReporterPort | None = None,
    ) -> None:
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}")
        self.counters: CounterSet = counters
        self.reader: FileReader = reader
        self.mode: DispatchMode = mode
        self.workers: int = workers
        self.reporter: ProgressReporterPort = reporter or NullProgressReporter()
        self._base_path: Path | None = None

    def walk(self, root: str | os.PathLike[str]) -> DiscoveryResult | None:
        """Traverse ``root`` once using the configured dispatch mode.

        Returns:
            The discovery result in staged mode, ``None`` in immediate mode.
        """
        root_path = Path(root)
        if self.mode is DispatchMode.STAGED:
            discovery = self.discover(root_path)
            self.process(discovery.entries, total_mib=discovery.total_mib)
            return discovery

        self._base_path = root_path
        self.reporter.start(None)
        with self._dispatcher() as dispatch:
            self._traverse(root_path, dispatch)
        return None

    def discover(self, root: str | os.PathLike[str]) -> DiscoveryResult:
        """Collect every readable regular file under ``root`` without reading it."""

        root_path = Path(root)
        self._base_path = root_path
        entries: list[FileEntry] = []
        self._traverse(root_path, entries.append)
        discovery = DiscoveryResult(
            entries=tuple(entries),
            total_bytes=sum(entry.size for entry in entries),
        )
        LOGGER.info(
            "Discovery complete [files=%d, bytes=%d, path=%s]",
            discovery.total_files,
            discovery.total_bytes,
            root_path,
            extra={
                "warming_event": WarmingEvent.DISCOVERY_COMPLETE.value,
                "total_files": discovery.total_files,
                "total_mib": discovery.total_mib,
            },
        )
        return discovery

    def process(self, entries: Iterable[FileEntry], *, total_mib: float | None = None) -> None:
        """Read each previously discovered file.

        Entries are not re-validated; a file that vanished since discovery is
        counted as an access error by the reader.
        """
        self.reporter.start(total_mib)
        with self._dispatcher() as dispatch:
            for entry in entries:
                dispatch(entry)

    def _traverse(self, root: Path, on_file: FileSink) -> None:
        # Explicit stack, so depth is bounded by memory rather than the recursion limit.
        stack: list[DirectoryEntry] = [DirectoryEntry(path=root)]
        while stack:
            directory = stack.pop()
            if not self._can_descend(directory.path, is_root=directory.path == root):
                continue
            subdirectories = self._scan_directory(directory.path, on_file)
            stack.extend(reversed(subdirectories))

    def _can_descend(self, directory: Path, *, is_root: bool) -> bool:
        try:
            linked = is_link_stat(lstat_entry(directory))
        except UnreadableEntryError as exc:
            self.counters.increment_access_errors()
            self._log_failure(
                WarmingEvent.ROOT_SKIPPED if is_root else WarmingEvent.DIRECTORY_ERROR,
                directory,
                AccessErrorKind.UNREADABLE,
                str(exc),
                path_key="directory",
            )
            return False

        if linked:
            self.counters.increment_access_errors()
            self._log_failure(
                WarmingEvent.ROOT_SKIPPED if is_root else WarmingEvent.DIRECTORY_ERROR,
                directory,
                None,
                "link, junction, or reparse point",
                path_key="directory",
            )
            return False
        return True

    def _scan_directory(self, directory: Path, on_file: FileSink) -> list[DirectoryEntry]:
        """Enumerate one directory, dispatching files and returning subdirectories."""

        subdirectories: list[DirectoryEntry] = []
        try:
            iterator = os.scandir(directory)
        except OSError as exc:
            self._record_directory_error(directory, exc)
            return subdirectories

        self.counters.increment_directories_scanned()
        with iterator:
            try:
                for entry in iterator:
                    self._classify_entry(entry, on_file, subdirectories)
            except OSError as exc:
                self._record_directory_error(directory, exc)
        return subdirectories

    def _classify_entry(
        self,
        entry: os.DirEntry[str],
        on_file: FileSink,
        subdirectories: list[DirectoryEntry],
    ) -> None:
        try:
            entry_stat = lstat_entry(entry)
        except UnreadableEntryError as exc:
            self.counters.increment_access_errors()
            self._log_failure(
                WarmingEvent.ENTRY_UNREADABLE,
                Path(entry.path),
                AccessErrorKind.UNREADABLE,
                str(exc),
            )
            return

        if is_link_stat(entry_stat):
            return
        if stat.S_ISDIR(entry_stat.st_mode):
            subdirectories.append(DirectoryEntry(path=Path(entry.path)))
        elif stat.S_ISREG(entry_stat.st_mode):
            on_file(FileEntry(path=Path(entry.path), size=entry_stat.st_size))
        # FIFOs, sockets, and device nodes are never opened.

    @contextmanager
    def _dispatcher(self) -> Iterator[FileSink]:
        """Yield the callable that hands a file to the reader.

        With one worker files are read inline. Otherwise reads run on a
        bounded thread pool and unexpected worker exceptions are re-raised
        once the pool has drained.
        """
        if self.workers <= 1:
            yield self._read_entry
            return

        slots = threading.BoundedSemaphore(self.workers * _PENDING_READS_PER_WORKER)
        failures: list[BaseException] = []

        def _on_done(future: Future[None]) -> None:
            slots.release()
            error = future.exception()
            if error is not None:
                failures.append(error)

        with ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix="cachewarm-reader"
        ) as executor:

            def _submit(entry: FileEntry) -> None:
                _ = slots.acquire()
                future = executor.submit(self._read_entry, entry)
                future.add_done_callback(_on_done)

            yield _submit

        if failures:
            raise failures[0]

    def _read_entry(self, entry: FileEntry) -> None:
        outcome = self.reader.read_file(entry.path)
        self._handle_outcome(outcome)

    def _handle_outcome(self, outcome: ReadOutcome) -> None:
        if outcome.success:
            self.reporter.tick(self.counters.bytes_read / BYTES_PER_MIB, outcome.path.name)
            return

        message = outcome.error_message or "read failed"
        self._log_failure(WarmingEvent.FILE_ERROR, outcome.path, outcome.error_kind, message)
        label = "ACCESS ERROR" if outcome.error_kind is AccessErrorKind.ACCESS_DENIED else "IO ERROR"
        self.reporter.message(f"[{label}] Could not read file '{outcome.path}': {message}")

    def _record_directory_error(self, directory: Path, error: OSError) -> None:
        self.counters.increment_access_errors()
        self._log_failure(
            WarmingEvent.DIRECTORY_ERROR,
            directory,
            AccessErrorKind.from_os_error(error),
            error.strerror or str(error) or type(error).__name__,
            path_key="directory",
        )

    def _log_failure(
        self,
        event: WarmingEvent,
        path: Path,
        kind: AccessErrorKind | None,
        message: str,
        *,
        path_key: str = "source_path",
    ) -> None:
        # Access denials stay at DEBUG.
        level = logging.DEBUG if kind is AccessErrorKind.ACCESS_DENIED else logging.WARNING
        if not LOGGER.isEnabledFor(level):
            return
        LOGGER.log(
            level,
            "%s [kind=%s, path=%s, error=%s]",
            event.value,
            kind.value if kind is not None else "link",
            path,
            message,
            extra={
                "warming_event": event.value,
                path_key: str(path),
                "source_base_path": str(self._base_path) if self._base_path else None,
                "error_kind": kind.value if kind is not None else None,
                "error_message": message,
            },
        )


__all__ = ["DirectoryWalker"]
