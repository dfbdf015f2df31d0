"""src/cachewarm/features/warming/domain/models.py
Where: Warming feature domain layer.
What: Value objects, enums, and errors shared by the traversal engine.
Why: Keep the walker and reader lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

BYTES_PER_MIB: Final[int] = 1024 * 1024


class DispatchMode(StrEnum):
    """How the walker hands discovered files to the reader."""

    IMMEDIATE = "immediate"
    STAGED = "staged"

    @staticmethod
    def from_user_input(value: str) -> "DispatchMode":
        """Translate raw CLI or config input into the matching mode."""

        normalized = value.strip().lower()
        for mode in DispatchMode:
            if mode.value == normalized:
                return mode
        valid: Final[str] = ", ".join(m.value for m in DispatchMode)
        msg = f"Unsupported dispatch mode '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class AccessErrorKind(StrEnum):
    """Classification of a per-item failure counted as an access error."""

    ACCESS_DENIED = "access_denied"
    IO_FAILURE = "io_failure"
    UNREADABLE = "unreadable"

    @staticmethod
    def from_os_error(error: OSError) -> "AccessErrorKind":
        """Map an ``OSError`` raised by open/read/scandir onto the taxonomy."""

        if isinstance(error, UnreadableEntryError):
            return AccessErrorKind.UNREADABLE
        if isinstance(error, PermissionError):
            return AccessErrorKind.ACCESS_DENIED
        return AccessErrorKind.IO_FAILURE


class WarmingEvent(StrEnum):
    """Structured event identifiers for traversal logs."""

    RUN_START = "warming.run.start"
    RUN_COMPLETE = "warming.run.complete"
    DISCOVERY_COMPLETE = "warming.discovery.complete"
    ROOT_SKIPPED = "warming.root.skipped"
    DIRECTORY_ERROR = "warming.directory.error"
    ENTRY_UNREADABLE = "warming.entry.unreadable"
    FILE_ERROR = "warming.file.error"


class UnreadableEntryError(OSError):
    """Raised when an entry's metadata cannot be read to classify it."""

    def __init__(self, path: str | Path, cause: OSError | None = None) -> None:
        reason = cause.strerror if cause is not None and cause.strerror else str(cause or "")
        message = f"Cannot read metadata for {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path: Path = Path(path)
        self.cause: OSError | None = cause


class RootPathError(ValueError):
    """Raised when the traversal root is missing or not a directory."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"{reason}: {root}")
        self.root: Path = root
        self.reason: str = reason


@dataclass(slots=True, frozen=True)
class FileEntry:
    """A regular file discovered during traversal.

    ``size`` is informational only and is never re-validated before reading.
    """

    path: Path
    size: int = 0
    is_link: bool = False


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """A directory discovered during traversal."""

    path: Path
    is_link: bool = False


@dataclass(slots=True, frozen=True)
class CounterSnapshot:
    """Point-in-time copy of the four run counters."""

    directories_scanned: int = 0
    files_processed: int = 0
    bytes_read: int = 0
    access_errors: int = 0

    @property
    def bytes_read_mib(self) -> float:
        """Bytes read expressed in MiB."""

        return self.bytes_read / BYTES_PER_MIB


@dataclass(slots=True, frozen=True)
class ReadOutcome:
    """Result of reading one file to end-of-stream."""

    path: Path
    success: bool
    bytes_read: int = 0
    error_kind: AccessErrorKind | None = None
    error_message: str | None = None


@dataclass(slots=True, frozen=True)
class DiscoveryResult:
    """Files collected by a staged discovery pass."""

    entries: tuple[FileEntry, ...]
    total_bytes: int

    @property
    def total_files(self) -> int:
        return len(self.entries)

    @property
    def total_mib(self) -> float:
        return self.total_bytes / BYTES_PER_MIB


@dataclass(slots=True, frozen=True)
class TraversalResult:
    """Final counters and elapsed wall-clock time of one run."""

    root: Path
    counters: CounterSnapshot
    elapsed_seconds: float
    dispatch_mode: DispatchMode = DispatchMode.IMMEDIATE
    discovered_files: int | None = None
    discovered_bytes: int | None = None


__all__ = [
    "BYTES_PER_MIB",
    "AccessErrorKind",
    "CounterSnapshot",
    "DirectoryEntry",
    "DiscoveryResult",
    "DispatchMode",
    "FileEntry",
    "ReadOutcome",
    "RootPathError",
    "TraversalResult",
    "UnreadableEntryError",
    "WarmingEvent",
]
