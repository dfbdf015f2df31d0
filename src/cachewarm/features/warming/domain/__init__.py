"""Domain types for the warming feature."""

from .models import (
    BYTES_PER_MIB,
    AccessErrorKind,
    CounterSnapshot,
    DirectoryEntry,
    DiscoveryResult,
    DispatchMode,
    FileEntry,
    ReadOutcome,
    RootPathError,
    TraversalResult,
    UnreadableEntryError,
    WarmingEvent,
)

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
