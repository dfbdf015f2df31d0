# Where: cachewarm.features.warming.__init__
# What: Expose the traversal engine and its shared dataclasses.
# Why: Provide a cohesive import surface for UI and application layers.

from .domain import (
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
from .usecases import (
    CounterSet,
    DirectoryWalker,
    FileReader,
    NullProgressReporter,
    ProgressReporterPort,
    is_link,
)

__all__ = [
    "AccessErrorKind",
    "CounterSet",
    "CounterSnapshot",
    "DirectoryEntry",
    "DirectoryWalker",
    "DiscoveryResult",
    "DispatchMode",
    "FileEntry",
    "FileReader",
    "NullProgressReporter",
    "ProgressReporterPort",
    "ReadOutcome",
    "RootPathError",
    "TraversalResult",
    "UnreadableEntryError",
    "WarmingEvent",
    "is_link",
]
