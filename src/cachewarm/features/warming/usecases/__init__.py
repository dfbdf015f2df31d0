"""
Summary: Use cases of the warming feature: classify, count, read, and walk.
Why: Offer one import surface for the traversal engine's building blocks.
"""

from .counters import CounterSet
from .directory_walker import DirectoryWalker
from .file_reader import FileReader
from .link_classifier import is_link, is_link_stat, lstat_entry
from .ports import NullProgressReporter, ProgressReporterPort

__all__ = [
    "CounterSet",
    "DirectoryWalker",
    "FileReader",
    "NullProgressReporter",
    "ProgressReporterPort",
    "is_link",
    "is_link_stat",
    "lstat_entry",
]
