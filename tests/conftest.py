"""Shared pytest fixtures for traversal tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from cachewarm.features.warming import CounterSet, DirectoryWalker, FileReader


def _can_symlink(base: Path) -> bool:
    probe = base / ".symlink-probe"
    try:
        os.symlink(base, probe, target_is_directory=True)
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True


@pytest.fixture
def counters() -> CounterSet:
    """Fresh counters for one run."""

    return CounterSet()


@pytest.fixture
def reader(counters: CounterSet) -> FileReader:
    """Reader with a small chunk size so multi-chunk reads are exercised."""

    return FileReader(counters, chunk_size=16)


@pytest.fixture
def walker(counters: CounterSet, reader: FileReader) -> DirectoryWalker:
    """Sequential, immediate-mode walker."""

    return DirectoryWalker(counters, reader)


@pytest.fixture
def symlinks_supported(tmp_path: Path) -> None:
    """Skip the test when the platform cannot create symlinks."""

    if not _can_symlink(tmp_path):
        pytest.skip("symlinks are not available on this platform")


@pytest.fixture
def permissions_enforced() -> None:
    """Skip the test when file mode bits are not enforced (root or Windows)."""

    if sys.platform == "win32":
        pytest.skip("POSIX permissions are not enforced on Windows")
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks are bypassed when running as root")
