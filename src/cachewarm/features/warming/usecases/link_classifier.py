"""
Summary: Classify filesystem entries as links, junctions, or reparse points.
Why: Linked entries are never followed, so loops and duplicate reads cannot occur.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from ..domain.models import UnreadableEntryError

_REPARSE_POINT: int = stat.FILE_ATTRIBUTE_REPARSE_POINT


def lstat_entry(path: str | os.PathLike[str] | os.DirEntry[str]) -> os.stat_result:
    """Read an entry's own metadata without following links.

    Args:
        path: A filesystem path, or an ``os.DirEntry`` yielded by ``os.scandir``.

    Raises:
        UnreadableEntryError: If the metadata cannot be read.
    """

    try:
        if isinstance(path, os.DirEntry):
            return path.stat(follow_symlinks=False)
        return os.lstat(path)
    except OSError as exc:
        raw = path.path if isinstance(path, os.DirEntry) else os.fspath(path)
        raise UnreadableEntryError(Path(raw), exc) from exc


def is_link_stat(entry_stat: os.stat_result) -> bool:
    """Return True when an ``lstat`` result describes a link-style indirection.

    Symlinks are detected on every platform. On Windows, junctions and other
    reparse points are detected through ``st_file_attributes``.
    """

    if stat.S_ISLNK(entry_stat.st_mode):
        return True
    attributes = getattr(entry_stat, "st_file_attributes", 0)
    return bool(attributes & _REPARSE_POINT)


def is_link(path: str | os.PathLike[str] | os.DirEntry[str]) -> bool:
    """Return True if ``path`` is a symbolic link, junction, or reparse point.

    The link itself is inspected; its target is never resolved.

    Raises:
        UnreadableEntryError: If the entry's metadata cannot be read.
    """

    return is_link_stat(lstat_entry(path))


__all__ = ["is_link", "is_link_stat", "lstat_entry"]
