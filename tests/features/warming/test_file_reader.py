"""Tests for the streaming file reader."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from cachewarm.features.warming import AccessErrorKind, CounterSet, FileReader


def test_reads_whole_file_across_chunks(tmp_path: Path) -> None:
    """Every byte is accounted even when the file spans many chunks."""

    counters = CounterSet()
    reader = FileReader(counters, chunk_size=7)
    target = tmp_path / "data.bin"
    _ = target.write_bytes(b"a" * 100)

    outcome = reader.read_file(target)

    assert outcome.success is True
    assert outcome.bytes_read == 100
    assert outcome.error_kind is None
    snapshot = counters.snapshot()
    assert snapshot.files_processed == 1
    assert snapshot.bytes_read == 100
    assert snapshot.access_errors == 0


def test_empty_file_counts_as_processed(tmp_path: Path) -> None:
    """Zero-length files still count as processed."""

    counters = CounterSet()
    target = tmp_path / "empty"
    target.touch()

    outcome = FileReader(counters).read_file(target)

    assert outcome.success is True
    assert counters.snapshot().files_processed == 1
    assert counters.snapshot().bytes_read == 0


def test_missing_file_is_an_io_failure(tmp_path: Path) -> None:
    """A file removed after discovery counts one access error."""

    counters = CounterSet()
    outcome = FileReader(counters).read_file(tmp_path / "vanished.txt")

    assert outcome.success is False
    assert outcome.error_kind is AccessErrorKind.IO_FAILURE
    assert outcome.error_message
    snapshot = counters.snapshot()
    assert snapshot.files_processed == 0
    assert snapshot.access_errors == 1


def test_unreadable_file_is_access_denied(tmp_path: Path, permissions_enforced: None) -> None:
    """Permission failures are classified as access denied."""

    _ = permissions_enforced
    counters = CounterSet()
    locked = tmp_path / "locked.txt"
    _ = locked.write_bytes(b"secret")
    locked.chmod(0)
    try:
        outcome = FileReader(counters).read_file(locked)
    finally:
        locked.chmod(0o600)

    assert outcome.error_kind is AccessErrorKind.ACCESS_DENIED
    assert counters.snapshot().access_errors == 1
    assert counters.snapshot().bytes_read == 0


class _FailingStream(io.RawIOBase):
    """Raw stream that yields one chunk and then fails."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: memoryview) -> int:  # type: ignore[override]
        self.calls += 1
        if self.calls == 1:
            buffer[:4] = b"abcd"
            return 4
        raise OSError(5, "Input/output error")


def test_mid_read_failure_keeps_partial_bytes(tmp_path: Path, mocker: MockerFixture) -> None:
    """Bytes read before an error stay counted and the stream is closed."""

    stream = _FailingStream()
    _ = mocker.patch(
        "cachewarm.features.warming.usecases.file_reader.open",
        create=True,
        return_value=stream,
    )
    counters = CounterSet()

    outcome = FileReader(counters, chunk_size=4).read_file(tmp_path / "flaky.bin")

    assert outcome.success is False
    assert outcome.bytes_read == 4
    assert outcome.error_kind is AccessErrorKind.IO_FAILURE
    assert stream.closed
    snapshot = counters.snapshot()
    assert snapshot.bytes_read == 4
    assert snapshot.files_processed == 0
    assert snapshot.access_errors == 1


def test_chunk_size_must_be_positive() -> None:
    """Zero or negative chunk sizes are rejected."""

    with pytest.raises(ValueError):
        _ = FileReader(CounterSet(), chunk_size=0)


def test_default_chunk_size_is_80_kib() -> None:
    """The default buffer matches the documented 80 KiB."""

    assert FileReader(CounterSet()).chunk_size == 81920
