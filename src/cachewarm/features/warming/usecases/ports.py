"""
Summary: Ports defining warming use case collaborators.
Why: Keep the traversal engine independent of any console or progress library.
"""

from __future__ import annotations

from typing import Protocol, final, runtime_checkable


@runtime_checkable
class ProgressReporterPort(Protocol):
    """Port receiving progress notifications from the walker.

    Implementations must return quickly; when they cannot keep up they drop or
    coalesce notifications instead of slowing the scan.
    """

    def start(self, total_mib: float | None) -> None:
        """Announce the start of processing; ``total_mib`` is known in staged mode."""
        ...

    def tick(self, cumulative_mib: float, label: str) -> None:
        """Report cumulative MiB read after a file completes."""
        ...

    def message(self, text: str) -> None:
        """Surface a transient notice, such as a per-file error."""
        ...


@final
class NullProgressReporter:
    """Reporter that ignores every notification."""

    def start(self, total_mib: float | None) -> None:
        _ = total_mib

    def tick(self, cumulative_mib: float, label: str) -> None:
        _ = (cumulative_mib, label)

    def message(self, text: str) -> None:
        _ = text


__all__ = ["NullProgressReporter", "ProgressReporterPort"]
