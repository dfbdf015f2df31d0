"""Utilities for rendering the end-of-run report."""

from __future__ import annotations

from typing import Final

from cachewarm.features.warming import TraversalResult

RULE: Final[str] = "-" * 49


def format_report(result: TraversalResult) -> list[str]:
    """Build the fixed report lines for a finished run.

    Counts are thousands-grouped; bytes are shown in MiB and elapsed time in
    seconds, both with two decimals.

    Args:
        result: Counters and elapsed time of the run.

    Returns:
        list[str]: Plain lines in display order.
    """
    counters = result.counters
    return [
        RULE,
        "  Warm-up complete.",
        f"   Directories Scanned: {counters.directories_scanned:,}",
        f"   Files Processed:     {counters.files_processed:,}",
        f"   Total Bytes Read:    {counters.bytes_read_mib:,.2f} MiB",
        f"   Access Errors:       {counters.access_errors:,}",
        f"   Elapsed Time:        {result.elapsed_seconds:,.2f} seconds",
    ]


__all__ = ["RULE", "format_report"]
