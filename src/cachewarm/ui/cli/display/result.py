"""src/cachewarm/ui/cli/display/result.py
What: Render the start banner and the final report for warm-up runs.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape

from cachewarm.features.warming import TraversalResult

from .summary import RULE, format_report


@final
class ResultDisplay:
    """Handles banner and report display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = Console()

    def show_banner(self, root: Path, *, quiet: bool = False) -> None:
        """Announce the run before traversal starts."""

        if quiet:
            return

        self.console.print("[bold]  Starting filesystem cache warm-up...[/bold]")
        self.console.print(f"   Root Directory: {escape(str(root))}")
        self.console.print("   Ignoring symbolic links and junctions.")
        self.console.print(RULE)

    def show_discovery_start(self, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print("  Discovering files...")

    def show_report(self, result: TraversalResult) -> None:
        """Display the final counters.

        The report is printed even in quiet mode because it is the only
        output of a run.
        """
        has_errors = result.counters.access_errors > 0
        for line in format_report(result):
            label = line.strip()
            if label == "Warm-up complete.":
                self.console.print(f"[green]{line}[/green]")
            elif has_errors and label.startswith("Access Errors:"):
                self.console.print(f"[red]{line}[/red]")
            else:
                self.console.print(line, highlight=False)
