"""Display management for CLI interface."""

from cachewarm.ui.cli.display.progress import ProgressDisplay, RichProgressReporter
from cachewarm.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay", "RichProgressReporter"]
