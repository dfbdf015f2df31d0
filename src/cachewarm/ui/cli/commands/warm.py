"""src/cachewarm/ui/cli/commands/warm.py
What: Execute a warm-up run for a directory root via the CLI.
Why: Bridge parsed arguments with the application service and displays.
"""

from cachewarm.application.services.warm_service import WarmCacheService, WarmRequest
from cachewarm.features.warming import DispatchMode, TraversalResult
from cachewarm.ui.cli.args.options import WarmArgs
from cachewarm.ui.cli.display.progress import ProgressDisplay
from cachewarm.ui.cli.display.result import ResultDisplay


class WarmCommand:
    """Command for warming one directory tree."""

    args: WarmArgs
    app: WarmCacheService
    request: WarmRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: WarmArgs) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.app = WarmCacheService()
        self.request = WarmRequest(
            root=args.root,
            mode=args.mode,
            workers=args.workers,
            chunk_size=args.chunk_size,
        )
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()

    def execute(self) -> TraversalResult:
        """Run the warm-up and print the report.

        Returns:
            TraversalResult: Final counters and elapsed time.
        """
        self.result_display.show_banner(self.args.root, quiet=self.args.quiet)
        if self.args.mode is DispatchMode.STAGED:
            self.result_display.show_discovery_start(quiet=self.args.quiet)

        result = self.progress_display.run_with_service(
            self.app,
            self.request,
            enabled=self.args.show_progress,
        )
        self.result_display.show_report(result)
        return result
