"""Progress display functionality for CLI."""

import threading
import time
from typing import Any, Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from cachewarm.application.services.warm_service import WarmRequest
from cachewarm.config.settings import PROGRESS_REFRESH_SECONDS
from cachewarm.features.warming import ProgressReporterPort, TraversalResult
from cachewarm.platform.logging import WarmupRichHandler, logger

_DESCRIPTION = "[yellow]Warming up files..."


@runtime_checkable
class WarmServiceLike(Protocol):
    """Protocol for application services that can run a warm-up with progress."""

    def warm(
        self,
        request: WarmRequest,
        reporter: ProgressReporterPort | None = None,
    ) -> TraversalResult:
        ...


@final
class RichProgressReporter:
    """Forward walker notifications to a Rich progress task without blocking.

    Ticks arriving while another thread holds the lock, or sooner than
    ``min_interval`` after the last refresh, are dropped; the next accepted
    tick carries the cumulative total so nothing is lost from the display.
    """

    def __init__(
        self,
        progress: Progress,
        *,
        min_interval: float = PROGRESS_REFRESH_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._progress: Progress = progress
        self._min_interval: float = min_interval
        self._clock: Callable[[], float] = clock
        self._lock: threading.Lock = threading.Lock()
        self._task_id: TaskID | None = None
        self._last_refresh: float = float("-inf")

    @property
    def task_id(self) -> TaskID | None:
        return self._task_id

    def start(self, total_mib: float | None) -> None:
        with self._lock:
            if self._task_id is None:
                self._task_id = self._progress.add_task(_DESCRIPTION, total=total_mib, status="")
            else:
                self._progress.update(self._task_id, total=total_mib)

    def tick(self, cumulative_mib: float, label: str) -> None:
        if not self._lock.acquire(blocking=False):
            return
        try:
            if self._task_id is None:
                return
            now = self._clock()
            if now - self._last_refresh < self._min_interval:
                return
            self._last_refresh = now
            self._progress.update(
                self._task_id,
                completed=cumulative_mib,
                description=f"[yellow]Continued reading... [dim]{escape(label)}",
            )
        finally:
            self._lock.release()

    def message(self, text: str) -> None:
        if not self._lock.acquire(blocking=False):
            return
        try:
            if self._task_id is not None:
                self._progress.update(self._task_id, status=f"[red]{escape(text)}")
        finally:
            self._lock.release()


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: WarmServiceLike,
        request: WarmRequest,
        *,
        enabled: bool = True,
    ) -> TraversalResult:
        """Run a warm-up via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate the run.
            request: Warm-up parameters.
            enabled: Whether to render progress at all.

        Returns:
            TraversalResult: Final counters and elapsed time.
        """
        if not enabled:
            return app.warm(request)

        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, WarmupRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            TextColumn("{task.completed:,.2f} MiB"),
            TimeElapsedColumn(),
            TextColumn("{task.fields[status]}"),
            **progress_kwargs,
        ) as progress:
            reporter = RichProgressReporter(progress)
            return app.warm(request, reporter)
