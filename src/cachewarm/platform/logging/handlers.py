"""Rich console handler for structured warm-up events.

Where: platform/logging/handlers.py
What: Render ``warming.*`` log records with icons, colours, and compact paths.
Why: Keep per-item traversal notices readable next to the progress bar.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WarmupRichHandler(RichHandler):
    """Custom Rich handler that displays traversal events and paths compactly."""

    _WARMING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "warming.run.start": ("🚀", "cyan"),
        "warming.run.complete": ("✅", "green"),
        "warming.discovery.complete": ("🔎", "cyan"),
        "warming.root.skipped": ("↪️", "yellow"),
        "warming.directory.error": ("❌", "red"),
        "warming.entry.unreadable": ("⚠️", "yellow"),
        "warming.file.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "warming.run.start": "Warm-up start",
        "warming.run.complete": "Warm-up complete",
        "warming.discovery.complete": "Discovery complete",
        "warming.root.skipped": "Root skipped",
        "warming.directory.error": "Directory error",
        "warming.entry.unreadable": "Unreadable entry",
        "warming.file.error": "Read failed",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_warming_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured warm-up events with dedicated styling."""

        event = getattr(record, "warming_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._WARMING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        details: list[str] = []
        error_kind = getattr(record, "error_kind", None)
        if error_kind:
            details.append(str(error_kind))
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        total_files = getattr(record, "total_files", None)
        if isinstance(total_files, int):
            details.append(f"files={total_files:,}")
        total_mib = getattr(record, "total_mib", None)
        if isinstance(total_mib, (int, float)):
            details.append(f"{total_mib:,.2f} MiB")
        mode = getattr(record, "dispatch_mode", None)
        if mode:
            details.append(f"mode={mode}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            details.append(f"duration={duration:.2f}s")
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        target = getattr(record, "source_path", None) or getattr(record, "directory", None)
        if target:
            _ = body.append(" @ ")
            _ = body.append_text(
                self._format_path(str(target), base=getattr(record, "source_base_path", None))
            )

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for warm-up events."""

        warming_text = self._render_warming_message(record)
        if warming_text is not None:
            return warming_text

        return super().render_message(record, message)
