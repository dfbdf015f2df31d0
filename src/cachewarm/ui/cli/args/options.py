"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from cachewarm.features.warming import DispatchMode


@final
@dataclass(slots=True)
class WarmArgs:
    """Command line arguments for a warm-up run."""

    root: Path
    mode: DispatchMode
    workers: int
    chunk_size: int
    show_progress: bool
    verbose: bool
    quiet: bool


__all__ = ["WarmArgs"]
