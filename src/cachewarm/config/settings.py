"""Where: src/cachewarm/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from cachewarm.config.config import (
    DISPATCH_MODE_DEFAULT,
    PROGRESS_REFRESH_SECONDS_DEFAULT,
    READ_CHUNK_SIZE_DEFAULT,
    WORKERS_DEFAULT,
    config as app_config,
)

_VALID_DISPATCH_MODES: tuple[str, ...] = ("immediate", "staged")

# Traversal ------------------------------------------------------------------

_chunk_size = getattr(app_config, "chunk_size", READ_CHUNK_SIZE_DEFAULT)
READ_CHUNK_SIZE: int = (
    _chunk_size
    if isinstance(_chunk_size, int) and _chunk_size > 0
    else READ_CHUNK_SIZE_DEFAULT
)

_dispatch_mode = str(getattr(app_config, "dispatch_mode", DISPATCH_MODE_DEFAULT)).strip().lower()
DEFAULT_DISPATCH_MODE: str = (
    _dispatch_mode if _dispatch_mode in _VALID_DISPATCH_MODES else DISPATCH_MODE_DEFAULT
)

_workers = getattr(app_config, "workers", WORKERS_DEFAULT)
DEFAULT_WORKERS: int = (
    _workers if isinstance(_workers, int) and _workers > 0 else WORKERS_DEFAULT
)

# Console --------------------------------------------------------------------

SHOW_PROGRESS: bool = bool(getattr(app_config, "show_progress", True))

_refresh = getattr(app_config, "progress_refresh_seconds", PROGRESS_REFRESH_SECONDS_DEFAULT)
PROGRESS_REFRESH_SECONDS: float = (
    float(_refresh)
    if isinstance(_refresh, (int, float)) and _refresh >= 0
    else PROGRESS_REFRESH_SECONDS_DEFAULT
)


__all__ = [
    "READ_CHUNK_SIZE",
    "DEFAULT_DISPATCH_MODE",
    "DEFAULT_WORKERS",
    "SHOW_PROGRESS",
    "PROGRESS_REFRESH_SECONDS",
]
