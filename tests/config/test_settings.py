"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path


def test_settings_follow_config_defaults(config_runtime_env: Path) -> None:
    """Default configuration yields the documented constants."""

    _ = config_runtime_env
    import cachewarm.config.config as config_module
    import cachewarm.config.settings as settings

    config_module.config = config_module.Config.load()
    reloaded = importlib.reload(settings)

    assert reloaded.READ_CHUNK_SIZE == 81920
    assert reloaded.DEFAULT_DISPATCH_MODE == "immediate"
    assert reloaded.DEFAULT_WORKERS == 1
    assert reloaded.SHOW_PROGRESS is True


def test_invalid_values_fall_back(config_runtime_env: Path) -> None:
    """Out-of-range values are replaced by defaults."""

    _ = config_runtime_env
    import cachewarm.config.config as config_module
    import cachewarm.config.settings as settings

    app_config = config_module.Config.load()
    app_config.chunk_size = 0
    app_config.dispatch_mode = "sideways"
    app_config.workers = -2
    app_config.progress_refresh_seconds = -1.0
    config_module.config = app_config

    reloaded = importlib.reload(settings)

    assert reloaded.READ_CHUNK_SIZE == 81920
    assert reloaded.DEFAULT_DISPATCH_MODE == "immediate"
    assert reloaded.DEFAULT_WORKERS == 1
    assert reloaded.PROGRESS_REFRESH_SECONDS == 0.1


def test_valid_overrides_are_kept(config_runtime_env: Path) -> None:
    """Sane values pass through, with mode normalised."""

    _ = config_runtime_env
    import cachewarm.config.config as config_module
    import cachewarm.config.settings as settings

    app_config = config_module.Config.load()
    app_config.chunk_size = 4096
    app_config.dispatch_mode = " Staged "
    app_config.workers = 8
    app_config.show_progress = False
    config_module.config = app_config

    reloaded = importlib.reload(settings)

    assert reloaded.READ_CHUNK_SIZE == 4096
    assert reloaded.DEFAULT_DISPATCH_MODE == "staged"
    assert reloaded.DEFAULT_WORKERS == 8
    assert reloaded.SHOW_PROGRESS is False
