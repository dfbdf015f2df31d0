"""Configuration management for cachewarm."""
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from cachewarm.config.paths import default_config_path
from cachewarm.platform.logging import logger

# 80 KiB read buffer
READ_CHUNK_SIZE_DEFAULT: Final[int] = 81920
DISPATCH_MODE_DEFAULT: Final[str] = "immediate"
WORKERS_DEFAULT: Final[int] = 1
PROGRESS_REFRESH_SECONDS_DEFAULT: Final[float] = 0.1


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; file logging stays disabled when unset
    log_file: Path | None = _path_field()

    # Traversal settings
    chunk_size: int = READ_CHUNK_SIZE_DEFAULT
    dispatch_mode: str = DISPATCH_MODE_DEFAULT
    workers: int = WORKERS_DEFAULT

    # Console settings
    show_progress: bool = True
    progress_refresh_seconds: float = PROGRESS_REFRESH_SECONDS_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing config file yields the defaults; nothing is written to disk.
        Unknown keys are ignored with a warning.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
            cls._instance = instance
            cls._loaded_from = None
            return instance

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        unknown = sorted(key for key in config_dict if key not in known)
        if unknown:
            logger.warning(
                "Ignoring unknown configuration keys in %s: %s",
                config_file,
                ", ".join(unknown),
            )
        values = {key: value for key, value in config_dict.items() if key in known}

        logger.debug("Configuration loaded from %s", config_file)
        instance = cls(**values)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached singleton so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


# Global configuration instance
config = Config.load()
