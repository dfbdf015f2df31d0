"""Command execution package for CLI."""

from cachewarm.ui.cli.commands.warm import WarmCommand

__all__ = ["WarmCommand"]
