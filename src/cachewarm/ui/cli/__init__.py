"""Command line interface package."""

from cachewarm.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
