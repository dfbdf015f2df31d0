"""Command line argument handling package."""

from cachewarm.ui.cli.args.parser import ArgumentParser
from cachewarm.ui.cli.args.options import WarmArgs

__all__ = ["ArgumentParser", "WarmArgs"]
