"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from cachewarm.config.config import Config
from cachewarm.config.settings import (
    DEFAULT_DISPATCH_MODE,
    DEFAULT_WORKERS,
    READ_CHUNK_SIZE,
    SHOW_PROGRESS,
)
from cachewarm.features.warming import DispatchMode
from cachewarm.platform.logging import logger, setup_logger
from cachewarm.ui.cli.args.options import WarmArgs


def _positive_int(raw: str) -> int:
    """argparse ``type`` accepting integers greater than zero."""

    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="cachewarm",
            description=(
                "Warm the filesystem cache by reading every regular file under a "
                "directory. Symbolic links and junctions are never followed."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "root",
            nargs="?",
            type=str,
            default=None,
            help="Directory to warm (defaults to the current working directory)",
            metavar="ROOT",
        )
        _ = parser.add_argument(
            "--mode",
            type=str,
            choices=[mode.value for mode in DispatchMode],
            default=DEFAULT_DISPATCH_MODE,
            help=(
                "immediate reads files as they are discovered; staged discovers "
                "every file first so progress shows a known total"
            ),
        )
        _ = parser.add_argument(
            "--workers",
            type=_positive_int,
            default=DEFAULT_WORKERS,
            metavar="N",
            help="Number of concurrent file readers (default: %(default)s)",
        )
        _ = parser.add_argument(
            "--chunk-size",
            type=_positive_int,
            default=READ_CHUNK_SIZE,
            metavar="BYTES",
            help="Read buffer size in bytes (default: %(default)s)",
        )
        _ = parser.add_argument(
            "--no-progress",
            action="store_true",
            help="Disable the progress bar",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log every skipped directory and failed file",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress everything except errors and the final report",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> WarmArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            WarmArgs: Processed command line arguments.

        Raises:
            SystemExit: If the root does not exist or is not a directory.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        root = Path(parsed_args.root) if parsed_args.root else Path.cwd()
        if not root.exists() or not root.is_dir():
            logger.error("Root does not exist or is not a directory: %s", root)
            sys.exit(1)

        return WarmArgs(
            root=root.absolute(),
            mode=DispatchMode.from_user_input(parsed_args.mode),
            workers=parsed_args.workers,
            chunk_size=parsed_args.chunk_size,
            show_progress=SHOW_PROGRESS and not parsed_args.no_progress and not parsed_args.quiet,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
