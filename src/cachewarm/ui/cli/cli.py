"""Command line interface for cachewarm."""

import sys
from typing import final

from cachewarm.features.warming import RootPathError
from cachewarm.platform.logging import logger
from cachewarm.ui.cli.args import ArgumentParser
from cachewarm.ui.cli.args.options import WarmArgs
from cachewarm.ui.cli.commands import WarmCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Per-file and per-directory failures never end the run early; only an
        invalid root or an unexpected error exits with a non-zero status.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: WarmArgs = ArgumentParser.process_args(args_list)
            _ = WarmCommand(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except RootPathError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes.
    """
    CommandProcessor.process_command()
    return 0
