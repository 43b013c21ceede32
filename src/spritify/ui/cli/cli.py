"""Command line interface for spritify."""

import sys
from typing import final

from spritify.features.sprites.domain.errors import SpritifyError
from spritify.platform.logging import logger
from spritify.ui.cli.args import ArgumentParser
from spritify.ui.cli.args.options import CLIArgs, ProcessArgs
from spritify.ui.cli.commands import InitConfigCommand, ProcessCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ProcessArgs):
                results = ProcessCommand(args).execute()
                if any(not r.success for r in results):
                    sys.exit(1)
                processed = sum(1 for r in results if r.success)
                if not args.quiet:
                    logger.info("Spritified %d asset(s) into %s", processed, args.target_path)
                return

            path = InitConfigCommand(args).execute()
            logger.info("Configuration file: %s", path)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except SpritifyError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through ``sys.exit``.
    """
    CommandProcessor.process_command()
    return 0


__all__ = ["CommandProcessor", "main"]
