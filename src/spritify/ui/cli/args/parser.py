"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from spritify.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from spritify.ui.cli.args.options import CLIArgs, InitConfigArgs, ProcessArgs

DEFAULT_TARGET_DIR_NAME = "spritify-out"


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
            prog="spritify",
            description="spritify - run SmartSprites over stylesheets and sprite descriptors.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        process_parser = subparsers.add_parser(
            "process",
            help="Spritify assets and write the results to a target directory",
        )
        _ = process_parser.add_argument(
            "source_root",
            type=str,
            help="Directory the asset paths are relative to",
            metavar="SOURCE_ROOT",
        )
        _ = process_parser.add_argument(
            "paths",
            nargs="+",
            help="Asset paths relative to SOURCE_ROOT",
            metavar="PATH",
        )
        _ = process_parser.add_argument(
            "--target",
            type=str,
            help=f"Output directory (defaults to SOURCE_ROOT/../{DEFAULT_TARGET_DIR_NAME})",
            metavar="TARGET_PATH",
        )
        _ = process_parser.add_argument(
            "--config",
            type=str,
            help="TOML configuration file",
            metavar="CONFIG_PATH",
        )
        _ = process_parser.add_argument(
            "--cache-dir",
            type=str,
            help="Override the configured cache directory",
            metavar="CACHE_DIR",
        )
        _ = process_parser.add_argument(
            "--standalone",
            action="store_true",
            help="Rewrite content through a temporary file instead of the source tree cache",
        )
        verbosity = process_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show the SmartSprites command line and output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a commented configuration template if none exists",
        )
        _ = init_parser.add_argument(
            "--config",
            type=str,
            help="Where to write the template",
            metavar="CONFIG_PATH",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the source root does not exist.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if getattr(parsed_args, "quiet", False):
            log_level = logging.ERROR
        elif getattr(parsed_args, "verbose", False):
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        _ = setup_logger(log_file=DEFAULT_LOG_FILE, console_level=log_level)

        config_path = Path(parsed_args.config) if parsed_args.config else None

        if parsed_args.command == "init-config":
            return InitConfigArgs(command="init-config", config_path=config_path)

        source_root = Path(parsed_args.source_root)
        if not source_root.is_dir():
            logger.error("Source root does not exist: %s", source_root)
            sys.exit(1)

        if parsed_args.target:
            target_path = Path(parsed_args.target)
        else:
            target_path = source_root.resolve().parent / DEFAULT_TARGET_DIR_NAME

        return ProcessArgs(
            command="process",
            source_root=source_root,
            paths=list(parsed_args.paths),
            target_path=target_path,
            config_path=config_path,
            cache_dir=Path(parsed_args.cache_dir) if parsed_args.cache_dir else None,
            standalone=parsed_args.standalone,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser", "DEFAULT_TARGET_DIR_NAME"]
