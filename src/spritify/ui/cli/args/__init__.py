"""Command line argument handling package."""

from spritify.ui.cli.args.parser import ArgumentParser
from spritify.ui.cli.args.options import CLIArgs, InitConfigArgs, ProcessArgs

__all__ = ["ArgumentParser", "CLIArgs", "InitConfigArgs", "ProcessArgs"]
