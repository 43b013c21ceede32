"""Command execution package for CLI."""

from spritify.ui.cli.commands.init_config import InitConfigCommand
from spritify.ui.cli.commands.process import ProcessCommand, ProcessOutcome

__all__ = ["InitConfigCommand", "ProcessCommand", "ProcessOutcome"]
