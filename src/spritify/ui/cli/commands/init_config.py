"""Write the default configuration template."""

from __future__ import annotations

from pathlib import Path

from spritify.config.config import ensure_default_config
from spritify.ui.cli.args.options import InitConfigArgs


class InitConfigCommand:
    """Create the configuration file when it is missing."""

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> Path:
        return ensure_default_config(self.args.config_path)


__all__ = ["InitConfigCommand"]
