"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ProcessArgs:
    """Command line arguments for the ``process`` subcommand."""

    command: Literal["process"]
    source_root: Path
    paths: list[str]
    target_path: Path
    config_path: Path | None
    cache_dir: Path | None
    standalone: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    config_path: Path | None


CLIArgs = ProcessArgs | InitConfigArgs

__all__ = ["CLIArgs", "InitConfigArgs", "ProcessArgs"]
