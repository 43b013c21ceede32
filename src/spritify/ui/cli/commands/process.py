"""Run the sprite filters over files named on the command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from spritify.config.config import FilterConfig, load_config
from spritify.features.sprites.adapters.file_asset import FileAsset
from spritify.features.sprites.domain.errors import SpritifyError
from spritify.features.sprites.usecases.ports import ProcessRunnerPort
from spritify.features.sprites.usecases.sprite_filter import FilterState, SpriteFilter
from spritify.features.sprites.usecases.standalone_filter import StandaloneSpriteFilter
from spritify.platform.logging import logger
from spritify.ui.cli.args.options import ProcessArgs


@dataclass(slots=True)
class ProcessOutcome:
    """Result of processing one asset path."""

    source_path: str
    success: bool
    destination: Path | None = None
    state: FilterState | None = None
    message: str | None = None


class ProcessCommand:
    """Load each asset, filter it, and write it under the target directory."""

    def __init__(self, args: ProcessArgs, runner: ProcessRunnerPort | None = None) -> None:
        self.args = args
        config = load_config(args.config_path)
        if args.cache_dir is not None:
            config = config.with_overrides(cache_dir=args.cache_dir)
        self.config: FilterConfig = config
        self.runner = runner

    def execute(self) -> list[ProcessOutcome]:
        """Process every path, stopping at the first failure.

        Returns:
            list[ProcessOutcome]: One outcome per attempted path.

        Raises:
            ConfigurationError: If the configured executable cannot be used.
        """
        sprite_filter: SpriteFilter | StandaloneSpriteFilter
        if self.args.standalone:
            sprite_filter = StandaloneSpriteFilter(self.config, self.runner)
        else:
            sprite_filter = SpriteFilter(self.config, self.runner)

        outcomes: list[ProcessOutcome] = []
        for source_path in self.args.paths:
            try:
                asset = FileAsset.load(self.args.source_root, source_path)
                result = sprite_filter.filter_load(asset)
                dumped = sprite_filter.filter_dump(asset)
                if dumped is not None:
                    result = dumped
                destination = asset.dump(self.args.target_path)
            except (SpritifyError, OSError) as exc:
                logger.error("Failed to spritify %s: %s", source_path, exc)
                outcomes.append(ProcessOutcome(source_path=source_path, success=False, message=str(exc)))
                break

            logger.debug("Wrote %s", destination)
            outcomes.append(
                ProcessOutcome(
                    source_path=source_path,
                    success=True,
                    destination=destination,
                    state=result.state,
                )
            )
        return outcomes


__all__ = ["ProcessCommand", "ProcessOutcome"]
