"""
Summary: Uncached SmartSprites filter that rewrites in-memory stylesheet content.
Why: Filters later in a chain only have the content, not a file SmartSprites can read.
"""

from __future__ import annotations

import logging
import random
import re
import time
from pathlib import Path

from spritify.config.config import FilterConfig
from spritify.features.sprites.adapters.subprocess_runner import SubprocessRunner
from spritify.features.sprites.domain.directive import has_directive

from .command import build_invocation, resolve_executable
from .events import SpriteEvent, log_event
from .invoker import invoke
from .ports import AssetPort, ProcessRunnerPort
from .sprite_filter import FilterResult, FilterState, decode_content

TEMP_DIR_NAME = "tmp"


def temporary_input_path(directory: Path) -> Path:
    """Return a collision-resistant input path built from the clock and a random number."""

    return directory / f"spritify-{time.time_ns()}-{random.getrandbits(32):08x}.css"


class StandaloneSpriteFilter:
    """Run SmartSprites over the asset's current content on every call."""

    def __init__(self, config: FilterConfig, runner: ProcessRunnerPort | None = None) -> None:
        self._config = config.with_overrides(java=resolve_executable(config.java))
        self._runner = runner if runner is not None else SubprocessRunner()
        self._css_files = re.compile(config.css_files)

    def filter_load(self, asset: AssetPort) -> FilterResult:
        """Nothing to do before the content is final."""

        del asset
        return FilterResult(state=FilterState.IDLE, transitions=(FilterState.IDLE,))

    def filter_dump(self, asset: AssetPort) -> FilterResult:
        """Replace the asset's stylesheet content with the SmartSprites rewrite.

        The temporary input and output files are removed whether or not the run succeeds.
        """
        text = decode_content(asset.content, self._config.css_file_encoding)
        if not has_directive(text) or self._css_files.search(asset.source_path) is None:
            log_event(
                logging.DEBUG,
                SpriteEvent.FILTER_SKIP,
                "Skipping %s: not a stylesheet with a sprite directive",
                asset.source_path,
                source_path=asset.source_path,
            )
            return FilterResult(state=FilterState.IDLE, transitions=(FilterState.IDLE,))

        temp_dir = self._config.cache_dir / TEMP_DIR_NAME
        temp_dir.mkdir(parents=True, exist_ok=True)
        input_path = temporary_input_path(temp_dir)
        output_path = input_path.with_name(
            f"{input_path.stem}{self._config.css_file_suffix}{input_path.suffix}"
        )

        invocation = build_invocation(
            self._config,
            document_root=asset.source_root,
            css_files=[str(input_path)],
            cwd=self._config.tool_dir or asset.source_root,
        )

        try:
            _ = input_path.write_bytes(asset.content)
            log_event(
                logging.INFO,
                SpriteEvent.INVOKE_START,
                "Running SmartSprites for %s",
                asset.source_path,
                source_path=asset.source_path,
                bundle_size=1,
            )
            _ = invoke(invocation, self._runner)
            asset.content = output_path.read_bytes()
        finally:
            input_path.unlink(missing_ok=True)
            output_path.unlink(missing_ok=True)

        log_event(
            logging.INFO,
            SpriteEvent.RESOLVE_STYLESHEET,
            "Loaded rewritten stylesheet for %s",
            asset.source_path,
            source_path=asset.source_path,
        )
        return FilterResult(
            state=FilterState.LOADED,
            regenerated=True,
            transitions=(
                FilterState.IDLE,
                FilterState.DIRECTIVE_DETECTED,
                FilterState.CACHE_STALE,
                FilterState.RESOLVED,
                FilterState.LOADED,
            ),
        )


__all__ = ["StandaloneSpriteFilter", "temporary_input_path"]
