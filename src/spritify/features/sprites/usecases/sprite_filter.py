"""
Summary: Cache-gated SmartSprites filter loading sprite images or rewritten stylesheets.
Why: Run the external tool only when a source changed and feed its outputs back to the pipeline.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from spritify.config.config import FilterConfig
from spritify.features.sprites.adapters.subprocess_runner import SubprocessRunner
from spritify.features.sprites.domain.directive import has_directive

from .cache import cached_file, needs_regeneration, output_root
from .command import build_invocation, bundle_css_files, resolve_executable
from .events import SpriteEvent, log_event
from .invoker import invoke
from .locator import locate_sprite_image
from .ports import AssetPort, ProcessRunnerPort


class FilterState(StrEnum):
    """Stages an asset passes through in :meth:`SpriteFilter.filter_load`."""

    IDLE = "idle"
    DIRECTIVE_DETECTED = "directive_detected"
    CACHE_VALID = "cache_valid"
    CACHE_STALE = "cache_stale"
    RESOLVED = "resolved"
    LOADED = "loaded"


@dataclass(slots=True, frozen=True)
class FilterResult:
    """Outcome of filtering one asset."""

    state: FilterState
    regenerated: bool = False
    resolved_path: Path | None = None
    transitions: tuple[FilterState, ...] = ()


def decode_content(content: bytes, encoding: str | None) -> str:
    """Decode asset bytes for directive matching."""

    return content.decode(encoding or "utf-8", errors="replace")


class SpriteFilter:
    """Spritify assets through SmartSprites, reusing cached outputs while they are fresh.

    Configure it as the first filter in a chain: it works on the original
    files under the asset's source root, not on the in-memory content.
    """

    def __init__(self, config: FilterConfig, runner: ProcessRunnerPort | None = None) -> None:
        self._config = config.with_overrides(java=resolve_executable(config.java))
        self._runner = runner if runner is not None else SubprocessRunner()
        self._sprite_files = re.compile(config.sprite_files)
        self._css_files = re.compile(config.css_files)

    @property
    def config(self) -> FilterConfig:
        return self._config

    def output_root(self, asset: AssetPort) -> Path:
        """Directory SmartSprites works in while processing ``asset``."""

        return output_root(self._config.cache_dir, asset.source_root)

    def filter_load(self, asset: AssetPort) -> FilterResult:
        """Replace the asset's content with its spritified version.

        Assets without a sprite directive, or matching neither file pattern, are left untouched.

        Raises:
            SpritifyError: Any failure; a stale cache is never used as a fallback.
        """
        text = decode_content(asset.content, self._config.css_file_encoding)
        if not has_directive(text):
            log_event(
                logging.DEBUG,
                SpriteEvent.FILTER_SKIP,
                "No sprite directive in %s",
                asset.source_path,
                source_path=asset.source_path,
            )
            return FilterResult(state=FilterState.IDLE, transitions=(FilterState.IDLE,))

        is_sprite_file = self._sprite_files.search(asset.source_path) is not None
        if not is_sprite_file and self._css_files.search(asset.source_path) is None:
            log_event(
                logging.DEBUG,
                SpriteEvent.FILTER_SKIP,
                "%s is neither a sprite descriptor nor a stylesheet",
                asset.source_path,
                source_path=asset.source_path,
            )
            return FilterResult(
                state=FilterState.IDLE,
                transitions=(FilterState.IDLE, FilterState.DIRECTIVE_DETECTED, FilterState.IDLE),
            )

        source = asset.source_root / asset.source_path
        cached = cached_file(self._config.cache_dir, asset.source_root, asset.source_path)

        transitions = [FilterState.IDLE, FilterState.DIRECTIVE_DETECTED]
        regenerated = needs_regeneration(source, cached)
        if regenerated:
            transitions.append(FilterState.CACHE_STALE)
            log_event(
                logging.INFO,
                SpriteEvent.CACHE_STALE,
                "Cache stale for %s",
                asset.source_path,
                source_path=asset.source_path,
            )
            self._execute(asset)
        else:
            log_event(
                logging.DEBUG,
                SpriteEvent.CACHE_HIT,
                "Cache fresh for %s",
                asset.source_path,
                source_path=asset.source_path,
            )
            transitions.append(FilterState.CACHE_VALID)

        transitions.append(FilterState.RESOLVED)
        if is_sprite_file:
            resolved = self._load_sprite_file(asset, text)
        else:
            resolved = self._load_css_file(asset, cached)
        transitions.append(FilterState.LOADED)

        return FilterResult(
            state=FilterState.LOADED,
            regenerated=regenerated,
            resolved_path=resolved,
            transitions=tuple(transitions),
        )

    def filter_dump(self, asset: AssetPort) -> None:
        """Nothing to do after the rest of the chain has run."""

        del asset

    def _execute(self, asset: AssetPort) -> None:
        out_dir = self.output_root(asset)
        out_dir.mkdir(mode=0o770, parents=True, exist_ok=True)

        css_files = bundle_css_files(asset.source_path, self._config.bundle_files)
        invocation = build_invocation(
            self._config,
            document_root=out_dir,
            css_files=css_files,
            cwd=asset.source_root,
            output_dir=out_dir,
            css_file_suffix="",
        )

        log_event(
            logging.INFO,
            SpriteEvent.INVOKE_START,
            "Running SmartSprites for %s",
            asset.source_path,
            source_path=asset.source_path,
            bundle_size=len(css_files),
        )
        started = time.perf_counter()
        try:
            _ = invoke(invocation, self._runner)
        except Exception as exc:
            log_event(
                logging.ERROR,
                SpriteEvent.INVOKE_ERROR,
                "SmartSprites failed for %s: %s",
                asset.source_path,
                exc,
                source_path=asset.source_path,
                error_message=str(exc),
            )
            raise
        log_event(
            logging.INFO,
            SpriteEvent.INVOKE_COMPLETE,
            "SmartSprites finished for %s",
            asset.source_path,
            source_path=asset.source_path,
            duration_ms=(time.perf_counter() - started) * 1000,
        )

    def _load_sprite_file(self, asset: AssetPort, text: str) -> Path:
        root = self.output_root(asset)
        image = locate_sprite_image(text, root)

        asset.content = image.read_bytes()
        asset.target_path = image.relative_to(root).as_posix()
        log_event(
            logging.INFO,
            SpriteEvent.RESOLVE_IMAGE,
            "Loaded sprite image %s for %s",
            image,
            asset.source_path,
            source_path=asset.source_path,
            target_path=asset.target_path,
        )
        return image

    def _load_css_file(self, asset: AssetPort, cached: Path) -> Path:
        asset.content = cached.read_bytes()
        log_event(
            logging.INFO,
            SpriteEvent.RESOLVE_STYLESHEET,
            "Loaded stylesheet %s for %s",
            cached,
            asset.source_path,
            source_path=asset.source_path,
        )
        return cached


__all__ = ["FilterResult", "FilterState", "SpriteFilter", "decode_content"]
