"""
Summary: Locate cache entries and decide whether they are stale.
Why: Regenerating sprites is slow, so reuse outputs until their source changes.
"""

from __future__ import annotations

from pathlib import Path


def output_root(cache_dir: Path, source_root: Path) -> Path:
    """Directory mirroring ``source_root`` under the cache root."""

    absolute = source_root.resolve()
    return cache_dir / absolute.relative_to(absolute.anchor)


def cached_file(cache_dir: Path, source_root: Path, source_path: str) -> Path:
    """Path where the tool writes the processed copy of ``source_path``."""

    return output_root(cache_dir, source_root) / source_path


def needs_regeneration(source: Path, cached: Path) -> bool:
    """Return True when ``cached`` is missing or strictly older than ``source``.

    Only modification times are compared, so clock skew can mask a change.
    """
    try:
        cached_mtime = cached.stat().st_mtime_ns
    except FileNotFoundError:
        return True
    return source.stat().st_mtime_ns > cached_mtime


__all__ = ["cached_file", "needs_regeneration", "output_root"]
