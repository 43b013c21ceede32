"""Shared path utilities for configuration, cache and log locations.

This module centralizes how spritify discovers locations on disk.

Policy (portable by default):
- Config: project-root ``<project_root>/config/spritify.toml`` unless
  overridden by ``SPRITIFY_CONFIG_PATH``.
- Cache: ``<tmp>/spritify`` unless overridden by ``SPRITIFY_CACHE_DIR``.
- Logs: project-root ``<project_root>/logs/spritify.log``.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "SPRITIFY_CONFIG_PATH"
ENV_CACHE_DIR: Final[str] = "SPRITIFY_CACHE_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_project_root(start: Path | None = None) -> Path:
    """Detect the project root by walking up from ``start``.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting directory. Defaults to the current working directory,
            since the filter runs inside someone else's build.

    Returns:
        Path: Detected project root, or ``start`` when no marker is found.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return here


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<project_root>/config/spritify.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _detect_project_root() / "config" / "spritify.toml",
    )


def default_cache_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the cache root holding generated sprites and stylesheets."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CACHE_DIR,
        default_factory=lambda: Path(tempfile.gettempdir()) / "spritify",
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_project_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "spritify.log").resolve()


__all__ = [
    "ENV_CACHE_DIR",
    "ENV_CONFIG_PATH",
    "default_cache_dir",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
