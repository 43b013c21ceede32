"""
Summary: Build the SmartSprites command line from configuration.
Why: Argument construction stays a pure function, testable without spawning Java.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from spritify.config.config import FilterConfig
from spritify.features.sprites.domain.errors import ConfigurationError

from .ports import Invocation

JAVA_OPTIONS: Final[tuple[str, ...]] = (
    "-Djava.awt.headless=true",
    "-Djava.ext.dirs=lib",
)
MAIN_CLASS: Final[str] = "org.carrot2.labs.smartsprites.SmartSprites"
CLASSPATH_ENV: Final[str] = "CLASSPATH"


def resolve_executable(java: Path) -> Path:
    """Return the absolute path of ``java``, searching ``PATH`` for bare names.

    Relative paths are anchored to the current directory, not to the child's ``cwd``.

    Raises:
        ConfigurationError: If ``java`` is not an executable file.
    """
    found = shutil.which(str(java))
    if found is None:
        raise ConfigurationError(f"Java executable not found or not executable: {java}")
    return Path(found).absolute()


def bundle_css_files(source_path: str, bundle_files: Iterable[str]) -> list[str]:
    """Return the files processed in one run: the asset first, then its bundle, deduplicated."""

    ordered: list[str] = []
    for candidate in (source_path, *bundle_files):
        normalized = candidate.removeprefix("./")
        if normalized and normalized not in ordered:
            ordered.append(normalized)
    return [f"./{name}" for name in ordered]


def build_invocation(
    config: FilterConfig,
    *,
    document_root: Path,
    css_files: Sequence[str],
    cwd: Path,
    output_dir: Path | None = None,
    css_file_suffix: str | None = None,
) -> Invocation:
    """Build the SmartSprites invocation.

    Args:
        config: Filter configuration supplying the executable and tool options.
        document_root: Directory that absolute image URLs resolve against.
        css_files: Stylesheets to process, relative to ``cwd`` or absolute.
        cwd: Working directory for the child process.
        output_dir: When set, outputs are written under this directory, mirroring ``cwd``.
        css_file_suffix: Suffix for rewritten stylesheets; defaults to the configured one.

    Returns:
        Invocation: Argument vector, working directory and ``CLASSPATH`` override.
    """
    args: list[str] = [str(config.java), *JAVA_OPTIONS, MAIN_CLASS]

    if config.css_file_encoding is not None:
        args += ["--css-file-encoding", config.css_file_encoding]
    if config.log_level is not None:
        args += ["--log-level", config.log_level.value]

    args += ["--document-root-dir-path", str(document_root)]
    if output_dir is not None:
        args += ["--output-dir-path", str(output_dir), "--root-dir-path", "."]

    if config.sprite_png_depth:
        args += ["--sprite-png-depth", str(config.sprite_png_depth)]
    if config.sprite_png_ie6:
        args.append("--sprite-png-ie6")

    suffix = config.css_file_suffix if css_file_suffix is None else css_file_suffix
    args += ["--css-file-suffix", suffix]

    args.append("--css-files")
    args.extend(css_files)

    env = {CLASSPATH_ENV: os.pathsep.join(str(entry) for entry in config.classpath)}
    return Invocation(args=tuple(args), cwd=cwd, env=env)


__all__ = [
    "CLASSPATH_ENV",
    "JAVA_OPTIONS",
    "MAIN_CLASS",
    "build_invocation",
    "bundle_css_files",
    "resolve_executable",
]
