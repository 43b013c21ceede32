"""
Summary: Ports defining what the sprite filters need from the pipeline and the OS.
Why: Decouple use cases from concrete adapters so tests can fake the external tool.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetPort(Protocol):
    """An asset owned by the enclosing pipeline.

    The filters only ever write ``content`` and ``target_path``.
    """

    content: bytes
    target_path: str | None

    @property
    def source_root(self) -> Path:
        """Base directory the asset was loaded from."""
        ...

    @property
    def source_path(self) -> str:
        """Asset path relative to ``source_root``."""
        ...


@dataclass(slots=True, frozen=True)
class Invocation:
    """A fully built command line for the sprite tool."""

    args: tuple[str, ...]
    cwd: Path
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Captured outcome of a finished child process."""

    exit_code: int
    stdout: str
    stderr: str


@runtime_checkable
class ProcessRunnerPort(Protocol):
    """Port for running a child process to completion."""

    def run(self, invocation: Invocation) -> ProcessResult:
        """Run ``invocation`` synchronously and capture its output."""
        ...


__all__ = ["AssetPort", "Invocation", "ProcessResult", "ProcessRunnerPort"]
