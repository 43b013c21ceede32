"""
Summary: Exception taxonomy raised while spritifying an asset.
Why: Let the pipeline fail a build with the tool's own output as the message.
"""

from __future__ import annotations


class SpritifyError(Exception):
    """Base exception for all sprite filter failures."""


class ConfigurationError(SpritifyError):
    """Raised when the filter configuration cannot be used."""


class ExecutionError(SpritifyError):
    """Raised when the sprite tool exits with a non-zero status."""

    def __init__(self, exit_code: int, stdout: str, stderr: str) -> None:
        super().__init__(stderr)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


class ToolReportedError(SpritifyError):
    """Raised when the sprite tool exits cleanly but reports ``ERROR:`` on stdout."""

    def __init__(self, stdout: str) -> None:
        super().__init__(stdout)
        self.stdout = stdout


class DirectiveParseError(SpritifyError):
    """Raised when a sprite directive comment is missing or malformed."""


class NoOutputFoundError(SpritifyError):
    """Raised when no generated sprite image matches the directive."""

    def __init__(self, pattern: str, root: str) -> None:
        super().__init__(f"No sprite image matching '{pattern}' under {root}")
        self.pattern = pattern
        self.root = root


__all__ = [
    "ConfigurationError",
    "DirectiveParseError",
    "ExecutionError",
    "NoOutputFoundError",
    "SpritifyError",
    "ToolReportedError",
]
