"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper and Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import SpriteEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "SpriteEventRichHandler",
    "logger",
    "setup_logger",
]
