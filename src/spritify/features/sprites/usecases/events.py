"""
Summary: Structured log events emitted while filtering an asset.
Why: Let the Rich handler render each filter stage on one styled line.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from spritify.platform.logging import logger


class SpriteEvent(StrEnum):
    """Structured event identifiers for sprite filter logs."""

    FILTER_SKIP = "sprite.filter.skip"
    CACHE_HIT = "sprite.cache.hit"
    CACHE_STALE = "sprite.cache.stale"
    INVOKE_START = "sprite.invoke.start"
    INVOKE_COMPLETE = "sprite.invoke.complete"
    INVOKE_ERROR = "sprite.invoke.error"
    RESOLVE_IMAGE = "sprite.resolve.image"
    RESOLVE_STYLESHEET = "sprite.resolve.stylesheet"


def log_event(
    level: int,
    event: SpriteEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` with ``event`` and ``context`` attached as record attributes."""

    extra: dict[str, Any] = {"sprite_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["SpriteEvent", "log_event"]
