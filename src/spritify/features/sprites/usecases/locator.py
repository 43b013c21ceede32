"""
Summary: Find the sprite image SmartSprites generated for a directive.
Why: Generated names embed a date or hash and stale copies linger, so the newest match wins.
"""

from __future__ import annotations

from pathlib import Path

from spritify.features.sprites.domain.directive import parse_directive, render_image_glob
from spritify.features.sprites.domain.errors import NoOutputFoundError


def newest_match(root: Path, pattern: str) -> Path:
    """Return the most recently modified file under ``root`` matching ``pattern``.

    Matches are listed in sorted order and ties keep the first one, so the
    choice is deterministic.

    Raises:
        NoOutputFoundError: If nothing matches.
    """
    matches = sorted(path for path in root.glob(pattern.lstrip("/")) if path.is_file())
    if not matches:
        raise NoOutputFoundError(pattern, str(root))

    newest = matches[0]
    newest_mtime = newest.stat().st_mtime_ns
    for candidate in matches[1:]:
        mtime = candidate.stat().st_mtime_ns
        if mtime > newest_mtime:
            newest, newest_mtime = candidate, mtime
    return newest


def locate_sprite_image(content: str, root: Path) -> Path:
    """Resolve the generated sprite image for the directive in ``content``.

    Raises:
        DirectiveParseError: If ``content`` holds no valid directive.
        NoOutputFoundError: If no generated image exists under ``root``.
    """
    directive = parse_directive(content)
    return newest_match(root, render_image_glob(directive))


__all__ = ["locate_sprite_image", "newest_match"]
