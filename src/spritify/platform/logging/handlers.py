"""Where: platform/logging/handlers.py
What: Rich console handler rendering sprite filter events with icons and compact paths.
Why: Keep handler formatting out of logger setup so configuration stays concise.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class SpriteEventRichHandler(RichHandler):
    """Rich handler that renders ``sprite_event`` records on a single styled line."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "sprite.filter.skip": ("·", "dim", "No sprite directive in "),
        "sprite.cache.hit": ("♻️", "green", "Cache fresh for "),
        "sprite.cache.stale": ("🔄", "yellow", "Cache stale for "),
        "sprite.invoke.start": ("🚀", "cyan", "Running SmartSprites for "),
        "sprite.invoke.complete": ("✅", "green", "SmartSprites finished for "),
        "sprite.invoke.error": ("⛔", "red", "SmartSprites failed for "),
        "sprite.resolve.image": ("🖼️", "magenta", "Loaded sprite image "),
        "sprite.resolve.stylesheet": ("🎨", "blue", "Loaded stylesheet "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def format_path(cls, path: str) -> Text:
        """Format a path with coloured separators, keeping only its last segments."""

        pure_path: PurePath = PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(parts) > cls._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-cls._PATH_SEGMENT_LIMIT:]
            display = "…" + separator + separator.join(parts)
        elif anchor:
            display = anchor.rstrip("\\/") + separator + separator.join(parts)
        else:
            display = separator.join(parts) or "."

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def render_event(self, record: logging.LogRecord) -> Text | None:
        """Render a structured sprite event, or ``None`` for plain records."""

        event = getattr(record, "sprite_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)
        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self.format_path(str(source_path)))

        target_path = getattr(record, "target_path", None)
        if target_path:
            _ = body.append(" → ")
            _ = body.append_text(self.format_path(str(target_path)))

        details: list[str] = []
        bundle_size = getattr(record, "bundle_size", None)
        if isinstance(bundle_size, int):
            details.append(f"files={bundle_size}")
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message).strip().splitlines()[0])
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self.render_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["SpriteEventRichHandler"]
