"""
Summary: Parse SmartSprites sprite directives and template their image paths.
Why: Keep directive parsing pure so output discovery can be tested without a filesystem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from .errors import DirectiveParseError

DIRECTIVE_MARKER: Final[str] = "/** sprite"

_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"/\*\*\s*(sprite\s*:.*?)\*/", re.DOTALL)
_URL_RE: Final[re.Pattern[str]] = re.compile(
    r"""^url\s*\(\s*['"]?([^'"\s)]+)['"]?\s*\)$"""
)
_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"\$\{[^}]+\}")
_SPRITE_PLACEHOLDER: Final[str] = "${sprite}"


@dataclass(slots=True, frozen=True)
class SpriteDirective:
    """A sprite image directive: ``sprite: <name>; sprite-image: url(<template>); ...``."""

    name: str
    image_template: str
    layout: str | None = None
    properties: dict[str, str] = field(default_factory=dict, compare=False)


def has_directive(text: str) -> bool:
    """Return whether ``text`` contains a sprite directive marker."""

    return DIRECTIVE_MARKER in text


def _split_properties(body: str) -> dict[str, str]:
    properties: dict[str, str] = {}
    for chunk in body.split(";"):
        key, sep, value = chunk.partition(":")
        key = key.strip().lstrip("*").strip()
        if not sep or not key:
            continue
        properties[key] = value.strip()
    return properties


def parse_directive(text: str) -> SpriteDirective:
    """Parse the first sprite directive comment in ``text``.

    Args:
        text: Stylesheet or sprite descriptor content.

    Returns:
        SpriteDirective: The structured directive.

    Raises:
        DirectiveParseError: If no directive is present or a required property is missing.
    """
    match = _COMMENT_RE.search(text)
    if match is None:
        raise DirectiveParseError("No sprite directive comment found")

    properties = _split_properties(match.group(1))

    name = properties.get("sprite", "")
    if not name or re.search(r"\s", name):
        raise DirectiveParseError(f"Invalid sprite name in directive: {match.group(0)!r}")

    image = properties.get("sprite-image")
    if image is None:
        raise DirectiveParseError(f"Directive for sprite '{name}' has no sprite-image")
    url_match = _URL_RE.match(image)
    if url_match is None:
        raise DirectiveParseError(f"sprite-image for '{name}' is not a url(...): {image!r}")

    return SpriteDirective(
        name=name,
        image_template=url_match.group(1),
        layout=properties.get("sprite-layout") or None,
        properties=properties,
    )


def render_image_glob(directive: SpriteDirective) -> str:
    """Turn the image template into a glob.

    ``${sprite}`` becomes the sprite name and every other placeholder a ``*`` wildcard.
    """
    rendered = directive.image_template.replace(_SPRITE_PLACEHOLDER, directive.name)
    return _PLACEHOLDER_RE.sub("*", rendered)


__all__ = [
    "DIRECTIVE_MARKER",
    "SpriteDirective",
    "has_directive",
    "parse_directive",
    "render_image_glob",
]
