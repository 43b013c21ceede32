"""
Summary: Validate sprite image discovery by glob and modification time.
Why: SmartSprites leaves older dated images behind, so only the newest one may be served.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from spritify.features.sprites.domain.errors import DirectiveParseError, NoOutputFoundError
from spritify.features.sprites.usecases.locator import locate_sprite_image, newest_match

DIRECTIVE = "/** sprite: logo; sprite-image: url(/img/${sprite}-${date}.png) */"


def _write(path: Path, mtime_ns: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(b"png")
    os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


def test_locate_sprite_image_returns_newest_match(tmp_path: Path) -> None:
    _ = _write(tmp_path / "img" / "logo-20250101.png", 1_000_000_000)
    newer = _write(tmp_path / "img" / "logo-20240101.png", 2_000_000_000)
    _ = _write(tmp_path / "img" / "other-20990101.png", 9_000_000_000)

    assert locate_sprite_image(DIRECTIVE, tmp_path) == newer


def test_locate_sprite_image_raises_when_nothing_matches(tmp_path: Path) -> None:
    _ = _write(tmp_path / "img" / "other-1.png", 1_000_000_000)

    with pytest.raises(NoOutputFoundError) as excinfo:
        _ = locate_sprite_image(DIRECTIVE, tmp_path)

    assert excinfo.value.pattern == "/img/logo-*.png"


def test_locate_sprite_image_requires_a_directive(tmp_path: Path) -> None:
    with pytest.raises(DirectiveParseError):
        _ = locate_sprite_image("body {}", tmp_path)


def test_newest_match_breaks_ties_by_sorted_order(tmp_path: Path) -> None:
    first = _write(tmp_path / "img" / "logo-a.png", 1_000_000_000)
    _ = _write(tmp_path / "img" / "logo-b.png", 1_000_000_000)

    assert newest_match(tmp_path, "/img/logo-*.png") == first


def test_newest_match_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "img" / "logo-dir.png").mkdir(parents=True)

    with pytest.raises(NoOutputFoundError):
        _ = newest_match(tmp_path, "/img/logo-*.png")
