"""Shared pytest fixtures: a fake SmartSprites runner and a small source tree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from spritify.config.config import FilterConfig

from tests.fakes import FakeSmartSprites

SPRITE_DIRECTIVE = (
    "/** sprite: logo; sprite-image: url(/img/${sprite}-${date}.png); "
    "sprite-layout: vertical */\n"
)
STYLESHEET = (
    SPRITE_DIRECTIVE
    + ".logo { background-image: url(../img/logo.png); /** sprite-ref: logo; */ }\n"
)


@pytest.fixture
def fake_tool() -> FakeSmartSprites:
    """Return a fresh fake SmartSprites runner."""

    return FakeSmartSprites()


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """Create a source tree holding a sprite descriptor, a stylesheet and a plain file."""

    root = tmp_path / "src"
    css_dir = root / "Resources" / "public" / "css"
    css_dir.mkdir(parents=True)
    _ = (css_dir / "logo.sprite").write_text(SPRITE_DIRECTIVE, encoding="utf-8")
    _ = (css_dir / "common.scss").write_text(STYLESHEET, encoding="utf-8")
    _ = (css_dir / "plain.css").write_text("body { color: red; }\n", encoding="utf-8")
    return root


@pytest.fixture
def filter_config(tmp_path: Path) -> FilterConfig:
    """Configuration pointing at a real executable and a private cache dir."""

    return FilterConfig(
        java=Path(sys.executable),
        classpath=(Path("lib/smartsprites.jar"), Path("lib/args4j.jar")),
        cache_dir=tmp_path / "cache",
    )
