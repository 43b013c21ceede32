"""spritify: run SmartSprites from an asset pipeline and cache its outputs."""

from spritify.config.config import FilterConfig, LogLevel, load_config
from spritify.features.sprites.adapters.file_asset import FileAsset
from spritify.features.sprites.domain.directive import SpriteDirective, parse_directive
from spritify.features.sprites.domain.errors import (
    ConfigurationError,
    DirectiveParseError,
    ExecutionError,
    NoOutputFoundError,
    SpritifyError,
    ToolReportedError,
)
from spritify.features.sprites.usecases.sprite_filter import FilterResult, FilterState, SpriteFilter
from spritify.features.sprites.usecases.standalone_filter import StandaloneSpriteFilter

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DirectiveParseError",
    "ExecutionError",
    "FileAsset",
    "FilterConfig",
    "FilterResult",
    "FilterState",
    "LogLevel",
    "NoOutputFoundError",
    "SpriteDirective",
    "SpriteFilter",
    "SpritifyError",
    "StandaloneSpriteFilter",
    "ToolReportedError",
    "load_config",
    "parse_directive",
]
