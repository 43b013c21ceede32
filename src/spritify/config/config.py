"""Configuration management for spritify.

The filter is configured once from a ``[spritify]`` TOML table and the
resulting :class:`FilterConfig` is passed to every filter instance.
"""

from __future__ import annotations

import codecs
import re
import textwrap
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Final

from spritify.config.file_ops import ensure_file_with_template
from spritify.config.paths import default_cache_dir, default_config_path
from spritify.features.sprites.domain.errors import ConfigurationError
from spritify.platform.logging import logger

CONFIG_TABLE: Final[str] = "spritify"
DEFAULT_SPRITE_FILES: Final[str] = r"\.sprite$"
DEFAULT_CSS_FILES: Final[str] = r"\.s?css$"
DEFAULT_CSS_FILE_SUFFIX: Final[str] = "-sprite"

_TEMPLATE = textwrap.dedent(
    """
    # spritify configuration (TOML)
    #
    # Paths may use ~ for the home directory.

    [spritify]
    # Java executable used to launch SmartSprites.
    java = "java"

    # Jars placed on CLASSPATH for the SmartSprites process.
    classpath = [
        # "lib/smartsprites-0.2.6.jar",
        # "lib/args4j-2.0.9.jar",
        # "lib/google-collections-1.0-rc2.jar",
        # "lib/commons-lang-2.3.jar",
        # "lib/commons-io-1.4.jar",
    ]

    # One of WARN, IE6NOTICE, INFO.
    # log_level = "IE6NOTICE"

    # css_file_encoding = "UTF-8"
    # sprite_png_depth = 8
    # sprite_png_ie6 = false
    # css_file_suffix = "-sprite"

    # Root of the cache tree that mirrors the source layout.
    # cache_dir = "/tmp/spritify"

    # Regexes deciding which assets are sprite descriptors or stylesheets.
    # sprite_files = '\\.sprite$'
    # css_files = '\\.s?css$'

    # Files processed together with every spritified asset, relative to its source root.
    # bundle_files = ["Resources/public/css/common.scss"]

    # Working directory for the standalone filter. Defaults to the asset's source root.
    # tool_dir = "/opt/smartsprites"
    """
).strip() + "\n"


class LogLevel(str, Enum):
    """SmartSprites message levels accepted by ``--log-level``."""

    WARN = "WARN"
    IE6NOTICE = "IE6NOTICE"
    INFO = "INFO"

    @staticmethod
    def from_user_input(value: str) -> "LogLevel":
        """Translate a raw config value into the matching level."""

        normalized = value.strip().upper()
        for level in LogLevel:
            if level.value == normalized:
                return level
        valid: Final[str] = ", ".join(level.value for level in LogLevel)
        raise ConfigurationError(f"Unsupported log level '{value}'. Valid options: {valid}")


def _compile(pattern: str, key: str) -> str:
    try:
        _ = re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"Invalid regular expression for '{key}': {exc}") from exc
    return pattern


def _string_list(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(entry, str) for entry in value):
        raise ConfigurationError(f"{key} must be a list of strings")
    return tuple(value)


@dataclass(slots=True, frozen=True)
class FilterConfig:
    """Immutable settings shared by the sprite filters."""

    java: Path = Path("java")
    classpath: tuple[Path, ...] = ()
    css_file_encoding: str | None = None
    log_level: LogLevel | None = None
    sprite_png_depth: int | None = None
    sprite_png_ie6: bool = False
    css_file_suffix: str = DEFAULT_CSS_FILE_SUFFIX
    cache_dir: Path = field(default_factory=default_cache_dir)
    sprite_files: str = DEFAULT_SPRITE_FILES
    css_files: str = DEFAULT_CSS_FILES
    bundle_files: tuple[str, ...] = ()
    tool_dir: Path | None = None

    def __post_init__(self) -> None:
        if self.sprite_png_depth is not None and self.sprite_png_depth <= 0:
            raise ConfigurationError(
                f"sprite_png_depth must be positive, got {self.sprite_png_depth}"
            )
        _ = _compile(self.sprite_files, "sprite_files")
        _ = _compile(self.css_files, "css_files")
        if self.css_file_encoding is not None:
            try:
                _ = codecs.lookup(self.css_file_encoding)
            except LookupError as exc:
                raise ConfigurationError(
                    f"Unknown css_file_encoding '{self.css_file_encoding}'"
                ) from exc

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "FilterConfig":
        """Build a configuration from a parsed TOML table.

        Unknown keys are rejected so typos do not silently fall back to defaults.

        Args:
            values: Raw key/value pairs, typically the ``[spritify]`` table.

        Returns:
            FilterConfig: Validated configuration.

        Raises:
            ConfigurationError: If a key is unknown or a value has the wrong type.
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        try:
            for key, value in values.items():
                if key in {"java", "cache_dir", "tool_dir"}:
                    kwargs[key] = Path(str(value)).expanduser() if value else None
                elif key == "classpath":
                    entries = _string_list(value, key)
                    kwargs[key] = tuple(Path(entry).expanduser() for entry in entries)
                elif key == "bundle_files":
                    kwargs[key] = _string_list(value, key)
                elif key == "log_level":
                    kwargs[key] = LogLevel.from_user_input(str(value)) if value else None
                elif key == "sprite_png_depth":
                    kwargs[key] = int(value) if value is not None else None
                elif key == "sprite_png_ie6":
                    if not isinstance(value, bool):
                        raise ConfigurationError("sprite_png_ie6 must be a boolean")
                    kwargs[key] = value
                else:
                    kwargs[key] = str(value) if value is not None else None
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid configuration value: {exc}") from exc

        if "java" in kwargs and kwargs["java"] is None:
            raise ConfigurationError("java must not be empty")
        if "cache_dir" in kwargs and kwargs["cache_dir"] is None:
            del kwargs["cache_dir"]

        return cls(**kwargs)

    def with_overrides(self, **changes: Any) -> "FilterConfig":
        """Return a copy with selected fields replaced."""

        return replace(self, **changes)


def load_config(
    path: Path | None = None, *, env: Mapping[str, str] | None = None
) -> FilterConfig:
    """Load the filter configuration from TOML.

    A missing file yields the defaults.

    Args:
        path: Optional explicit path to the TOML file.
        env: Optional environment mapping used for path and cache overrides.

    Returns:
        FilterConfig: Parsed configuration.

    Raises:
        ConfigurationError: If the document cannot be parsed or validated.
    """
    config_file = path.expanduser().resolve() if path is not None else default_config_path(env)

    if not config_file.exists():
        logger.debug("No configuration at %s, using defaults", config_file)
        return FilterConfig(cache_dir=default_cache_dir(env))

    try:
        with open(config_file, "rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Failed to parse {config_file}: {exc}") from exc

    table = document.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"[{CONFIG_TABLE}] in {config_file} must be a table")

    values = dict(table)
    _ = values.setdefault("cache_dir", str(default_cache_dir(env)))

    config = FilterConfig.from_mapping(values)
    logger.info("Configuration loaded from %s", config_file)
    return config


def ensure_default_config(path: Path | None = None) -> Path:
    """Write the commented configuration template when none exists."""

    target = path if path is not None else default_config_path()
    if ensure_file_with_template(target, template_provider=lambda: _TEMPLATE):
        logger.info("Created default configuration at %s", target)
    return target


__all__ = [
    "CONFIG_TABLE",
    "FilterConfig",
    "LogLevel",
    "ensure_default_config",
    "load_config",
]
