"""Configuration management for pathmap."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathmap.config.paths import default_config_path
from pathmap.features.path import ExtensionEditor, InvalidSeparatorError, PathDecomposer
from pathmap.features.path.domain.extension import DEFAULT_ALT_SEPARATOR
from pathmap.features.path.domain.separators import DEFAULT_SEPARATOR, validate_separator
from pathmap.platform.logging import logger


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration in {source}: {reason}")
        self.source: Path = source
        self.reason: str = reason


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Separator between path components
    separator: str = DEFAULT_SEPARATOR

    # Second separator recognized when locating extensions ("" disables it)
    alt_separator: str | None = DEFAULT_ALT_SEPARATOR

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and check separators.

        Raises:
            InvalidSeparatorError: If a configured separator is not a single
                character.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.separator = validate_separator(self.separator)
        if self.alt_separator:
            self.alt_separator = validate_separator(self.alt_separator)
        else:
            self.alt_separator = None

    def decomposer(self) -> PathDecomposer:
        """Build a decomposer for the configured separator."""
        return PathDecomposer(self.separator)

    def extension_editor(self) -> ExtensionEditor:
        """Build an extension editor for the configured separators."""
        return ExtensionEditor(self.separator, self.alt_separator)

    @classmethod
    def from_dict(cls, values: dict[str, Any], source: Path) -> "Config":
        """Build a configuration from parsed TOML values.

        Args:
            values: Mapping read from the configuration file.
            source: File the values came from, used in error messages.

        Returns:
            Config: Configuration object.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(source, f"unknown keys: {', '.join(unknown)}")

        for key in ("separator", "alt_separator", "log_file"):
            value = values.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(source, f"'{key}' must be a string")

        try:
            return cls(**values)
        except InvalidSeparatorError as e:
            raise ConfigError(source, str(e)) from e

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when the file
                does not exist.

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML or holds
                invalid values.
        """
        if config_file is None:
            if cls._instance is not None:
                return cls._instance
            config_file = default_config_path()

        try:
            if not config_file.exists():
                logger.debug("No configuration file at %s; using defaults", config_file)
                config = cls()
            else:
                try:
                    with open(config_file, "rb") as f:
                        config_dict = tomllib.load(f)
                except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
                    raise ConfigError(config_file, str(e)) from e

                config = cls.from_dict(config_dict, config_file)
                logger.info(
                    "Configuration loaded",
                    extra={"path_event": "config.loaded", "path": str(config_file)},
                )
        except ConfigError as e:
            logger.error(
                "Failed to load configuration: %s",
                e.reason,
                extra={"path_event": "config.error", "path": str(config_file)},
            )
            raise

        cls._instance = config
        return config

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration."""
        cls._instance = None


__all__ = ["Config", "ConfigError"]
