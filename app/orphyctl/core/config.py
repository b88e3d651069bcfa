"""Cleaner configuration and settings.

This module provides the configuration model and I/O functions for the
alias table, ignore list and data-source locations used by a run.

Configuration is stored in ~/.config/orphyctl/config.toml. A missing
file means defaults; user entries extend the built-in alias table and
ignore list rather than replacing them.
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from orphyctl.classifier.aliases import DEFAULT_ALIASES
from orphyctl.classifier.ignore import DEFAULT_IGNORED_PATHS
from orphyctl.classifier.normalize import normalize
from orphyctl.core.paths import PORTABLE_APPS_DIR, SYSTEM_DESKTOP_DIR, get_config_path

logger = logging.getLogger(__name__)


class CleanerConfig(BaseModel):
    """Configuration for a scan-and-clean run.

    Attributes:
        aliases: Extra folder basename -> canonical app name entries.
        ignored_paths: Extra path prefixes excluded from scanning.
        desktop_dirs: Directories searched for ``*.desktop`` launchers.
        portable_dir: Directory searched for AppImage bundles.
    """

    model_config = ConfigDict(extra="forbid")

    aliases: Annotated[
        dict[str, str],
        Field(description="Folder basename to canonical app name"),
    ] = {}
    ignored_paths: Annotated[
        list[str],
        Field(description="Additional ignored path prefixes (~ allowed)"),
    ] = []
    desktop_dirs: Annotated[
        list[str],
        Field(description="Directories holding .desktop launchers"),
    ] = [SYSTEM_DESKTOP_DIR]
    portable_dir: Annotated[
        str,
        Field(min_length=1, description="Directory holding AppImages"),
    ] = PORTABLE_APPS_DIR

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject empty alias entries and normalize targets.

        Installed-software names are compared in normalized form, so a
        target such as "Foo Bar" is stored as "foo-bar".
        """
        resolved: dict[str, str] = {}
        for key, value in v.items():
            if not key or not value.strip():
                msg = f"alias entries must be non-empty, got {key!r} = {value!r}"
                raise ValueError(msg)
            resolved[key] = normalize(value.strip())
        return resolved

    @field_validator("ignored_paths")
    @classmethod
    def validate_ignored_paths(cls, v: list[str]) -> list[str]:
        """Require absolute or home-relative ignore entries."""
        for entry in v:
            if not (entry.startswith("/") or entry == "~" or entry.startswith("~/")):
                msg = f"ignored path must be absolute or start with '~/': {entry!r}"
                raise ValueError(msg)
        return v

    @property
    def effective_aliases(self) -> Mapping[str, str]:
        """Built-in aliases overlaid with user entries."""
        return {**DEFAULT_ALIASES, **self.aliases}

    @property
    def effective_ignored_paths(self) -> tuple[str, ...]:
        """Built-in ignore list followed by user entries, deduplicated."""
        return tuple(dict.fromkeys((*DEFAULT_IGNORED_PATHS, *self.ignored_paths)))


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> CleanerConfig:
    """Load configuration from a TOML file.

    A missing file is not an error; defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CleanerConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or violates the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return CleanerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return CleanerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: CleanerConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The CleanerConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
