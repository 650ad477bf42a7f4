"""
Configuration and path management.

Provides data directory detection, standard paths and runtime settings.

Resolution order for the data directory:
  1. DESIGN_ARCHIVE_HOME environment variable (highest priority)
  2. $XDG_DATA_HOME/design-archive
  3. ~/.local/share/design-archive

Settings are layered: built-in defaults, then the global config file
(~/.config/design-archive/config.yaml), then config.yaml in the data
directory.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

APP_NAME = "design-archive"


@dataclass(frozen=True)
class ArchivePaths:
    """Standard paths for archive data."""

    root: Path
    config_file: Path
    storage: Path
    caches: Path


@dataclass
class Settings:
    """Runtime settings for a browsing session."""

    data_source: str = "data.json"
    page_size: int = 12
    lazy_load_margin: int = 100
    debounce_delay: float = 0.3
    scroll_threshold: int = 500
    scroll_quiet_period: float = 0.1
    default_theme: str = "light"
    cache_name: str = "design-archive-v1"
    origin: str = "http://localhost"
    favorites_key: str = "designArchiveFavorites"
    theme_key: str = "designArchiveTheme"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Build settings from a config mapping, ignoring unknown keys.

        Values are coerced to the type of the field default so that
        strings coming from ``config set`` round-trip correctly.
        """
        settings = cls()
        for f in fields(cls):
            if f.name not in data or data[f.name] is None:
                continue
            default = getattr(settings, f.name)
            try:
                value = type(default)(data[f.name])
            except (TypeError, ValueError):
                continue
            setattr(settings, f.name, value)
        if settings.page_size < 1:
            settings.page_size = cls.page_size
        return settings

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def get_global_config_path() -> Path:
    """Return the path to the global config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to
    ~/.config/design-archive/config.yaml.

    Returns:
        Path to global config file (may not exist).
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME / "config.yaml"


def _load_yaml_mapping(config_path: Path) -> dict:
    if not config_path.is_file():
        return {}
    try:
        text = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
        if isinstance(data, dict):
            return data
        return {}
    except (OSError, yaml.YAMLError):
        return {}


def load_global_config() -> dict:
    """Load the global configuration.

    Returns:
        Configuration dict, or empty dict if file is missing or invalid.
    """
    return _load_yaml_mapping(get_global_config_path())


def find_data_root() -> Path:
    """Find the data directory.

    Resolution order:
      1. DESIGN_ARCHIVE_HOME environment variable
      2. XDG_DATA_HOME/design-archive
      3. ~/.local/share/design-archive

    Returns:
        Path to the data directory (may not exist yet)
    """
    env_root = os.environ.get("DESIGN_ARCHIVE_HOME")
    if env_root:
        return Path(env_root).expanduser().resolve()

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home:
        return Path(xdg_data_home) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def get_paths(data_root: Path | None = None) -> ArchivePaths:
    """Get all standard paths.

    Args:
        data_root: Data directory (resolved from the environment if not provided)

    Returns:
        ArchivePaths dataclass with all paths
    """
    if data_root is None:
        data_root = find_data_root()

    data_root = Path(data_root)

    return ArchivePaths(
        root=data_root,
        config_file=data_root / "config.yaml",
        storage=data_root / "storage",
        caches=data_root / "caches",
    )


def load_local_config(data_root: Path | None = None) -> dict[str, Any]:
    """Load config.yaml from the data directory only."""
    return _load_yaml_mapping(get_paths(data_root).config_file)


def load_config(data_root: Path | None = None) -> dict[str, Any]:
    """Load the merged configuration mapping (global, then local)."""
    merged: dict[str, Any] = dict(load_global_config())
    merged.update(load_local_config(data_root))
    return merged


def save_config(config: dict[str, Any], data_root: Path | None = None) -> Path:
    """Save the local configuration file (YAML format)."""
    config_path = get_paths(data_root).config_file
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(yaml.dump(config, default_flow_style=False, sort_keys=False))
    return config_path


def load_settings(data_root: Path | None = None) -> Settings:
    """Load settings for the given data directory."""
    return Settings.from_dict(load_config(data_root))
