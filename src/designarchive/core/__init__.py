"""Core utilities for design-archive."""

from designarchive.core.config import ArchivePaths, Settings, get_paths, load_settings
from designarchive.core.errors import (
    ArchiveError,
    AssetLoadError,
    DataLoadError,
    NetworkError,
    PersistenceError,
)
from designarchive.core.storage import KeyValueStore
from designarchive.core.timing import BurstGate, Debouncer

__all__ = [
    # Config
    "ArchivePaths",
    "Settings",
    "get_paths",
    "load_settings",
    # Errors
    "ArchiveError",
    "DataLoadError",
    "PersistenceError",
    "AssetLoadError",
    "NetworkError",
    # Storage
    "KeyValueStore",
    # Timing
    "Debouncer",
    "BurstGate",
]
