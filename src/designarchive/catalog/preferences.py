"""Persisted theme preference."""

from __future__ import annotations

import logging

from designarchive.core.errors import PersistenceError
from designarchive.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
DEFAULT_KEY = "designArchiveTheme"


class ThemePreference:
    """Dark/light preference stored under its own key."""

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_KEY, default: str = "light"):
        self.storage = storage
        self.key = key
        self.default = default if default in THEMES else "light"
        self.theme = self.default

    @property
    def is_dark(self) -> bool:
        return self.theme == "dark"

    def load(self) -> str:
        """Load the saved theme, using the default for missing or invalid values."""
        try:
            raw = self.storage.get(self.key)
        except PersistenceError as e:
            logger.error("Cannot read theme: %s", e.message)
            raw = None

        value = raw.strip() if raw else None
        if value in THEMES:
            self.theme = value  # type: ignore[assignment]
        else:
            if value:
                logger.error("Unknown theme %r, discarding", value)
                try:
                    self.storage.remove(self.key)
                except PersistenceError as e:
                    logger.warning("Cannot remove theme record: %s", e.message)
            self.theme = self.default
        return self.theme

    def set(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Theme must be one of {', '.join(THEMES)}")
        self.theme = theme
        try:
            self.storage.set(self.key, theme)
        except PersistenceError as e:
            logger.warning("Theme not saved: %s", e.message)
        return self.theme

    def toggle(self) -> str:
        return self.set("light" if self.is_dark else "dark")
