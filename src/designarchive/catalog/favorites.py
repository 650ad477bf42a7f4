"""
Persisted favorites.

Favorites are a set of record ids stored as a JSON array under one storage
key. Loading never fails: a corrupted record is discarded and an empty set
is used. Saving is best-effort: a failed write is logged and the in-memory
set stays authoritative for the session.
"""

from __future__ import annotations

import json
import logging

from designarchive.core.errors import PersistenceError
from designarchive.core.storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "designArchiveFavorites"


class FavoritesStore:
    """Set of favorited record ids backed by keyed storage."""

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_KEY):
        self.storage = storage
        self.key = key
        self._ids: set[int] = set()

    def __contains__(self, record_id: int) -> bool:
        return record_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def ids(self) -> frozenset[int]:
        return frozenset(self._ids)

    def load(self) -> set[int]:
        """Load favorites from storage.

        Returns:
            The loaded id set (empty on missing or corrupted data)
        """
        self._ids = self._read()
        return set(self._ids)

    def _read(self) -> set[int]:
        try:
            raw = self.storage.get(self.key)
        except PersistenceError as e:
            logger.error("Cannot read favorites: %s", e.message)
            return set()
        if raw is None:
            return set()

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("expected a list of ids")
            return {int(v) for v in data if not isinstance(v, bool)}
        except (ValueError, TypeError, OverflowError) as e:
            logger.error("Cannot parse favorites, discarding: %s", e)
            self._discard()
            return set()

    def _discard(self) -> None:
        try:
            self.storage.remove(self.key)
        except PersistenceError as e:
            logger.warning("Cannot remove corrupted favorites: %s", e.message)

    def save(self, ids: set[int] | frozenset[int] | None = None) -> bool:
        """Persist favorites.

        Args:
            ids: Set to persist (defaults to the current in-memory set)

        Returns:
            True if written, False if the write failed (logged)
        """
        if ids is not None:
            self._ids = set(ids)
        try:
            self.storage.set(self.key, json.dumps(sorted(self._ids)))
        except PersistenceError as e:
            logger.warning("Favorites not saved: %s", e.message)
            return False
        return True

    def is_favorite(self, record_id: int) -> bool:
        return record_id in self._ids

    def toggle(self, record_id: int) -> bool:
        """Flip membership of an id and persist.

        Returns:
            New membership (True if now a favorite)
        """
        if record_id in self._ids:
            self._ids.discard(record_id)
            member = False
        else:
            self._ids.add(record_id)
            member = True
        self.save()
        return member
