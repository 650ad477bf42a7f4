"""Tests for designarchive.catalog.favorites module."""

import json
from unittest.mock import patch

import pytest

from designarchive.catalog.favorites import FavoritesStore
from designarchive.core.errors import PersistenceError


class TestFavoritesStore:
    """Tests for FavoritesStore."""

    def test_load_missing_is_empty(self, storage):
        assert FavoritesStore(storage).load() == set()

    def test_toggle_adds_and_removes(self, favorites_store):
        assert favorites_store.toggle(3) is True
        assert favorites_store.is_favorite(3)
        assert favorites_store.toggle(3) is False
        assert 3 not in favorites_store

    def test_toggle_persists(self, storage, favorites_store):
        favorites_store.toggle(5)
        favorites_store.toggle(2)

        assert json.loads(storage.get("designArchiveFavorites")) == [2, 5]
        reloaded = FavoritesStore(storage)
        assert reloaded.load() == {2, 5}

    def test_corrupted_record_is_discarded(self, storage, caplog):
        storage.set("designArchiveFavorites", "{not json")

        store = FavoritesStore(storage)

        assert store.load() == set()
        assert storage.get("designArchiveFavorites") is None
        assert "Cannot parse favorites" in caplog.text

    def test_wrong_shape_is_discarded(self, storage):
        storage.set("designArchiveFavorites", json.dumps({"ids": [1]}))
        assert FavoritesStore(storage).load() == set()

    @pytest.mark.parametrize("raw", ["[1, Infinity]", "[1e400]", "[NaN]"])
    def test_non_finite_ids_are_discarded(self, storage, raw):
        storage.set("designArchiveFavorites", raw)

        assert FavoritesStore(storage).load() == set()
        assert storage.get("designArchiveFavorites") is None

    def test_booleans_are_ignored(self, storage):
        storage.set("designArchiveFavorites", json.dumps([1, True, 3]))
        assert FavoritesStore(storage).load() == {1, 3}

    def test_save_failure_keeps_memory(self, favorites_store, caplog):
        with patch.object(
            favorites_store.storage, "set", side_effect=PersistenceError("disk full")
        ):
            assert favorites_store.toggle(7) is True
            assert favorites_store.save() is False

        assert favorites_store.is_favorite(7)
        assert "Favorites not saved" in caplog.text

    def test_read_failure_starts_empty(self, storage):
        with patch.object(storage, "get", side_effect=PersistenceError("unreadable")):
            assert FavoritesStore(storage).load() == set()

    def test_save_explicit_set(self, storage, favorites_store):
        assert favorites_store.save({9, 1}) is True
        assert favorites_store.ids == frozenset({1, 9})
        assert len(favorites_store) == 2

    def test_custom_key(self, storage):
        store = FavoritesStore(storage, key="otherFavorites")
        store.toggle(1)
        assert "otherFavorites" in storage
        assert "designArchiveFavorites" not in storage
