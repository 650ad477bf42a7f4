"""Tests for designarchive.offline.cache module.

Covers:
  - Cache / CacheStorage persistence
  - install() all-or-nothing pre-fetch
  - activate() keeping exactly the live version
  - fetch() cache-first handling and the offline fallback chain
"""

from unittest.mock import MagicMock

import pytest
import requests

from designarchive.core.errors import NetworkError
from designarchive.offline.cache import (
    CACHE_NAME,
    CORE_ASSETS,
    PLACEHOLDER_SVG,
    CachedResponse,
    CacheRequest,
    CacheStorage,
    OfflineCache,
)

ORIGIN = "http://localhost:8000"


def _response(status=200, body=b"ok", content_type="text/plain"):
    response = MagicMock()
    response.status_code = status
    response.headers = {"Content-Type": content_type}
    response.content = body
    return response


@pytest.fixture
def cache_storage(tmp_path):
    return CacheStorage(tmp_path / "caches")


@pytest.fixture
def http():
    session = MagicMock()
    session.request.return_value = _response()
    return session


@pytest.fixture
def offline(cache_storage, http):
    return OfflineCache(
        cache_storage,
        origin=ORIGIN,
        manifest=["/", "/index.html", "/data.json"],
        session=http,
    )


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------

class TestCacheStorage:
    """Tests for Cache and CacheStorage."""

    def test_put_and_match(self, cache_storage):
        cache = cache_storage.open("v1")
        cache.put("http://a/x", CachedResponse("http://a/x", 200, {"A": "b"}, b"body"))

        hit = cache.match("http://a/x")

        assert hit.status == 200
        assert hit.body == b"body"
        assert hit.headers == {"A": "b"}
        assert cache.keys() == ["http://a/x"]

    def test_miss(self, cache_storage):
        assert cache_storage.open("v1").match("http://a/missing") is None
        assert cache_storage.match("http://a/missing") is None

    def test_delete_entry(self, cache_storage):
        cache = cache_storage.open("v1")
        cache.put("http://a/x", CachedResponse("http://a/x", 200))
        assert cache.delete("http://a/x") is True
        assert cache.delete("http://a/x") is False

    def test_named_caches(self, cache_storage):
        cache_storage.open("v1").put("http://a/x", CachedResponse("http://a/x", 200))
        cache_storage.open("v2").put("http://a/y", CachedResponse("http://a/y", 200))

        assert cache_storage.keys() == ["v1", "v2"]
        assert cache_storage.match("http://a/y").url == "http://a/y"
        assert cache_storage.delete("v1") is True
        assert not cache_storage.has("v1")


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle:
    """Tests for install() and activate()."""

    def test_default_manifest(self, cache_storage):
        handler = OfflineCache(cache_storage, session=MagicMock())
        assert handler.manifest == CORE_ASSETS
        assert handler.cache_name == CACHE_NAME

    def test_install_stores_manifest(self, offline, http):
        stored = offline.install()

        assert stored == [f"{ORIGIN}/", f"{ORIGIN}/index.html", f"{ORIGIN}/data.json"]
        assert sorted(offline.cache.keys()) == sorted(stored)
        assert http.request.call_count == 3

    def test_install_is_all_or_nothing(self, offline, http):
        http.request.side_effect = [_response(), _response(status=404), _response()]

        with pytest.raises(NetworkError) as exc_info:
            offline.install()

        assert exc_info.value.status_code == 404
        assert offline.cache.keys() == []

    def test_install_transport_failure(self, offline, http):
        http.request.side_effect = requests.ConnectionError("offline")
        with pytest.raises(NetworkError):
            offline.install()

    def test_activate_keeps_only_live(self, offline, cache_storage):
        for name in ("design-archive-v0", "other", CACHE_NAME):
            cache_storage.open(name).put("http://a/x", CachedResponse("http://a/x", 200))

        deleted = offline.activate()

        assert sorted(deleted) == ["design-archive-v0", "other"]
        assert cache_storage.keys() == [CACHE_NAME]


# ---------------------------------------------------------------------------
# Request handling
# ---------------------------------------------------------------------------

class TestFetch:
    """Tests for fetch()."""

    def test_cache_first(self, offline, http):
        http.request.return_value = _response(body=b"style")

        first = offline.fetch(CacheRequest("/style.css"))
        second = offline.fetch(CacheRequest("/style.css"))

        assert http.request.call_count == 1
        assert first.body == second.body == b"style"

    def test_cached_entry_served_without_network(self, offline, http):
        offline.cache.put(f"{ORIGIN}/a.js", CachedResponse(f"{ORIGIN}/a.js", 200, body=b"js"))
        assert offline.fetch(CacheRequest("/a.js")).body == b"js"
        http.request.assert_not_called()

    def test_cache_write_failure_still_returns_response(self, offline, cache_storage, http, caplog):
        cache_storage.root.mkdir(parents=True)
        (cache_storage.root / CACHE_NAME).write_text("not a directory")
        http.request.return_value = _response(body=b"style")

        response = offline.fetch(CacheRequest("/style.css"))

        assert response.status == 200
        assert response.body == b"style"
        assert "Response not cached" in caplog.text

    def test_put_leaves_no_temp_files(self, cache_storage):
        cache = cache_storage.open("v1")
        cache.put("http://a/x", CachedResponse("http://a/x", 200, body=b"one"))
        cache.put("http://a/x", CachedResponse("http://a/x", 200, body=b"two"))

        assert cache.match("http://a/x").body == b"two"
        assert len(list(cache.directory.iterdir())) == 2

    def test_cross_origin_not_stored(self, offline, http):
        url = "https://images.example.com/a.jpg"
        response = offline.fetch(CacheRequest(url))
        assert response.type == "cors"
        assert offline.cache.match(url) is None

    def test_non_200_not_stored(self, offline, http):
        http.request.return_value = _response(status=404)
        response = offline.fetch(CacheRequest("/missing"))
        assert response.status == 404
        assert offline.cache.match(f"{ORIGIN}/missing") is None

    def test_non_get_passes_through(self, offline, http):
        offline.fetch(CacheRequest("/api", method="POST"))
        offline.fetch(CacheRequest("/api", method="POST"))
        assert http.request.call_count == 2
        assert http.request.call_args[0][0] == "POST"
        assert offline.cache.keys() == []

    def test_extension_scheme_passes_through(self, offline, http):
        offline.fetch(CacheRequest("chrome-extension://abc/script.js"))
        assert offline.cache.keys() == []

    def test_html_fallback_serves_root_document(self, offline, http):
        offline.cache.put(
            f"{ORIGIN}/index.html", CachedResponse(f"{ORIGIN}/index.html", 200, body=b"<html>")
        )
        http.request.side_effect = requests.ConnectionError("offline")

        response = offline.fetch(CacheRequest("/about", accept="text/html,application/xhtml+xml"))

        assert response.body == b"<html>"

    def test_image_fallback_is_placeholder(self, offline, http):
        http.request.side_effect = requests.ConnectionError("offline")

        response = offline.fetch(CacheRequest("https://cdn.example/x.jpg", accept="image/webp,*/*"))

        assert response.type == "synthetic"
        assert response.headers["Content-Type"] == "image/svg+xml"
        assert response.text == PLACEHOLDER_SVG

    def test_other_failure_raises(self, offline, http):
        http.request.side_effect = requests.ConnectionError("offline")
        with pytest.raises(NetworkError):
            offline.fetch(CacheRequest("/data.json", accept="application/json"))

    def test_html_fallback_without_root_raises(self, offline, http):
        http.request.side_effect = requests.ConnectionError("offline")
        with pytest.raises(NetworkError):
            offline.fetch(CacheRequest("/about", accept="text/html"))


class TestOrigin:
    """Tests for origin helpers."""

    def test_resolve_and_same_origin(self, offline):
        assert offline.resolve("/x") == f"{ORIGIN}/x"
        assert offline.is_same_origin("/x")
        assert not offline.is_same_origin("https://other.example/x")
