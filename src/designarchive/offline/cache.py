"""
Offline cache protocol.

A versioned, named cache of responses kept on disk. The protocol:

- install: pre-fetch a fixed manifest of core assets into the live cache
  (all or nothing)
- activate: delete every cache whose name is not the live version, so
  exactly one version survives
- fetch: serve GET requests cache-first; on a miss go to the network and
  store successful same-origin responses; on network failure fall back to
  the cached root document for HTML requests or a synthesized placeholder
  for image requests

Non-GET requests and browser-extension URLs are never intercepted.
"""

from __future__ import annotations

import contextlib
import hashlib
import json
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urljoin, urlsplit

import requests

from designarchive.core.errors import NetworkError

logger = logging.getLogger(__name__)

CACHE_NAME = "design-archive-v1"
ROOT_DOCUMENT = "/index.html"
IGNORED_SCHEME = "chrome-extension"
REQUEST_TIMEOUT = 10

CORE_ASSETS = [
    "/",
    "/index.html",
    "/style.css",
    "/script.js",
    "/data.json",
    "https://images.unsplash.com/photo-1581094794329-c8112a89af12?auto=format&fit=crop&w=800&q=80",
    "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?auto=format&fit=crop&w=800&q=80",
    "https://images.unsplash.com/photo-1611224923853-80b023f02d71?auto=format&fit=crop&w=800&q=80",
]

PLACEHOLDER_SVG = (
    '<svg width="400" height="300" xmlns="http://www.w3.org/2000/svg">'
    '<rect width="400" height="300" fill="#f5f5f7"/>'
    '<text x="200" y="150" text-anchor="middle" fill="#999" '
    'font-family="Arial" font-size="16">Image loading...</text></svg>'
)


@dataclass
class CacheRequest:
    """An outgoing read request."""

    url: str
    method: str = "GET"
    accept: str = "*/*"


@dataclass
class CachedResponse:
    """A response as stored in (or served from) the cache."""

    url: str
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    type: str = "basic"  # basic (same-origin), cors, opaque, synthetic

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def _entry_key(url: str) -> str:
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


def _atomic_write(path: Path, data: bytes) -> None:
    temp_fd, temp_path = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(temp_fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        Path(temp_path).replace(path)
    except OSError:
        with contextlib.suppress(OSError):
            Path(temp_path).unlink()
        raise


class Cache:
    """One named cache: a directory of response entries keyed by URL."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    @property
    def name(self) -> str:
        return self.directory.name

    def _paths(self, url: str) -> tuple[Path, Path]:
        key = _entry_key(url)
        return self.directory / f"{key}.json", self.directory / f"{key}.body"

    def match(self, url: str) -> CachedResponse | None:
        meta_path, body_path = self._paths(url)
        if not meta_path.is_file():
            return None
        try:
            meta = json.loads(meta_path.read_text(encoding="utf-8"))
            body = body_path.read_bytes() if body_path.exists() else b""
        except (OSError, ValueError):
            logger.debug("Unreadable cache entry for %s", url, exc_info=True)
            return None
        return CachedResponse(
            url=meta.get("url", url),
            status=int(meta.get("status", 200)),
            headers=dict(meta.get("headers", {})),
            body=body,
            type=meta.get("type", "basic"),
        )

    def put(self, url: str, response: CachedResponse) -> None:
        """Store a response; the metadata file is written last.

        Raises:
            OSError: If the cache directory or entry cannot be written
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        meta_path, body_path = self._paths(url)
        _atomic_write(body_path, response.body)
        meta = {
            "url": url,
            "status": response.status,
            "headers": response.headers,
            "type": response.type,
        }
        _atomic_write(meta_path, json.dumps(meta, indent=2).encode("utf-8"))

    def delete(self, url: str) -> bool:
        meta_path, body_path = self._paths(url)
        existed = meta_path.exists()
        for path in (meta_path, body_path):
            path.unlink(missing_ok=True)
        return existed

    def keys(self) -> list[str]:
        """URLs stored in this cache."""
        if not self.directory.is_dir():
            return []
        urls = []
        for meta_path in sorted(self.directory.glob("*.json")):
            try:
                urls.append(json.loads(meta_path.read_text(encoding="utf-8"))["url"])
            except (OSError, ValueError, KeyError):
                continue
        return urls


class CacheStorage:
    """Collection of named caches under one root directory."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def open(self, name: str) -> Cache:
        return Cache(self.root / name)

    def has(self, name: str) -> bool:
        return (self.root / name).is_dir()

    def keys(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir() if p.is_dir())

    def delete(self, name: str) -> bool:
        path = self.root / name
        if not path.is_dir():
            return False
        shutil.rmtree(path)
        return True

    def match(self, url: str) -> CachedResponse | None:
        """First match across all caches."""
        for name in self.keys():
            response = self.open(name).match(url)
            if response is not None:
                return response
        return None


class OfflineCache:
    """Cache-first request handler with a single live cache version."""

    def __init__(
        self,
        storage: CacheStorage,
        cache_name: str = CACHE_NAME,
        origin: str = "http://localhost",
        manifest: list[str] | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize handler.

        Args:
            storage: Where named caches live
            cache_name: Live version name
            origin: Origin that counts as same-origin (scheme://host[:port])
            manifest: Core asset URLs pre-fetched on install
            session: requests session used for network access
        """
        self.storage = storage
        self.cache_name = cache_name
        self.origin = origin.rstrip("/")
        self.manifest = list(CORE_ASSETS if manifest is None else manifest)
        self.session = session or requests.Session()

    @property
    def cache(self) -> Cache:
        return self.storage.open(self.cache_name)

    def resolve(self, url: str) -> str:
        """Make a URL absolute against the origin."""
        return urljoin(self.origin + "/", url)

    def is_same_origin(self, url: str) -> bool:
        target = urlsplit(self.resolve(url))
        origin = urlsplit(self.origin)
        return (target.scheme, target.netloc) == (origin.scheme, origin.netloc)

    def intercepts(self, request: CacheRequest) -> bool:
        if request.method.upper() != "GET":
            return False
        return IGNORED_SCHEME not in request.url

    # --- lifecycle ---

    def install(self) -> list[str]:
        """Pre-fetch the manifest into the live cache.

        Returns:
            URLs stored

        Raises:
            NetworkError: If any manifest asset fails; nothing is stored then
        """
        logger.info("Installing cache %s", self.cache_name)
        fetched: list[tuple[str, CachedResponse]] = []
        for url in self.manifest:
            absolute = self.resolve(url)
            response = self._network(CacheRequest(absolute))
            if not response.ok:
                raise NetworkError(
                    f"Manifest asset failed ({response.status})",
                    source=absolute,
                    status_code=response.status,
                )
            fetched.append((absolute, response))

        cache = self.cache
        for absolute, response in fetched:
            cache.put(absolute, response)
        logger.info("Cached %d core assets", len(fetched))
        return [url for url, _ in fetched]

    def activate(self) -> list[str]:
        """Delete every cache that is not the live version.

        Returns:
            Names of deleted caches
        """
        deleted = []
        for name in self.storage.keys():
            if name != self.cache_name:
                logger.info("Deleting old cache: %s", name)
                self.storage.delete(name)
                deleted.append(name)
        return deleted

    # --- request handling ---

    def _network(self, request: CacheRequest) -> CachedResponse:
        try:
            response = self.session.request(
                request.method.upper(),
                request.url,
                headers={"Accept": request.accept},
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Request failed: {e}", source=request.url) from e

        return CachedResponse(
            url=request.url,
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            type="basic" if self.is_same_origin(request.url) else "cors",
        )

    def fetch(self, request: CacheRequest) -> CachedResponse:
        """Handle one outgoing request.

        Raises:
            NetworkError: When the network fails and no fallback applies
        """
        request = CacheRequest(self.resolve(request.url), request.method, request.accept)

        if not self.intercepts(request):
            return self._network(request)

        cached = self.storage.match(request.url)
        if cached is not None:
            logger.debug("Cache hit: %s", request.url)
            return cached

        try:
            response = self._network(request)
        except NetworkError as e:
            logger.info("Network request failed: %s", e.message)
            fallback = self._fallback(request)
            if fallback is None:
                raise
            return fallback

        if response.status == 200 and response.type == "basic":
            try:
                self.cache.put(request.url, response)
            except OSError as e:
                logger.warning("Response not cached for %s: %s", request.url, e)
        return response

    def _fallback(self, request: CacheRequest) -> CachedResponse | None:
        accept = request.accept.lower()
        if "text/html" in accept:
            return self.storage.match(self.resolve(ROOT_DOCUMENT))
        if "image" in accept:
            return CachedResponse(
                url=request.url,
                status=200,
                headers={"Content-Type": "image/svg+xml"},
                body=PLACEHOLDER_SVG.encode("utf-8"),
                type="synthetic",
            )
        return None
