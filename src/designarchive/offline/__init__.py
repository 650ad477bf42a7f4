"""
Offline cache.

Versioned, cache-first request handling with network fallbacks.
"""

from designarchive.offline.cache import (
    CACHE_NAME,
    CORE_ASSETS,
    Cache,
    CachedResponse,
    CacheRequest,
    CacheStorage,
    OfflineCache,
)

__all__ = [
    "CACHE_NAME",
    "CORE_ASSETS",
    "Cache",
    "CacheStorage",
    "CacheRequest",
    "CachedResponse",
    "OfflineCache",
]
