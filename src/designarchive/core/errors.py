"""
Error taxonomy for the archive.

None of these are fatal to a running session. Each one is recovered at the
layer that raises it (fallback dataset, in-memory defaults, placeholder
image, cache fallback chain) and only logged.
"""

from __future__ import annotations


class ArchiveError(Exception):
    """Base exception for archive errors."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(message)


class DataLoadError(ArchiveError):
    """Corpus could not be fetched or parsed."""
    pass


class PersistenceError(ArchiveError):
    """Keyed storage could not be read, written or parsed."""
    pass


class AssetLoadError(ArchiveError):
    """A single image resource failed to load."""
    pass


class NetworkError(ArchiveError):
    """Network request failed at the offline cache boundary."""

    def __init__(self, message: str, source: str | None = None, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, source=source)
