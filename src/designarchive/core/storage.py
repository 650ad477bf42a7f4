"""
Keyed persistent storage.

Each key is an independent record stored as its own file, so a corrupted
favorites record never affects the theme record and vice versa. Values are
serialized text; callers own the format. Writes are atomic (temp file in
the same directory, then replace).
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from pathlib import Path

from designarchive.core.errors import PersistenceError

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore:
    """Directory-backed string store with one file per key."""

    SUFFIX = ".json"

    def __init__(self, root: Path):
        """Initialize store.

        Args:
            root: Directory holding one file per key (created on first write)
        """
        self.root = Path(root)

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}{self.SUFFIX}"

    def __contains__(self, key: str) -> bool:
        return self._path_for(key).is_file()

    def get(self, key: str) -> str | None:
        """Read the raw value for a key.

        Returns:
            Stored text, or None if the key has never been written

        Raises:
            PersistenceError: If the record exists but cannot be read
        """
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {key}: {e}", source=str(path)) from e

    def set(self, key: str, value: str) -> None:
        """Atomically write the raw value for a key.

        Raises:
            PersistenceError: If the directory or file cannot be written
        """
        path = self._path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                suffix=self.SUFFIX,
                prefix=f".{path.name}.",
                dir=path.parent,
                text=True,
            )
        except OSError as e:
            raise PersistenceError(f"Cannot write {key}: {e}", source=str(path)) from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            Path(temp_path).replace(path)
        except OSError as e:
            with contextlib.suppress(OSError):
                Path(temp_path).unlink()
            raise PersistenceError(f"Failed to write {path}: {e}", source=str(path)) from e

    def remove(self, key: str) -> bool:
        """Delete a record.

        Returns:
            True if deleted, False if it did not exist
        """
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise PersistenceError(f"Cannot remove {key}: {e}", source=str(path)) from e
        return True
